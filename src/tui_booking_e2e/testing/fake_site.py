from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from tui_booking_e2e.domain.enums import SAVE_BUTTON_LABELS, TOLERANCE_LABELS, SaveFormName
from tui_booking_e2e.pages.components.departure_airport_filter import DepartureAirportSelectors
from tui_booking_e2e.pages.components.departure_date_filter import DepartureDateSelectors
from tui_booking_e2e.pages.components.destination_airport_filter import DestinationAirportSelectors
from tui_booking_e2e.pages.components.main_filter import MainFilterSelectors
from tui_booking_e2e.pages.components.travelers_filter import TravelersSelectors
from tui_booking_e2e.pages.hotel_details_page import HotelDetailsSelectors
from tui_booking_e2e.pages.main_page import MainPage, MainPageSelectors
from tui_booking_e2e.pages.passenger_details_page import PassengerDetailsSelectors
from tui_booking_e2e.pages.passenger_details_validator import PassengerDetailsValidatorSelectors
from tui_booking_e2e.pages.search_result_page import SearchResultSelectors
from tui_booking_e2e.pages.summary_booking_page import SummaryBookingSelectors
from tui_booking_e2e.testing.fakes import FakeDriver, FakeElement

BASE_URL = "https://www.tui.nl"


@dataclass
class Country:
    name: str
    disabled: bool = False


class FakeTuiSite:
    """
    What it does:
    - Scripts the TUI pages inside a FakeDriver, using the same selectors as the page objects.

    Behavior:
    - Opening a dropdown re-shows its save button; saving hides it again.
    - Clicking a country hides its node; clearing destinations shows every country again.
    - Opening the date picker re-shows its close button; closing hides it.
    - Flow buttons (search, result link, summary buttons) move `driver.url` forward.
    """

    def __init__(self, driver: FakeDriver, base_url: str = BASE_URL) -> None:
        self.driver = driver
        self.base_url = base_url
        self.after_destination_reset: Callable[[], None] | None = None
        self.country_keys: list[str] = []
        self.month_selector: FakeElement | None = None

    # -------------------- Helpers --------------------

    def _show(self, key: str) -> Callable[[], None]:
        def _on() -> None:
            self.driver.elements.setdefault(key, FakeElement()).visible = True

        return _on

    def _chain(self, *callbacks: Callable[[], None] | None) -> Callable[[], None]:
        def _run() -> None:
            for cb in callbacks:
                if cb:
                    cb()

        return _run

    def save_button_key(self, form: SaveFormName) -> str:
        return self.driver.locate(MainFilterSelectors().save_button(SAVE_BUTTON_LABELS[form]))

    # -------------------- Filters --------------------

    def install_save_buttons(self) -> None:
        for form in SaveFormName:
            self.driver.hide_on_click(self.save_button_key(form))

    def install_departure_airports(self, airports: Sequence[tuple[str, bool]]) -> list[str]:
        """`airports` is a list of (label, disabled)."""
        d = self.driver
        sel = DepartureAirportSelectors()
        d.add(
            d.locate(sel.input, within=d.locate(sel.search_panel)),
            on_click=self._show(self.save_button_key(SaveFormName.DEPARTURE)),
        )
        area = d.locate(sel.droplist)
        d.add(area)
        keys = d.add_group(
            d.locate(sel.option, within=area), [FakeElement(text=label) for label, _ in airports]
        )
        for key, (_, disabled) in zip(keys, airports):
            d.add(d.locate(sel.option_input, within=key), disabled=disabled)

        d.add(d.locate(MainFilterSelectors().airports_clear))
        return keys

    def install_destinations(
        self,
        countries: Sequence[Country],
        cities: Sequence[str],
        *,
        country_hides_on_click: bool = True,
    ) -> None:
        d = self.driver
        sel = DestinationAirportSelectors()
        d.add(
            d.get_by_text(sel.list_toggle_text, within=d.locate(sel.list_toggle)),
            on_click=self._chain(
                self._show(self.save_button_key(SaveFormName.DESTINATION)),
                self._show(d.locate(sel.close_button)),
            ),
        )
        d.add(d.locate(sel.destination_list))
        d.hide_on_click(d.locate(sel.close_button))

        content = d.locate(sel.modal_content)
        d.add(content)
        self.country_keys = d.add_group(
            d.locate(sel.country_item, within=content),
            [
                FakeElement(
                    text=c.name,
                    attributes={"class": "DestinationsList__item" + (" disabled" if c.disabled else "")},
                )
                for c in countries
            ],
        )
        if country_hides_on_click:
            for key in self.country_keys:
                d.hide_on_click(key)

        area = d.locate(sel.sub_item_area)
        d.add(area)
        d.add_group(
            d.locate(sel.unchecked_sub_item, within=area), [FakeElement(text=c) for c in cities]
        )

        def _reset() -> None:
            for key in self.country_keys:
                d.elements[key].visible = True
            if self.after_destination_reset:
                self.after_destination_reset()

        d.add(d.locate(MainFilterSelectors().destinations_clear), on_click=_reset)

    def install_date_picker(
        self,
        days: Sequence[str],
        *,
        month_available: bool = True,
        tolerance_applies: bool = True,
    ) -> None:
        d = self.driver
        sel = DepartureDateSelectors()
        close_key = d.locate(sel.close_button)

        d.add(
            d.locate(sel.input),
            on_click=self._chain(
                self._show(close_key),
                self._show(self.save_button_key(SaveFormName.DATE)),
            ),
        )
        d.add(d.locate(sel.modal))
        d.hide_on_click(close_key)
        self.month_selector = d.add(
            d.locate(sel.month_selector, has_text=sel.month_selector_text),
            visible=month_available,
        )

        area = d.locate(sel.tolerance_area)
        d.add(area)
        item = d.locate(sel.tolerance_item, within=area)
        for label in TOLERANCE_LABELS.values():
            radio = d.add(d.locate(sel.tolerance_radio(label), within=area))

            def _check(radio: FakeElement = radio) -> None:
                radio.checked = tolerance_applies

            d.add(d.get_by_text(label, within=item), on_click=_check)

        calendar = d.locate(sel.calendar)
        d.add(calendar)
        d.add_group(
            d.locate(sel.available_day, within=calendar), [FakeElement(text=day) for day in days]
        )

    def install_travelers(self, age_selectors: int = 0) -> None:
        d = self.driver
        sel = TravelersSelectors()
        d.add(d.locate(sel.input), on_click=self._show(self.save_button_key(SaveFormName.TRAVELERS)))
        d.add(d.locate(sel.content))
        d.add(d.locate(sel.adults_select))
        d.add(d.locate(sel.children_select))
        d.add_group(d.locate(sel.child_age_select), [FakeElement() for _ in range(age_selectors)])

    # -------------------- Pages --------------------

    def _go(self, path: str, *, title: str = "") -> Callable[[], None]:
        def _navigate() -> None:
            self.driver.url = f"{self.base_url}{path}?session=fake"
            if title:
                self.driver.title = title

        return _navigate

    def install_main_page(self) -> None:
        d = self.driver
        d.title = MainPage.title
        sel = MainPageSelectors()
        banner = d.locate(sel.cookie_banner)
        d.add(banner)
        d.hide_on_click(
            d.get_by_role("button", sel.accept_cookies_button, within=banner), target=banner
        )
        d.add(d.locate(MainFilterSelectors().search_button), on_click=self._go("/h/nl/packages"))

    def install_flow_pages(self, results: int = 3) -> None:
        d = self.driver

        sr = SearchResultSelectors()
        d.add(d.locate(sr.results_list))
        d.add(d.locate(sr.filter_panel))
        link = d.locate(sr.result_title_link, within=d.locate(sr.result_item))
        for i in range(results):
            d.add(d.nth(link, i), on_click=self._go("/h/nl/bookaccommodation"))

        hd = HotelDetailsSelectors()
        d.add(d.locate(hd.hero_banner))
        d.add(d.locate(hd.progress_bar))
        d.add(d.locate(hd.overview))
        d.add(d.locate(hd.summary_button), on_click=self._go("/h/nl/book/flow/summary"))

        sb = SummaryBookingSelectors()
        d.add(d.locate(sb.heading, has_text=sb.heading_text))
        d.add(d.locate(sb.summary_button), on_click=self._go("/h/nl/book/passengerdetails"))

        pd = PassengerDetailsSelectors()
        d.add(d.locate(pd.heading, has_text=pd.heading_text))

    def install_passenger_field(
        self,
        group_key: str,
        field_key: str,
        messages: dict[str, str] | None = None,
        *,
        late_render: bool = False,
    ) -> FakeElement:
        """
        Registers one passenger input. Filling it shows the error element with
        messages[value] (or hides it when the value has no message).

        With `late_render`, an error that is already on screen keeps its old text
        for one more read before switching to the new message.
        """
        d = self.driver
        sel = PassengerDetailsValidatorSelectors()
        field_id = f"{field_key.upper()}{group_key.upper()}"
        error = d.add(f'[id="{field_id}{sel.error_suffix}"]', visible=False)

        def _validate(value: str) -> None:
            text = (messages or {}).get(value)
            if late_render and error.visible and text is not None:
                error.text_updates = [text]
                return
            error.visible = text is not None
            error.text = text or ""

        d.add(d.locate(sel.page_heading))
        return d.add(f'[id="{field_id}"]', on_fill=_validate)

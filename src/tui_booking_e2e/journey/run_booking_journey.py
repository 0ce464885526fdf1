from __future__ import annotations

import argparse
import asyncio

from tui_booking_e2e.browser.session import browser_session
from tui_booking_e2e.config.logging import configure_logging
from tui_booking_e2e.config.settings import settings
from tui_booking_e2e.domain.enums import FilterDayTolerance
from tui_booking_e2e.domain.models import (
    DateSelection,
    DestinationSelection,
    SearchCriteria,
    TravelersSelection,
    ValidationCase,
)
from tui_booking_e2e.journey.booking_journey import BookingJourney

FIRST_NAME_VALIDATION_CASES = (
    ValidationCase(
        group_key="Adult1",
        field_key="firstName",
        value="12312313131231",
        expected_error_text="Gebruik tussen de 2 en 32 letters. Geen cijfers of speciale tekens.",
    ),
    ValidationCase(
        group_key="Adult1",
        field_key="firstName",
        value="",
        expected_error_text="Vul de voornaam in (volgens paspoort)",
    ),
)


def build_criteria(args: argparse.Namespace) -> SearchCriteria:
    children = None
    if args.child_age is not None or args.with_children:
        children = tuple(args.child_age or ())

    return SearchCriteria(
        departure_airport=args.departure_airport,
        destination=DestinationSelection(country=args.country, city=args.city),
        date=DateSelection(tolerance=FilterDayTolerance(args.tolerance)),
        travelers=TravelersSelection(adults=args.adults, children_ages=children),
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tui-booking-e2e")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_run = sub.add_parser("run", help="Run the booking journey up to passenger details (no payment).")
    p_run.add_argument("--headful", action="store_true", help="Show the browser window for debugging.")
    p_run.add_argument("--departure-airport", type=str, default=None)
    p_run.add_argument("--country", type=str, default=None)
    p_run.add_argument("--city", type=str, default=None)
    p_run.add_argument(
        "--tolerance",
        choices=[t.value for t in FilterDayTolerance],
        default=FilterDayTolerance.EXACT.value,
    )
    p_run.add_argument("--adults", type=int, default=2)
    p_run.add_argument("--child-age", type=int, action="append", default=None, help="Repeat per child.")
    p_run.add_argument(
        "--with-children",
        action="store_true",
        help="Request children without ages (one random age is used).",
    )
    p_run.add_argument("--result-index", type=int, default=0)
    p_run.add_argument("--skip-validation", action="store_true")
    return parser


async def run_journey(args: argparse.Namespace) -> None:
    run_settings = settings.model_copy(update={"headless": False}) if args.headful else settings
    criteria = build_criteria(args)
    cases = () if args.skip_validation else FIRST_NAME_VALIDATION_CASES

    async with browser_session(run_settings) as driver:
        outcome = await BookingJourney(driver, settings=run_settings).run(
            criteria, cases, result_index=args.result_index
        )

    print(
        f"OK: reached {outcome.visited_pages[-1]} "
        f"via {len(outcome.visited_pages)} pages, validated_cases={outcome.validated_cases}"
    )


def main() -> None:
    """
    What it does:
    - CLI entrypoint: `tui-booking-e2e run [...]`.

    Behavior:
    - Never goes past the passenger details page (no booking is placed).
    - The browser is always closed, also when a step fails.
    """
    args = build_parser().parse_args()
    configure_logging(settings)

    if args.cmd == "run":
        asyncio.run(run_journey(args))


if __name__ == "__main__":
    main()

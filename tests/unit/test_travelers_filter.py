import random

import pytest

from tui_booking_e2e.pages.components.travelers_filter import TravelersFilter
from tui_booking_e2e.utils.errors import SelectionNotApplied

pytestmark = pytest.mark.unit

ADULTS = ".AdultSelector__adultSelector select"
CHILDREN = ".ChildrenSelector__childrenSelector select"
AGE = ".ChildrenAge__childAgeSelector select"


def _selects(driver):
    return [(a[1], a[2]) for a in driver.actions if a[0] == "select"]


@pytest.mark.asyncio
async def test_adults_only_does_not_touch_children(driver, site):
    site.install_travelers()

    applied = await TravelersFilter(driver).set_travelers(3)

    assert applied == []
    assert _selects(driver) == [(ADULTS, "3")]


@pytest.mark.asyncio
async def test_each_child_age_is_set_by_position(driver, site):
    site.install_travelers(age_selectors=3)

    applied = await TravelersFilter(driver).set_travelers(2, [4, 4, 11])

    assert applied == [4, 4, 11]
    assert _selects(driver) == [
        (ADULTS, "2"),
        (CHILDREN, "3"),
        (f"{AGE}[0]", "4"),
        (f"{AGE}[1]", "4"),
        (f"{AGE}[2]", "11"),
    ]


@pytest.mark.asyncio
async def test_empty_age_list_substitutes_exactly_one_random_age(driver, site):
    site.install_travelers(age_selectors=1)

    applied = await TravelersFilter(driver, rng=random.Random(7)).set_travelers(2, [])

    assert len(applied) == 1
    assert 0 <= applied[0] <= 17
    assert _selects(driver) == [(ADULTS, "2"), (CHILDREN, "1"), (f"{AGE}[0]", str(applied[0]))]


@pytest.mark.asyncio
async def test_substituted_age_covers_both_bounds(driver, site):
    site.install_travelers(age_selectors=1)
    low, high = random.Random(), random.Random()
    low.random = lambda: 0.0
    high.random = lambda: 0.9999999

    assert await TravelersFilter(driver, rng=low).select_children([]) == [0]
    assert await TravelersFilter(driver, rng=high).select_children([]) == [17]


@pytest.mark.asyncio
async def test_invalid_counts_are_rejected(driver, site):
    site.install_travelers(age_selectors=1)
    filt = TravelersFilter(driver)

    with pytest.raises(ValueError):
        await filt.select_adults_count(0)
    with pytest.raises(ValueError):
        await filt.select_children([18])


@pytest.mark.asyncio
async def test_missing_age_selectors_is_not_applied(driver, site):
    site.install_travelers(age_selectors=1)

    with pytest.raises(SelectionNotApplied):
        await TravelersFilter(driver).select_children([3, 5])

import pytest

from filtersuites.ui_testing.components import NavigationComponent
from filtersuites.ui_testing.framework.constants import TIMEOUTS
from filtersuites.ui_testing.framework.exceptions import (
    ConfigurationError,
    ElementNotFoundError,
    ElementStateError,
    TargetNotConfiguredError,
    UiTimeoutError,
)
from filtersuites.ui_testing.framework.locator import ElementLocator
from filtersuites.unit.fakes import FakeElement

FILTERS_MENU = ElementLocator.by_text("Filters")
VIEW_ALL = ElementLocator.by_text("View all filters")


@pytest.mark.asyncio
async def test_click_and_wait_for_target(fake_page):
    fake_page.add(FILTERS_MENU.selector)
    fake_page.add(VIEW_ALL.selector, FakeElement(visible=False))
    fake_page.on_click(FILTERS_MENU.selector, lambda p: p.set_visible(VIEW_ALL.selector, True))
    nav = NavigationComponent(fake_page, FILTERS_MENU, VIEW_ALL)

    assert not await nav.is_target_visible()
    await nav.click_and_wait_for_target()

    assert await nav.is_target_visible()
    assert ("wait_for", VIEW_ALL.selector, TIMEOUTS["QUICK_ACTION"]) in fake_page.calls


@pytest.mark.asyncio
async def test_missing_target_fails_before_clicking(fake_page):
    fake_page.add(FILTERS_MENU.selector)
    nav = NavigationComponent(fake_page, FILTERS_MENU)

    with pytest.raises(TargetNotConfiguredError, match="Target element locator not set") as exc_info:
        await nav.click_and_wait_for_target()

    assert isinstance(exc_info.value, ConfigurationError)
    assert not fake_page.actions("click")

    with pytest.raises(TargetNotConfiguredError):
        await nav.is_target_visible()


@pytest.mark.asyncio
async def test_target_never_appearing_times_out(fake_page):
    fake_page.add(FILTERS_MENU.selector)
    nav = NavigationComponent(fake_page, FILTERS_MENU, VIEW_ALL)

    with pytest.raises(UiTimeoutError):
        await nav.click_and_wait_for_target()

    assert fake_page.actions("click") == [("click", FILTERS_MENU.selector)]


@pytest.mark.asyncio
async def test_click_with_validation(fake_page):
    nav = NavigationComponent(fake_page, FILTERS_MENU)

    with pytest.raises(ElementNotFoundError):
        await nav.click_with_validation()

    element = fake_page.add(FILTERS_MENU.selector, FakeElement(visible=False))[0]
    with pytest.raises(ElementStateError):
        await nav.click_with_validation()

    element.visible = True
    await nav.click_with_validation()
    assert fake_page.actions("click") == [("click", FILTERS_MENU.selector)]


@pytest.mark.asyncio
async def test_wait_for_clickable_uses_page_load_timeout(fake_page):
    fake_page.add(FILTERS_MENU.selector)
    nav = NavigationComponent(fake_page, FILTERS_MENU)

    await nav.wait_for_clickable()

    assert ("wait_for", FILTERS_MENU.selector, TIMEOUTS["PAGE_LOAD"]) in fake_page.calls


@pytest.mark.parametrize(
    "classes, expected",
    [
        ("tab active", True),
        ("active", True),
        ("tab inactive", False),
        ("", False),
        (None, False),
    ],
)
@pytest.mark.asyncio
async def test_is_active_matches_whole_class_tokens(fake_page, classes, expected):
    attributes = {} if classes is None else {"class": classes}
    fake_page.add(FILTERS_MENU.selector, FakeElement("Filters", attributes=attributes))
    nav = NavigationComponent(fake_page, FILTERS_MENU)

    assert await nav.is_active() is expected


@pytest.mark.asyncio
async def test_text_and_custom_class(fake_page):
    fake_page.add(FILTERS_MENU.selector, FakeElement("Filters", attributes={"class": "nav selected"}))
    nav = NavigationComponent(fake_page, FILTERS_MENU)

    assert await nav.get_text() == "Filters"
    assert await nav.get_class() == "nav selected"
    assert await nav.is_active("selected")
    assert not await nav.has_class("sel")


@pytest.mark.asyncio
async def test_click_and_reads_use_first_of_several_matches(fake_page):
    fake_page.add(
        FILTERS_MENU.selector,
        FakeElement("Filters", attributes={"class": "nav active"}),
        FakeElement("Filters", attributes={"class": "heading"}),
    )
    nav = NavigationComponent(fake_page, FILTERS_MENU)

    await nav.click_with_validation()

    assert fake_page.actions("click") == [("click", FILTERS_MENU.selector)]
    assert await nav.get_text() == "Filters"
    assert await nav.is_active()

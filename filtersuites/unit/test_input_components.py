import re

import pytest

from filtersuites.ui_testing.components import FormInputComponent, TextInputComponent
from filtersuites.ui_testing.framework.exceptions import InputValidationError
from filtersuites.ui_testing.framework.locator import ElementLocator
from filtersuites.unit.fakes import FakeElement

USERNAME = ElementLocator.by_css("#username")
JQL = ElementLocator.by_attribute("data-testid", "jql.input", tag="input")


# =============================================================================
# FormInputComponent
# =============================================================================

@pytest.mark.asyncio
async def test_fill_replaces_value(fake_page):
    fake_page.add(USERNAME.selector, FakeElement(value="old"))
    field = FormInputComponent(fake_page, USERNAME)

    await field.fill("qa@example.com")

    assert await field.get_value() == "qa@example.com"


@pytest.mark.asyncio
async def test_fill_rejects_empty_value_without_touching_page(fake_page):
    fake_page.add(USERNAME.selector)
    field = FormInputComponent(fake_page, USERNAME)

    with pytest.raises(InputValidationError, match="Input value cannot be empty"):
        await field.fill("")

    assert not fake_page.actions("fill")


@pytest.mark.asyncio
async def test_clear_and_fill_and_type(fake_page):
    fake_page.add(USERNAME.selector, FakeElement(value="old", attributes={"placeholder": "Email"}))
    field = FormInputComponent(fake_page, USERNAME)

    await field.clear_and_fill("qa")
    await field.type("@example.com")

    assert await field.get_value() == "qa@example.com"
    assert await field.get_placeholder() == "Email"
    assert [c[2] for c in fake_page.actions("fill")] == ["", "qa"]


@pytest.mark.asyncio
async def test_focus_and_blur(fake_page):
    element = fake_page.add(USERNAME.selector)[0]
    field = FormInputComponent(fake_page, USERNAME)

    await field.focus()
    assert element.focused
    await field.blur()
    assert not element.focused


# =============================================================================
# TextInputComponent
# =============================================================================

@pytest.fixture
def jql_field(fake_page):
    fake_page.add(
        JQL.selector,
        FakeElement(
            text="JQL",
            value='status in ("Open", "To Do") ORDER BY created DESC',
            attributes={"type": "text", "readonly": "", "placeholder": "Search"},
        ),
    )
    return TextInputComponent(fake_page, JQL)


@pytest.mark.asyncio
async def test_value_comparisons(jql_field):
    assert await jql_field.contains_value('"To Do"')
    assert not await jql_field.equals_value("status = Open")
    assert await jql_field.starts_with_value("status in")
    assert await jql_field.ends_with_value("DESC")
    assert await jql_field.get_value_length() == len('status in ("Open", "To Do") ORDER BY created DESC')


@pytest.mark.asyncio
async def test_attribute_reads(jql_field):
    assert await jql_field.get_type() == "text"
    assert await jql_field.is_read_only()
    assert await jql_field.get_placeholder() == "Search"
    assert await jql_field.get_text_content() == "JQL"


@pytest.mark.asyncio
async def test_matches_pattern_accepts_string_and_compiled(jql_field):
    assert await jql_field.matches_pattern(r"ORDER BY \w+")
    assert await jql_field.matches_pattern(re.compile(r"status IN", re.IGNORECASE))
    assert not await jql_field.matches_pattern(r"^project")


@pytest.mark.asyncio
async def test_is_empty_treats_whitespace_as_empty(fake_page):
    element = fake_page.add(JQL.selector, FakeElement(value="   "))[0]
    field = TextInputComponent(fake_page, JQL)

    assert await field.is_empty()
    element.value = "status = Done"
    assert not await field.is_empty()
    assert not await field.is_read_only()

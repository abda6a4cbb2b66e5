"""
In-memory stand-ins for the parts of Playwright's async Page / Locator API the
framework uses.

Elements are registered per selector string. Single-element actions on a
selector with several matches raise a strict mode violation, as Playwright
does. Every interaction is appended to `FakePage.calls` as
`(action, selector, *args)` so tests can assert both the order of UI
operations and that none happened at all.
"""

from __future__ import annotations

import fnmatch
import json
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from filtersuites.ui_testing.framework.browser_manager import BrowserManager


class FakeElement:
    """One DOM element."""

    def __init__(
        self,
        text: str = "",
        *,
        value: str = "",
        visible: bool = True,
        enabled: bool = True,
        checked: bool = False,
        attributes: Optional[Dict[str, str]] = None,
    ):
        self.text = text
        self.value = value
        self.visible = visible
        self.enabled = enabled
        self.checked = checked
        self.attributes = dict(attributes or {})
        self.focused = False


class FakeLocator:
    """Lazy query over `FakePage.elements`, re-evaluated on every call."""

    def __init__(self, page: "FakePage", selector: str, index: Optional[int] = None):
        self.page = page
        self.selector = selector
        self.index = index

    def _targets(self) -> List[FakeElement]:
        elements = self.page.elements_for(self.selector)
        if self.index is None:
            return elements
        if 0 <= self.index < len(elements):
            return [elements[self.index]]
        return []

    def _element(self, action: str, timeout: Optional[int]) -> FakeElement:
        targets = self._targets()
        if not targets:
            raise PlaywrightTimeoutError(
                f"Locator.{action}: Timeout {timeout}ms exceeded waiting for {self.selector}"
            )
        if len(targets) > 1:
            raise PlaywrightError(
                f"Locator.{action}: Error: strict mode violation: {self.selector} "
                f"resolved to {len(targets)} elements"
            )
        return targets[0]

    def _actionable(self, action: str, timeout: Optional[int]) -> FakeElement:
        element = self._element(action, timeout)
        if not element.visible or not element.enabled:
            raise PlaywrightTimeoutError(
                f"Locator.{action}: Timeout {timeout}ms exceeded, {self.selector} not actionable"
            )
        return element

    @property
    def first(self) -> "FakeLocator":
        return FakeLocator(self.page, self.selector, 0)

    def nth(self, index: int) -> "FakeLocator":
        return FakeLocator(self.page, self.selector, index)

    def locator(self, selector: str) -> "FakeLocator":
        return FakeLocator(self.page, f"{self.selector} >> {selector}")

    async def count(self) -> int:
        self.page.record("count", self.selector)
        return len(self._targets())

    async def wait_for(self, state: str = "visible", timeout: Optional[int] = None) -> None:
        self.page.record("wait_for", self.selector, timeout)
        targets = self._targets()
        if state == "visible":
            ok = any(e.visible for e in targets)
        elif state == "hidden":
            ok = not any(e.visible for e in targets)
        elif state == "detached":
            ok = not targets
        else:
            ok = bool(targets)
        if not ok:
            raise PlaywrightTimeoutError(
                f"Locator.wait_for: Timeout {timeout}ms exceeded waiting for {self.selector} to be {state}"
            )

    async def click(self, timeout: Optional[int] = None, **kwargs: Any) -> None:
        self._actionable("click", timeout)
        self.page.record("click", self.selector)
        self.page.fire_click(self.selector)

    async def check(self, timeout: Optional[int] = None) -> None:
        self._actionable("check", timeout).checked = True
        self.page.record("check", self.selector)

    async def uncheck(self, timeout: Optional[int] = None) -> None:
        self._actionable("uncheck", timeout).checked = False
        self.page.record("uncheck", self.selector)

    async def is_checked(self, timeout: Optional[int] = None) -> bool:
        return self._element("is_checked", timeout).checked

    async def is_visible(self, timeout: Optional[int] = None) -> bool:
        if not self._targets():
            return False
        return self._element("is_visible", timeout).visible

    async def is_enabled(self, timeout: Optional[int] = None) -> bool:
        return self._element("is_enabled", timeout).enabled

    async def get_attribute(self, name: str, timeout: Optional[int] = None) -> Optional[str]:
        return self._element("get_attribute", timeout).attributes.get(name)

    async def input_value(self, timeout: Optional[int] = None) -> str:
        return self._element("input_value", timeout).value

    async def inner_text(self, timeout: Optional[int] = None) -> str:
        self.page.record("inner_text", self.selector, self.index)
        return self._element("inner_text", timeout).text

    async def all_inner_texts(self) -> List[str]:
        return [e.text for e in self._targets()]

    async def fill(self, value: str, timeout: Optional[int] = None) -> None:
        self._actionable("fill", timeout).value = value
        self.page.record("fill", self.selector, value)

    async def press_sequentially(self, text: str, timeout: Optional[int] = None) -> None:
        self._actionable("press_sequentially", timeout).value += text
        self.page.record("type", self.selector, text)

    async def focus(self, timeout: Optional[int] = None) -> None:
        self._element("focus", timeout).focused = True

    async def blur(self, timeout: Optional[int] = None) -> None:
        self._element("blur", timeout).focused = False


class FakeKeyboard:
    def __init__(self, page: "FakePage"):
        self.page = page

    async def press(self, key: str) -> None:
        self.page.record("press", None, key)
        handler = self.page.key_handlers.get(key)
        if handler:
            handler(self.page)


class FakePage:
    """Page double. Register elements with `add`, behaviours with `on_click` / `on_key`."""

    def __init__(self, url: str = "about:blank"):
        self.url = url
        self.elements: Dict[str, List[FakeElement]] = {}
        self.calls: List[tuple] = []
        self.click_handlers: Dict[str, Callable[["FakePage"], None]] = {}
        self.key_handlers: Dict[str, Callable[["FakePage"], None]] = {}
        self.keyboard = FakeKeyboard(self)

    def add(self, selector: str, *elements: FakeElement) -> List[FakeElement]:
        self.elements.setdefault(selector, []).extend(elements or [FakeElement()])
        return self.elements[selector]

    def elements_for(self, selector: str) -> List[FakeElement]:
        if selector in self.elements:
            return self.elements[selector]
        # Scoped queries ("parent >> child") fall back to the child selector
        if " >> " in selector:
            return self.elements_for(selector.split(" >> ", 1)[1])
        return []

    def on_click(self, selector: str, handler: Callable[["FakePage"], None]) -> None:
        self.click_handlers[selector] = handler

    def on_key(self, key: str, handler: Callable[["FakePage"], None]) -> None:
        self.key_handlers[key] = handler

    def fire_click(self, selector: str) -> None:
        handler = self.click_handlers.get(selector)
        if handler:
            handler(self)

    def record(self, action: str, selector: Optional[str], *args: Any) -> None:
        self.calls.append((action, selector) + args)

    def actions(self, action: str) -> List[tuple]:
        return [c for c in self.calls if c[0] == action]

    def set_visible(self, selector: str, visible: bool) -> None:
        for element in self.elements.get(selector, []):
            element.visible = visible

    def locator(self, selector: str) -> FakeLocator:
        return FakeLocator(self, selector)

    async def goto(self, url: str, timeout: Optional[int] = None, **kwargs: Any) -> None:
        self.record("goto", None, url, timeout)
        self.url = url

    async def wait_for_url(self, pattern: str, timeout: Optional[int] = None) -> None:
        self.record("wait_for_url", None, pattern, timeout)
        if not fnmatch.fnmatch(self.url, pattern):
            raise PlaywrightTimeoutError(
                f"Timeout {timeout}ms exceeded waiting for URL {pattern!r}, still at {self.url}"
            )

    async def wait_for_timeout(self, timeout: int) -> None:
        self.record("wait_for_timeout", None, timeout)

    async def screenshot(self, **kwargs: Any) -> bytes:
        return b"\x89PNG\r\n\x1a\n"


# =============================================================================
# Page builders
# =============================================================================

AUTHENTICATED_URL = "https://example.atlassian.net/jira/your-work"
JQL_INPUT = 'input[data-testid="jql.input"]'
STATUS_TRIGGER = '[data-testid="status.ui.filter.dropdown"]'


def build_login_form(page: FakePage, land_on: str = AUTHENTICATED_URL) -> None:
    """Username step reveals the password field; password step lands on `land_on`."""
    page.add("#username")
    page.add("#password", FakeElement(visible=False))
    page.add("#login-submit")

    def submit(p: FakePage) -> None:
        password = p.elements["#password"][0]
        if not password.visible:
            password.visible = True
        else:
            p.url = land_on

    page.on_click("#login-submit", submit)


def build_filters_page(page: FakePage, results=("Open", "To Do")) -> None:
    """Filters page with every status checkbox, `results` rows and a JQL editor."""
    # Nav entry and page heading share the text
    page.add('text="Filters"', FakeElement("Filters"), FakeElement("Filters"))
    page.add('text="Create filter"')
    page.add('text="Clear"')
    page.add(STATUS_TRIGGER)
    page.add("role=listbox", FakeElement(visible=False))
    for status in ("Open", "To Do", "In Progress", "Done", "Closed"):
        page.add(f'input[value="{status}"]', FakeElement(attributes={"value": status}))
    page.elements['[data-testid="issue.status"]'] = [FakeElement(r) for r in results]
    page.add('text="Switch to JQL"')
    page.add('text="Switch to basic"')
    page.add(JQL_INPUT, FakeElement(value='status in ("Open", "To Do")', visible=False))

    page.on_click(STATUS_TRIGGER, lambda p: p.set_visible("role=listbox", True))
    page.on_key("Escape", lambda p: p.set_visible("role=listbox", False))
    page.on_click('text="Switch to JQL"', lambda p: p.set_visible(JQL_INPUT, True))
    page.on_click('text="Switch to basic"', lambda p: p.set_visible(JQL_INPUT, False))


# =============================================================================
# Browser doubles for the session bootstrap
# =============================================================================

SAMPLE_STORAGE_STATE: Dict[str, Any] = {
    "cookies": [
        {
            "name": "tenant.session.token",
            "value": "eyJhbGciOi-secret",
            "domain": ".example.atlassian.net",
            "path": "/",
            "expires": -1,
            "secure": True,
            "httpOnly": True,
            "sameSite": "None",
        }
    ],
    "origins": [
        {
            "origin": "https://example.atlassian.net",
            "localStorage": [{"name": "jira.user.id", "value": "557058:abc"}],
        }
    ],
}


class FakeContext:
    def __init__(self, page: FakePage, state: Optional[Dict[str, Any]], write: bool = True):
        self.page = page
        self.state = state
        self.write = write

    async def new_page(self) -> FakePage:
        return self.page

    async def storage_state(self, path: Optional[str] = None) -> Dict[str, Any]:
        if path and self.write:
            Path(path).write_text(json.dumps(self.state), encoding="utf-8")
        return self.state

    async def close(self) -> None:
        pass


class FakeBrowserManager(BrowserManager):
    """BrowserManager whose browser is a FakePage in a FakeContext."""

    instances: List["FakeBrowserManager"] = []

    def __init__(self, settings, page: FakePage, state=None, write: bool = True):
        super().__init__(settings)
        self.page = page
        self.state = SAMPLE_STORAGE_STATE if state is None else state
        self.write = write
        self.started = False
        self.closed = False
        FakeBrowserManager.instances.append(self)

    async def start(self) -> None:
        self.started = True

    async def close(self) -> None:
        self.closed = True

    async def new_context(self, **options: Any) -> FakeContext:
        return FakeContext(self.page, self.state, self.write)

"""
================================================================================
In-Memory Browser and Report Fakes
================================================================================

A tiny document model answering the subset of the Playwright sync API used
by element handles, plus a report sink recording every call. Lets unit
tests exercise wiring, lists and steps without launching a browser.

Selectors are matched literally: a node answers a query when the exact
selector string ("css=.row", "id=email", "xpath=//input") is among its
``selectors``. Queries search all descendants of the scope.

================================================================================
"""

from typing import Any, Callable, Iterable, List, Optional, Tuple

from pagewire.report_tools.allure_utils import ReportSink


class FakeTimeoutError(Exception):
    """Raised when an action targets a locator matching nothing."""
    pass


class FakeNode:
    def __init__(
        self,
        text: str = "",
        selectors: Iterable[str] = (),
        attrs: Optional[dict] = None,
        visible: bool = True,
        children: Iterable["FakeNode"] = (),
    ):
        self.text = text
        self.selectors = set(selectors)
        self.attrs = dict(attrs or {})
        self.visible = visible
        self.value = self.attrs.get("value", "")
        self.checked = False
        self.children: List[FakeNode] = list(children)

    def add(self, *nodes: "FakeNode") -> "FakeNode":
        self.children.extend(nodes)
        return self

    def remove(self, node: "FakeNode") -> None:
        self.children.remove(node)

    def descendants(self):
        for child in self.children:
            yield child
            yield from child.descendants()

    def find(self, selector: str) -> List["FakeNode"]:
        return [node for node in self.descendants() if selector in node.selectors]

    def inner_text(self) -> str:
        parts = [self.text] + [child.inner_text() for child in self.children if child.visible]
        return "\n".join(part for part in parts if part)

    def __repr__(self) -> str:
        return f"FakeNode({self.text!r}, {sorted(self.selectors)})"


class FakeLocator:
    def __init__(self, page: "FakePage", resolve: Callable[[], List[FakeNode]]):
        self._page = page
        self._resolve = resolve

    def _nodes(self) -> List[FakeNode]:
        return self._resolve()

    def _single(self) -> FakeNode:
        nodes = self._nodes()
        if not nodes:
            raise FakeTimeoutError("locator resolved to no element")
        return nodes[0]

    def _record(self, action: str, *details: Any) -> None:
        self._page.actions.append((action, self._single(), *details))

    # ---- chaining ------------------------------------------------------------

    def locator(self, selector: str) -> "FakeLocator":
        return FakeLocator(self._page, lambda: [d for n in self._nodes() for d in n.find(selector)])

    @property
    def first(self) -> "FakeLocator":
        return FakeLocator(self._page, lambda: self._nodes()[:1])

    def nth(self, index: int) -> "FakeLocator":
        def resolve():
            nodes = self._nodes()
            return nodes[index:index + 1] if 0 <= index < len(nodes) else []
        return FakeLocator(self._page, resolve)

    # ---- reads ---------------------------------------------------------------

    def count(self) -> int:
        return len(self._nodes())

    def is_visible(self) -> bool:
        nodes = self._nodes()
        return bool(nodes) and nodes[0].visible

    def inner_text(self) -> str:
        return self._single().inner_text()

    def text_content(self) -> str:
        return self._single().inner_text()

    def inner_html(self) -> str:
        return f"<div>{self._single().inner_text()}</div>"

    def get_attribute(self, name: str) -> Optional[str]:
        return self._single().attrs.get(name)

    def input_value(self) -> str:
        return self._single().value

    def is_checked(self) -> bool:
        return self._single().checked

    # ---- actions -------------------------------------------------------------

    def click(self, **kwargs) -> None:
        self._record("click", kwargs.get("button", "left"))

    def dblclick(self) -> None:
        self._record("dblclick")

    def hover(self) -> None:
        self._record("hover")

    def fill(self, value: str) -> None:
        self._single().value = value
        self._record("fill", value)

    def press(self, key: str) -> None:
        self._record("press", key)

    def check(self) -> None:
        self._single().checked = True
        self._record("check")

    def uncheck(self) -> None:
        self._single().checked = False
        self._record("uncheck")

    def screenshot(self) -> bytes:
        self._single()
        return b"\x89PNG fake"


class FakePage:
    """Document with a body; nodes added through ``add`` go under the body."""

    def __init__(self, url: str = "about:blank"):
        self.document = FakeNode(selectors=["css=html"])
        self.body = FakeNode(selectors=["css=body"])
        self.document.add(self.body)
        self.url = url
        self.actions: List[Tuple] = []
        self.visits: List[Tuple[str, Optional[float]]] = []

    def add(self, *nodes: FakeNode) -> "FakePage":
        self.body.add(*nodes)
        return self

    def locator(self, selector: str) -> FakeLocator:
        return FakeLocator(self, lambda: self.document.find(selector))

    def goto(self, url: str, timeout: Optional[float] = None) -> None:
        self.url = url
        self.visits.append((url, timeout))

    def actions_of(self, action: str) -> List[Tuple]:
        return [entry for entry in self.actions if entry[0] == action]


class RecordingSink(ReportSink):
    """Report sink keeping every call as an event tuple."""

    def __init__(self):
        self.events: List[Tuple] = []

    def start_step(self, step_id: str, name: str) -> None:
        self.events.append(("start", name))

    def set_step_status(self, status: str, error: Optional[BaseException] = None) -> None:
        self.events.append(("status", status, error))

    def stop_step(self) -> None:
        self.events.append(("stop",))

    def attach(self, artifact: Any, label: str, attachment_type: Any = None) -> None:
        self.events.append(("attach", label, artifact))

    @property
    def step_names(self) -> List[str]:
        return [event[1] for event in self.events if event[0] == "start"]

    @property
    def statuses(self) -> List[str]:
        return [event[1] for event in self.events if event[0] == "status"]


def bird_buttons(*names: str, selector: str = "css=.mt-5 .btn-primary") -> List[FakeNode]:
    return [FakeNode(name, [selector]) for name in names]


__all__ = [
    "FakeTimeoutError",
    "FakeNode",
    "FakeLocator",
    "FakePage",
    "RecordingSink",
    "bird_buttons",
]

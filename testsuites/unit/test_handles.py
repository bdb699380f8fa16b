import pytest

from pagewire.framework.exceptions import NoActivePageError
from pagewire.framework.handles import By, ElementHandle, ElementsCollection
from pagewire.framework.session import active_page, clear_page, get_page
from testsuites.fakes import FakeNode, FakePage


def test_handle_requires_active_page():
    clear_page()
    with pytest.raises(NoActivePageError):
        ElementHandle(By.css("body")).exists()


def test_active_page_restores_previous(page):
    other = FakePage()
    with active_page(other):
        assert get_page() is other
    assert get_page() is page


def test_handle_queries_are_live(page):
    handle = ElementHandle(By.css(".status"))
    assert not handle.exists()

    node = FakeNode("Ready", ["css=.status"])
    page.add(node)
    assert handle.exists()
    assert handle.text() == "Ready"

    node.text = "Busy"
    assert handle.text() == "Busy"

    node.visible = False
    assert not handle.is_displayed()


def test_child_scoped_queries(page):
    page.add(
        FakeNode(selectors=["id=left"], children=[FakeNode("L", ["css=a"])]),
        FakeNode(selectors=["id=right"], children=[FakeNode("R1", ["css=a"]), FakeNode("R2", ["css=a"])]),
    )
    right = ElementHandle(By.id("right"))
    assert right.find(By.css("a")).text() == "R1"
    assert right.find_all(By.css("a")).count() == 2
    assert ElementsCollection(By.css("a")).count() == 3


def test_collection_items_and_filter(page):
    page.add(*[FakeNode(name, ["css=.bird"]) for name in ("Eagle", "Owl", "Emu")])
    birds = ElementsCollection(By.css(".bird"))
    assert [h.text() for h in birds.handles()] == ["Eagle", "Owl", "Emu"]
    assert birds.nth(1).describe() == "css=.bird >> nth=1"

    starts_with_e = birds.filter(lambda h: h.text().startswith("E"), "starts with E")
    assert starts_with_e.count() == 2
    assert starts_with_e.nth(1).text() == "Emu"
    assert "filter(starts with E)" in starts_with_e.describe()


def test_actions_reach_the_page(page):
    node = FakeNode(selectors=["id=q"], attrs={"class": "input wide"})
    page.add(node)
    handle = ElementHandle(By.id("q"))
    handle.fill("birds")
    handle.context_click()
    assert node.value == "birds"
    assert handle.value() == "birds"
    assert handle.css_classes() == ["input", "wide"]
    assert page.actions_of("click") == [("click", node, "right")]


def test_equality_by_description():
    assert ElementHandle(By.css("a")) == ElementHandle(By.css("a"))
    assert ElementHandle(By.css("a")) != ElementHandle(By.css("a"), parent=ElementHandle(By.id("x")))
    assert len({ElementHandle(By.css("a")), ElementHandle(By.css("a"))}) == 1

import pytest

from pagewire.common.global_config import set_config
from pagewire.framework import (
    Button,
    CheckBox,
    Field,
    Locator,
    PageObject,
    Text,
    TextField,
    UIElement,
    UnresolvedElementError,
    Widget,
)
from pagewire.framework.handles import By, ElementHandle
from pagewire.report_tools.allure_utils import Status, attach_screenshot
from testsuites.fakes import FakeNode
from testsuites.ui_testing.pages import CategoriesPage, LoginPage


@pytest.fixture
def login_dom(page):
    nodes = {
        "email": FakeNode(selectors=["css=#email"], attrs={"placeholder": "Email"}),
        "password": FakeNode(selectors=["id=password"]),
        "remember": FakeNode(selectors=["css=input[name='remember']"]),
        "submit": FakeNode("Sign in", ["xpath=//button[@type='submit']"], attrs={"class": "btn primary"}),
        "error": FakeNode("Wrong password", ["css=.login-error"], visible=False),
    }
    page.add(*nodes.values())
    return nodes


def test_click_is_reported_with_parent(login_dom, page, report):
    LoginPage().submit.click()
    assert page.actions_of("click") == [("click", login_dom["submit"], "left")]
    assert report.step_names == ["Click on button Sign in in Login"]
    assert report.statuses == [Status.PASSED]


def test_click_with_custom_step_text(login_dom, report):
    LoginPage().submit.click(step_text="Submit the form")
    assert report.step_names == ["Submit the form"]


def test_failed_interaction_marks_step_failed(page, report):
    class Page(PageObject):
        ghost = Field(Button, name="Ghost", locator=Locator(css=".ghost"))

    with pytest.raises(Exception):
        Page().ghost.click()
    assert report.statuses == [Status.FAILED]
    assert [e[0] for e in report.events].count("stop") == 1


def test_login_flow(login_dom, page, report):
    LoginPage().login("user@example.com", "secret", remember=True)

    assert login_dom["email"].value == "user@example.com"
    assert login_dom["password"].value == "secret"
    assert login_dom["remember"].checked
    assert report.step_names == [
        "Write 'user@example.com' into input text field Email in Login",
        "Write 'secret' into input text field Password in Login",
        "Check checkbox Remember me in Login",
        "Click on button Sign in in Login",
    ]


def test_text_field_value_assertions(login_dom):
    email = LoginPage().email
    email.assert_empty()
    email.write("a@b.c")
    email.assert_value("a@b.c")
    with pytest.raises(AssertionError, match="expected 'x@y.z'"):
        email.assert_value("x@y.z")
    email.clear()
    assert email.value() == ""
    email.press_enter()


def test_text_field_identity_falls_back_to_placeholder(login_dom):
    assert LoginPage().email.get_id() == "Email"


def test_text_field_identity_prefers_written_value(login_dom):
    email = LoginPage().email
    email.write("owl@birds.org")
    assert email.get_id() == "owl@birds.org"


def test_checkbox(login_dom):
    remember = LoginPage().remember_me
    remember.assert_not_checked()
    remember.check()
    remember.assert_checked()
    remember.uncheck()
    assert not remember.is_checked()


def test_visibility_and_text_assertions(login_dom):
    login = LoginPage()
    login.submit.assert_visible()
    login.submit.assert_exists()
    login.submit.assert_text("Sign in")
    login.submit.assert_has_text("Sign")
    login.submit.assert_has_css_class("primary")
    login.submit.assert_has_not_css_class("disabled")
    login.submit.assert_attribute("class", "btn primary")
    login.error.assert_not_visible()
    login.error.assert_exists()

    with pytest.raises(AssertionError, match="Error message"):
        login.error.assert_visible()
    with pytest.raises(AssertionError, match="expected 'Log in'"):
        login.submit.assert_text("Log in")


def test_missing_element_assertions(page):
    class Page(PageObject):
        ghost = Field(Text, name="Ghost", locator=Locator(css=".ghost"))

    ghost = Page().ghost
    ghost.assert_not_exists()
    ghost.assert_not_visible()
    with pytest.raises(AssertionError, match="does not exist"):
        ghost.assert_exists()


def test_other_interactions(login_dom, page):
    submit = LoginPage().submit
    submit.double_click()
    submit.hover()
    submit.context_click()
    assert [a[0] for a in page.actions] == ["dblclick", "hover", "click"]
    assert page.actions[-1][2] == "right"


def test_highlighters_and_detailing(login_dom, report):
    set_config(highlighter_start="[", highlighter_end="]", step_detailing=1)
    LoginPage().submit.click()
    assert report.step_names == ["Click on button [Sign in]"]


def test_russian_steps(login_dom, report):
    set_config(localization="ru")
    LoginPage().submit.click()
    assert report.step_names == ["Нажать на кнопка Sign in в Login"]


def test_unbound_element_raises():
    with pytest.raises(UnresolvedElementError, match="Button"):
        Button().root


def test_name_from_text(page):
    page.add(FakeNode("  Pricing ", ["css=.nav-pricing"]))

    class Page(PageObject):
        pricing = Field(UIElement, name_from="text", locator=Locator(css=".nav-pricing"))

    assert Page().pricing.name == "Pricing"


def test_element_identity_and_equality(page):
    page.add(FakeNode("Save", ["css=.save"]))
    first = Button(ElementHandle(By.css(".save")))
    second = Button(ElementHandle(By.css(".save")))
    assert first.get_id() == "Save"
    assert Button(element_id="save-btn").get_id() == "save-btn"
    assert first == second
    assert first != Text(ElementHandle(By.css(".save")))
    assert first.meta_keys == "button:"


def test_screenshot_attachment(login_dom, report):
    attach_screenshot(LoginPage().submit)
    assert report.events == [("attach", "Sign in", b"\x89PNG fake")]


# ================================================================================
# Widgets
# ================================================================================

def test_widget_without_root_uses_body(page):
    page.add(FakeNode("Hello", ["css=.greeting"]))

    class Greeting(Widget):
        pass

    widget = Greeting()
    assert widget.root.by.selector == "css=body"
    assert widget.is_loaded()
    assert "Hello" in widget.text()


def test_widget_chained_children(page):
    page.add(
        FakeNode(
            selectors=["id=categories"],
            children=[
                FakeNode(selectors=["css=.fold-icon"]),
                FakeNode("Birds", ["css=a.category"]),
                FakeNode("Fish", ["css=a.category"]),
            ],
        ),
        FakeNode("Elsewhere", ["css=a.category"]),
    )
    categories = CategoriesPage().categories
    assert categories.icon.parent is categories
    assert categories.links.parent is categories
    assert not categories.icon.is_bound

    categories.toggle()
    assert categories.icon.root.describe() == "id=categories >> css=.fold-icon"
    assert categories.links.size() == 2

    categories.open_category("Fish")
    assert page.actions[-1][1].text == "Fish"
    categories.assert_loaded()


# ================================================================================
# Pages
# ================================================================================

def test_page_open_and_assert_opened(page, report):
    login = LoginPage().open("http://localhost:3000/")
    assert page.visits == [("http://localhost:3000/login", 30000)]
    login.assert_opened()
    assert report.step_names == [
        "Open page Login at 'http://localhost:3000/login'",
        "Check that page Login is opened",
    ]


def test_page_not_opened(page):
    with pytest.raises(AssertionError, match="/login"):
        LoginPage().assert_opened()


def test_page_name_defaults_to_class_name():
    class Checkout(PageObject):
        pass

    assert Checkout().name == "Checkout"
    assert Checkout().root is None

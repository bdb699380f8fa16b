import pytest
import yaml

from pagewire.common.global_config import ConfigurationError, set_config
from pagewire.report_tools.step_text import StepTextProvider, get_step_text_provider


def test_level_two_needs_name_and_parent():
    provider = StepTextProvider("en", 2)
    assert provider.render("click", "button", "Save", "Toolbar") == "Click on button Save in Toolbar"
    assert provider.render("click", "button", "Save", "") == "Click on button Save"
    assert provider.render("click", "button", "", "Toolbar") == "Click on button"


def test_detailing_one_never_mentions_parent():
    provider = StepTextProvider("en", 1)
    assert provider.render("click", "button", "Save", "Toolbar") == "Click on button Save"


def test_empty_type_uses_localized_element_word():
    assert StepTextProvider("en").render("hover", "", "Logo") == "Hover over element Logo"
    assert StepTextProvider("ru").render("hover", "", "Logo") == "Навести курсор на элемент Logo"


def test_extra_placeholders():
    provider = StepTextProvider("en")
    text = provider.render("assert_size", "list", "Birds", size=10)
    assert text == "Check that list Birds has size 10"
    assert provider.render("write", "input text field", "Email", text="a@b.c") == (
        "Write 'a@b.c' into input text field Email"
    )


def test_unknown_key_falls_back_to_key():
    assert StepTextProvider("en").template("no_such_step", 1) == "no_such_step"


def test_unknown_locale_is_rejected():
    with pytest.raises(ConfigurationError, match="Locale 'de'"):
        StepTextProvider("de")


def test_user_file_overrides_phrases(tmp_path):
    path = tmp_path / "steps.yml"
    path.write_text(yaml.dump({"en": {"click": {"1": "Press {name}"}}}), encoding="utf-8")
    provider = StepTextProvider("en", 2, str(path))
    assert provider.render("click", "button", "Go") == "Press Go"
    assert provider.render("click", "button", "Go", "Menu") == "Click on button Go in Menu"
    assert provider.render("hover", "button", "Go") == "Hover over button Go"


def test_missing_user_file_is_an_error(tmp_path):
    with pytest.raises(ConfigurationError):
        StepTextProvider("en", 2, str(tmp_path / "absent.yml"))


def test_provider_follows_config():
    set_config(localization="ru", step_detailing=1)
    provider = get_step_text_provider()
    assert provider.locale == "ru"
    assert provider.detailing == 1
    assert get_step_text_provider() is provider

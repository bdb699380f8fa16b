"""
================================================================================
Step Text Provider
================================================================================

Builds human readable report step names from a localized YAML phrase table.

Phrase table layout::

    en:
      patterns:
        element: element
      click:
        1: "Click on {element} {name}"
        2: "Click on {element} {name} in {parent}"

Level 2 phrases are chosen only when the element has a name, has a named
parent and step detailing is set to 2. An empty ``{element}`` falls back to
the localized generic word from ``patterns``.

Author: Automation Team
License: MIT
================================================================================
"""

from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from loguru import logger

from pagewire.common.global_config import ConfigurationError, get_config


PACKAGED_STEPS_FILE = Path(__file__).parent / "steps.yml"
USER_STEPS_FILE = Path("config") / "pagewire-steps.yml"


def _load_table(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid step phrase table {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigurationError(f"Step phrase table {path} must be a mapping")
    for locale, steps in data.items():
        for key, levels in (steps or {}).items():
            if key != "patterns" and isinstance(levels, dict):
                steps[key] = {int(level): text for level, text in levels.items()}
    return data


def _merge(base: Dict, override: Dict) -> Dict:
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _merge(result[key], value)
        else:
            result[key] = value
    return result


class StepTextProvider:
    """
    Renders step names for a given locale and detailing level.

    Args:
        locale: Phrase table section to use
        detailing: 1 for short phrases, 2 to allow phrases mentioning the parent
        steps_file: Optional YAML file merged over the packaged table
    """

    def __init__(self, locale: str = "en", detailing: int = 2, steps_file: Optional[str] = None):
        self.locale = locale
        self.detailing = detailing

        table = _load_table(PACKAGED_STEPS_FILE)
        override_path = Path(steps_file) if steps_file else USER_STEPS_FILE
        if override_path.exists():
            table = _merge(table, _load_table(override_path))
            logger.info(f"Loaded user step phrases from {override_path}")
        elif steps_file:
            raise ConfigurationError(f"Step phrase file not found: {steps_file}")

        if locale not in table:
            raise ConfigurationError(
                f"Locale '{locale}' is not in the step phrase table, available: {sorted(table)}"
            )
        self._phrases: Dict[str, Dict[int, str]] = {
            key: levels for key, levels in table[locale].items() if key != "patterns"
        }
        self._patterns: Dict[str, str] = table[locale].get("patterns", {})

    def pattern(self, word: str) -> str:
        """Localized generic word such as "element" or "widget"."""
        return self._patterns.get(word, word)

    def template(self, step_key: str, level: int) -> str:
        """
        Returns the raw phrase for a step key.

        Falls back to level 1 when the requested level is missing, and to the
        step key itself when the key is unknown.
        """
        levels = self._phrases.get(step_key)
        if not levels:
            logger.warning(f"No step phrase for '{step_key}' in locale '{self.locale}'")
            return step_key
        return levels.get(level) or levels.get(1) or next(iter(levels.values()))

    def render(
        self,
        step_key: str,
        element: str = "",
        name: str = "",
        parent: str = "",
        **extras: Any,
    ) -> str:
        """
        Builds a step name.

        Args:
            step_key: Phrase key (e.g., "click", "assert_size")
            element: Localized element type word, may be empty
            name: Highlighted element name
            parent: Highlighted parent name, may be empty
            **extras: Action specific placeholders ({text}, {size}, {id}...)

        Returns:
            The rendered step name.
        """
        level = 2 if (name and parent and self.detailing == 2) else 1
        text = self.template(step_key, level)

        values = {"element": element or self.pattern("element"), "name": name, "parent": parent}
        values.update({k: "" if v is None else str(v) for k, v in extras.items()})
        for placeholder, value in values.items():
            text = text.replace("{" + placeholder + "}", str(value))
        return " ".join(text.split())


@lru_cache(maxsize=8)
def _cached_provider(locale: str, detailing: int, steps_file: Optional[str]) -> StepTextProvider:
    return StepTextProvider(locale, detailing, steps_file)


def get_step_text_provider(config=None) -> StepTextProvider:
    """Returns the provider matching the given (or global) configuration."""
    config = config or get_config()
    return _cached_provider(config.localization, config.step_detailing, config.steps_file)


def clear_step_text_cache() -> None:
    """Drops cached providers, e.g. after a phrase file changed."""
    _cached_provider.cache_clear()


__all__ = [
    "StepTextProvider",
    "get_step_text_provider",
    "clear_step_text_cache",
]

from __future__ import annotations

"""
Internationalization (i18n) Utility.

Singleton manager for user-facing strings. Keys use dot notation over
nested JSON locale files stored in 'interface/locales'; values support
str.format interpolation. Unknown keys resolve to the supplied default or
to the key itself, so a missing translation never breaks the interfaces.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en"
LOCALES_REL_PATH = os.path.join("..", "interface", "locales")


class I18n:
    """Loads one locale dictionary and resolves dotted keys against it."""

    def __init__(self, locale: str = DEFAULT_LOCALE, locales_dir: Optional[str] = None):
        here = os.path.dirname(os.path.abspath(__file__))
        self._locales_dir = locales_dir or os.path.normpath(os.path.join(here, LOCALES_REL_PATH))
        self._locale = locale
        self._strings: Dict[str, Any] = {}
        self.is_loaded = False
        self.load_locale(locale)

    @property
    def locale(self) -> str:
        return self._locale

    def load_locale(self, locale: str) -> None:
        """
        Switch to `locale`, read from '<locales_dir>/<locale>.json'.

        A missing or unreadable file leaves the resolver empty, so every
        lookup falls back to its default or its key.
        """
        source = os.path.join(self._locales_dir, f"{locale}.json")
        try:
            with open(source, "r", encoding="utf-8") as f:
                strings = json.load(f)
        except FileNotFoundError:
            logger.warning(f"I18n: No locale file for '{locale}' at {source}.")
            strings = None
        except (OSError, ValueError) as e:
            logger.error(f"I18n: Unreadable locale file {source}: {e}")
            strings = None

        if not isinstance(strings, dict):
            self._strings = {}
            self.is_loaded = False
            return

        self._strings = strings
        self._locale = locale
        self.is_loaded = True
        logger.debug(f"I18n: Locale '{locale}' active.")

    def t(self, key: str, default: Optional[str] = None, **kwargs: Any) -> str:
        """
        Resolve and format a translation string.

        Args:
            key: Dotted path (e.g. 'cli.errors.no_input').
            default: Returned when the key does not resolve.
            **kwargs: Values interpolated with str.format.

        Returns:
            str: Translated text, the default, or the key itself.
        """
        current: Any = self._strings
        for part in key.split("."):
            if not isinstance(current, dict):
                current = None
                break
            current = current.get(part)

        if not isinstance(current, str):
            current = default if default is not None else key

        if not kwargs:
            return current
        try:
            return current.format(**kwargs)
        except (KeyError, IndexError, ValueError) as e:
            logger.debug(f"I18n: Format error for '{key}': {e}")
            return current


# Global singleton instance
i18n = I18n(DEFAULT_LOCALE)

"""
Simple i18n helper for translating UI strings.

Usage
-----
from src.infrastructure.utilities.i18n import tr
text = tr("CART_EMPTY", lang)  # returns Spanish / English string

Strings are stored in JSON files under src/infrastructure/locales/<lang>.json
Missing keys gracefully fall back to English, then to the key name.
Placeholders use str.format syntax: tr("POINTS_EARNED", points=10).
"""

from __future__ import annotations

import json
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

_LOCALES_DIR = Path(__file__).resolve().parent.parent / "locales"
_DEFAULT_LANG = os.getenv("STOREFRONT_DEFAULT_LANG", "es")


@lru_cache(maxsize=None)
def _load_locale(lang: str) -> Dict[str, str]:
    """Load language JSON and cache the result."""
    file_path = _LOCALES_DIR / f"{lang}.json"
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError:
        # Unknown language – return empty dict so we fall back to English
        return {}


def available_languages() -> list[str]:
    """Languages that ship a locale file."""
    return sorted(path.stem for path in _LOCALES_DIR.glob("*.json"))


def tr(key: str, lang: str | None = None, **params: Any) -> str:
    """Translate *key* for *lang* (default = env/STOREFRONT_DEFAULT_LANG).

    Falls back to English, then to the key itself if not found.
    """
    lang = lang or _DEFAULT_LANG

    text = _load_locale(lang).get(key)
    if text is None and lang != "en":
        text = _load_locale("en").get(key)
    if text is None:
        return key

    if params:
        try:
            return text.format(**params)
        except (KeyError, IndexError):
            return text
    return text

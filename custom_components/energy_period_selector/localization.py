"""
Localization service for runtime labels.

Replaces a module-level translation cache with a service owned by the config
entry: constructed once, loaded once, then passed to every consumer.

Lookup chain for localize(key, fallback):
    active language -> English -> fallback -> key
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

import aiofiles

from .const import CUSTOM_TRANSLATIONS_DIR

if TYPE_CHECKING:
    from pathlib import Path

_LOGGER = logging.getLogger(__name__)

FALLBACK_LANGUAGE = "en"


class EnergyPeriodLocalization:
    """Per-entry localization with a fixed English fallback."""

    def __init__(self, language: str | None, translations_dir: Path = CUSTOM_TRANSLATIONS_DIR) -> None:
        """
        Initialize the service.

        Args:
            language: Active language code (e.g. "de" or "de-AT"); None means English
            translations_dir: Directory holding <language>.json files

        """
        self.language = (language or FALLBACK_LANGUAGE).split("-")[0].lower()
        self._translations_dir = translations_dir
        self._translations: dict[str, dict[str, str]] = {}

    @property
    def loaded_languages(self) -> list[str]:
        """Return the languages loaded so far."""
        return list(self._translations)

    async def async_load(self) -> None:
        """Load English (always) and the active language."""
        await self.async_load_language(FALLBACK_LANGUAGE)
        if self.language != FALLBACK_LANGUAGE:
            await self.async_load_language(self.language)

    async def async_load_language(self, language: str) -> dict[str, str]:
        """
        Load one language mapping.

        A missing or unreadable file yields an empty mapping, never an error.

        Returns:
            The loaded translations for language

        """
        if language in self._translations:
            return self._translations[language]

        file_path = self._translations_dir / f"{language}.json"
        if not file_path.exists():
            _LOGGER.debug("No translations found at %s", file_path)
            self._translations[language] = {}
            return self._translations[language]

        try:
            async with aiofiles.open(file_path, encoding="utf-8") as f:
                content = await f.read()
            translations = json.loads(content)
        except (OSError, json.JSONDecodeError) as err:
            _LOGGER.warning("Error loading translations file %s: %s", file_path, err)
            translations = {}

        if not isinstance(translations, dict):
            _LOGGER.warning("Ignoring translations file %s: top level is not an object", file_path)
            translations = {}

        self._translations[language] = {str(k): str(v) for k, v in translations.items()}
        return self._translations[language]

    def localize(self, key: str, fallback: str | None = None) -> str:
        """Resolve key through the active language, English, fallback, key."""
        value = self._translations.get(self.language, {}).get(key)
        if value:
            return value
        value = self._translations.get(FALLBACK_LANGUAGE, {}).get(key)
        if value:
            return value
        return fallback or key

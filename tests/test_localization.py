"""Tests for the runtime localization service."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from custom_components.energy_period_selector.localization import EnergyPeriodLocalization

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def translations_dir(tmp_path: Path) -> Path:
    """Directory with English and German translation files."""
    (tmp_path / "en.json").write_text(json.dumps({"week": "Week", "custom": "Custom", "today": "Today"}))
    (tmp_path / "de.json").write_text(json.dumps({"week": "Woche", "custom": ""}))
    return tmp_path


@pytest.mark.unit
@pytest.mark.asyncio
async def test_active_language_wins(translations_dir: Path) -> None:
    """Keys present in the active language are used directly."""
    localization = EnergyPeriodLocalization("de", translations_dir)
    await localization.async_load()

    assert localization.localize("week") == "Woche"
    assert sorted(localization.loaded_languages) == ["de", "en"]


@pytest.mark.unit
@pytest.mark.asyncio
async def test_falls_back_to_english(translations_dir: Path) -> None:
    """Missing or empty entries fall back to English."""
    localization = EnergyPeriodLocalization("de", translations_dir)
    await localization.async_load()

    assert localization.localize("today") == "Today"
    assert localization.localize("custom") == "Custom"


@pytest.mark.unit
@pytest.mark.asyncio
async def test_falls_back_to_fallback_then_key(translations_dir: Path) -> None:
    """Unknown keys resolve to the caller's fallback, else the key itself."""
    localization = EnergyPeriodLocalization("de", translations_dir)
    await localization.async_load()

    assert localization.localize("month_13", "Fallback") == "Fallback"
    assert localization.localize("month_13") == "month_13"


@pytest.mark.unit
@pytest.mark.asyncio
async def test_region_suffix_is_dropped(translations_dir: Path) -> None:
    """de-AT uses the German file."""
    localization = EnergyPeriodLocalization("de-AT", translations_dir)
    await localization.async_load()

    assert localization.language == "de"
    assert localization.localize("week") == "Woche"


@pytest.mark.unit
@pytest.mark.asyncio
async def test_missing_language_file_is_not_an_error(translations_dir: Path) -> None:
    """An unknown language loads as empty and falls through to English."""
    localization = EnergyPeriodLocalization("fr", translations_dir)
    await localization.async_load()

    assert localization.localize("week") == "Week"


@pytest.mark.unit
@pytest.mark.asyncio
async def test_invalid_json_is_ignored(tmp_path: Path) -> None:
    """A corrupt file yields an empty mapping."""
    (tmp_path / "en.json").write_text("{not json")
    localization = EnergyPeriodLocalization(None, tmp_path)

    assert await localization.async_load_language("en") == {}
    assert localization.localize("week", "Week") == "Week"


@pytest.mark.unit
@pytest.mark.asyncio
async def test_bundled_translations_cover_runtime_keys() -> None:
    """The shipped English and German files provide every month and period label."""
    for language in ("en", "de"):
        localization = EnergyPeriodLocalization(language)
        translations = await localization.async_load_language(language)
        for key in ("day", "week", "month", "year", "custom", "date_format", "date_format_year"):
            assert translations.get(key), f"{language}: {key}"
        for month in range(1, 13):
            assert translations.get(f"month_{month}"), f"{language}: month_{month}"

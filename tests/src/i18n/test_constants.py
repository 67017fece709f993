"""
Tests for the Locale Registry (src/i18n/constants.py).

Tests:
- Registry contents and order
- Lookup, display string and dropdown helpers
- Validity, RTL and font fallbacks
- Grouping tables (lookup tie-break, referential integrity)
"""

from __future__ import annotations

import dataclasses

import pytest

from src.i18n.constants import (
    COMMON_KEYS,
    DEFAULT_LOCALE,
    LANGUAGE_FAMILIES,
    LOCALE_GROUPS,
    LOCALE_REGIONS,
    SUPPORTED_LOCALES,
    CommonKey,
    Region,
    get_font_family,
    get_language_family,
    get_locale_display_string,
    get_locale_group,
    get_locale_info,
    get_locale_region,
    get_locales_for_dropdown,
    get_text_direction,
    is_rtl,
    is_valid_locale_code,
)

ALL_CODES = [info.code for info in SUPPORTED_LOCALES]
UNKNOWN_CODES = ["xx-unknown", "", "EN", "zh", "zh-cn", "pt-BR", " en"]
NON_STRING_CODES = [["en"], {"en": 1}, None, 42, b"en"]


class TestRegistry:
    """Tests for the static registry data."""

    def test_codes_in_canonical_order(self) -> None:
        """The registry lists exactly the 10 supported codes in order."""
        assert ALL_CODES == ["en", "zh-CN", "zh-TW", "ja", "ko", "de", "fr", "es", "ru", "pt"]

    def test_codes_are_unique(self) -> None:
        """No code appears twice."""
        assert len(set(ALL_CODES)) == len(ALL_CODES)

    def test_default_locale_is_supported(self) -> None:
        """DEFAULT_LOCALE is English and part of the registry."""
        assert DEFAULT_LOCALE == "en"
        assert DEFAULT_LOCALE in ALL_CODES

    @pytest.mark.parametrize(
        ("code", "native_name", "flag"),
        [
            ("en", "English", "🇺🇸"),
            ("zh-CN", "简体中文", "🇨🇳"),
            ("zh-TW", "繁體中文", "🇹🇼"),
            ("ja", "日本語", "🇯🇵"),
            ("ko", "한국어", "🇰🇷"),
            ("de", "Deutsch", "🇩🇪"),
            ("fr", "Français", "🇫🇷"),
            ("es", "Español", "🇪🇸"),
            ("ru", "Русский", "🇷🇺"),
            ("pt", "Português", "🇧🇷"),
        ],
    )
    def test_native_names_and_flags(self, code: str, native_name: str, flag: str) -> None:
        """Native names and flag glyphs match the reference data."""
        info = get_locale_info(code)
        assert info is not None
        assert info.native_name == native_name
        assert info.flag == flag

    def test_records_are_immutable(self) -> None:
        """LocaleInfo records cannot be modified."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            SUPPORTED_LOCALES[0].native_name = "Changed"  # type: ignore[misc]

    def test_grouping_tables_are_read_only(self) -> None:
        """Grouping tables reject item assignment."""
        with pytest.raises(TypeError):
            LOCALE_GROUPS["NEW"] = ("en",)  # type: ignore[index]
        with pytest.raises(TypeError):
            LANGUAGE_FAMILIES["NEW"] = ("en",)  # type: ignore[index]


class TestGetLocaleInfo:
    """Tests for get_locale_info()."""

    @pytest.mark.parametrize("code", ALL_CODES)
    def test_known_code_returns_matching_record(self, code: str) -> None:
        """Every registry code resolves to its own record."""
        info = get_locale_info(code)
        assert info is not None
        assert info.code == code

    @pytest.mark.parametrize("code", UNKNOWN_CODES)
    def test_unknown_code_returns_none(self, code: str) -> None:
        """Unknown codes (lookups are exact and case-sensitive) return None."""
        assert get_locale_info(code) is None


class TestGetLocaleDisplayString:
    """Tests for get_locale_display_string()."""

    def test_with_flag(self) -> None:
        """Flag, native name and English name."""
        assert get_locale_display_string("ja", True) == "🇯🇵 日本語 (Japanese)"

    def test_without_flag(self) -> None:
        """Native name and English name only."""
        assert get_locale_display_string("ja", False) == "日本語 (Japanese)"

    def test_flag_included_by_default(self) -> None:
        """include_flag defaults to True."""
        assert get_locale_display_string("de") == "🇩🇪 Deutsch (German)"

    def test_english_display_string(self) -> None:
        """English shows its name twice."""
        assert get_locale_display_string("en", include_flag=False) == "English (English)"

    @pytest.mark.parametrize("code", UNKNOWN_CODES)
    def test_unknown_code_returned_unchanged(self, code: str) -> None:
        """Unknown codes come back as-is, with or without flag."""
        assert get_locale_display_string(code) == code
        assert get_locale_display_string(code, include_flag=False) == code


class TestGetLocalesForDropdown:
    """Tests for get_locales_for_dropdown()."""

    def test_sorted_by_english_name(self) -> None:
        """Locales are ordered by English name."""
        codes = [info.code for info in get_locales_for_dropdown()]
        assert codes == ["en", "fr", "de", "ja", "ko", "pt", "ru", "zh-CN", "es", "zh-TW"]

    def test_same_records_as_registry(self) -> None:
        """The dropdown is a permutation of the registry."""
        assert set(get_locales_for_dropdown()) == set(SUPPORTED_LOCALES)
        assert len(get_locales_for_dropdown()) == len(SUPPORTED_LOCALES)

    def test_does_not_change_registry_order(self) -> None:
        """Repeated calls leave the canonical order untouched."""
        before = list(SUPPORTED_LOCALES)
        get_locales_for_dropdown()
        get_locales_for_dropdown()
        assert list(SUPPORTED_LOCALES) == before

    def test_returns_fresh_list(self) -> None:
        """Mutating the returned list does not affect later calls."""
        first = get_locales_for_dropdown()
        first.clear()
        assert len(get_locales_for_dropdown()) == len(SUPPORTED_LOCALES)


class TestValidityAndDirection:
    """Tests for is_valid_locale_code(), is_rtl() and get_text_direction()."""

    @pytest.mark.parametrize("code", ALL_CODES)
    def test_supported_codes_are_valid(self, code: str) -> None:
        assert is_valid_locale_code(code) is True

    @pytest.mark.parametrize("code", UNKNOWN_CODES)
    def test_unknown_codes_are_invalid(self, code: str) -> None:
        assert is_valid_locale_code(code) is False

    @pytest.mark.parametrize("code", NON_STRING_CODES)
    def test_non_string_input_is_invalid_and_ltr(self, code: object) -> None:
        assert is_valid_locale_code(code) is False  # type: ignore[arg-type]
        assert is_rtl(code) is False  # type: ignore[arg-type]
        assert get_text_direction(code) == "ltr"  # type: ignore[arg-type]

    @pytest.mark.parametrize("code", ALL_CODES + ["ar", "he", "xx-unknown"])
    def test_no_locale_is_rtl(self, code: str) -> None:
        """The RTL set is empty, so every code is left-to-right."""
        assert is_rtl(code) is False
        assert get_text_direction(code) == "ltr"


class TestGetFontFamily:
    """Tests for get_font_family()."""

    def test_simplified_chinese_font(self) -> None:
        assert "PingFang SC" in get_font_family("zh-CN")

    def test_traditional_chinese_font(self) -> None:
        assert "PingFang TC" in get_font_family("zh-TW")

    def test_japanese_and_korean_fonts(self) -> None:
        assert "Hiragino Sans" in get_font_family("ja")
        assert "Noto Sans KR" in get_font_family("ko")

    @pytest.mark.parametrize("code", UNKNOWN_CODES)
    def test_unknown_code_falls_back_to_default(self, code: str) -> None:
        """Unknown codes get exactly the default locale's stack."""
        assert get_font_family(code) == get_font_family(DEFAULT_LOCALE)

    @pytest.mark.parametrize("code", NON_STRING_CODES)
    def test_non_string_input_falls_back_to_default(self, code: object) -> None:
        assert get_font_family(code) == get_font_family(DEFAULT_LOCALE)  # type: ignore[arg-type]

    @pytest.mark.parametrize("code", ALL_CODES)
    def test_never_empty(self, code: str) -> None:
        assert get_font_family(code)


class TestGetLocaleGroup:
    """Tests for get_locale_group()."""

    def test_japanese_is_asian(self) -> None:
        """'ja' resolves to the ASIAN bucket."""
        group = get_locale_group("ja")
        assert group == LOCALE_GROUPS["ASIAN"]
        assert set(group) == {"zh-CN", "zh-TW", "ja", "ko"}

    def test_first_declared_bucket_wins(self) -> None:
        """'pt' is in EUROPEAN and SPANISH_PORTUGUESE; EUROPEAN is declared first."""
        assert get_locale_group("pt") == LOCALE_GROUPS["EUROPEAN"]

    def test_spanish_bucket(self) -> None:
        assert get_locale_group("es") == LOCALE_GROUPS["SPANISH_PORTUGUESE"]

    def test_english_bucket(self) -> None:
        assert get_locale_group("en") == ("en",)

    def test_all_bucket_is_not_a_lookup_result(self) -> None:
        """ALL lists every code but never answers a lookup."""
        for code in ALL_CODES:
            assert get_locale_group(code) != LOCALE_GROUPS["ALL"]

    def test_unknown_code_returns_singleton(self) -> None:
        assert get_locale_group("xx-unknown") == ("xx-unknown",)

    def test_all_bucket_matches_registry(self) -> None:
        assert list(LOCALE_GROUPS["ALL"]) == ALL_CODES


class TestFamiliesAndRegions:
    """Tests for get_language_family() and get_locale_region()."""

    @pytest.mark.parametrize(
        ("code", "family"),
        [("en", "GERMANIC"), ("de", "GERMANIC"), ("pt", "ROMANCE"), ("ru", "SLAVIC"), ("ko", "ASIAN")],
    )
    def test_language_family(self, code: str, family: str) -> None:
        assert get_language_family(code) == family

    @pytest.mark.parametrize(
        ("code", "region"),
        [("en", Region.AMERICA), ("es", Region.AMERICA), ("ja", Region.ASIA), ("fr", Region.EUROPE)],
    )
    def test_region(self, code: str, region: Region) -> None:
        assert get_locale_region(code) is region

    def test_unknown_code(self) -> None:
        assert get_language_family("xx-unknown") is None
        assert get_locale_region("xx-unknown") is None

    @pytest.mark.parametrize("code", NON_STRING_CODES)
    def test_non_string_input(self, code: object) -> None:
        assert get_language_family(code) is None  # type: ignore[arg-type]
        assert get_locale_region(code) is None  # type: ignore[arg-type]


class TestReferentialIntegrity:
    """Every code referenced by a grouping table exists in the registry."""

    def test_language_families(self) -> None:
        for family, codes in LANGUAGE_FAMILIES.items():
            for code in codes:
                assert is_valid_locale_code(code), f"{family} references unknown {code}"

    def test_locale_regions(self) -> None:
        for code in LOCALE_REGIONS:
            assert is_valid_locale_code(code), f"LOCALE_REGIONS references unknown {code}"

    def test_every_locale_has_a_region(self) -> None:
        assert set(LOCALE_REGIONS) == set(ALL_CODES)

    def test_locale_groups(self) -> None:
        for group, codes in LOCALE_GROUPS.items():
            for code in codes:
                assert is_valid_locale_code(code), f"{group} references unknown {code}"


class TestCommonKeys:
    """Tests for the COMMON_KEYS enumeration."""

    def test_alias(self) -> None:
        assert COMMON_KEYS is CommonKey

    def test_keys_are_dotted_strings(self) -> None:
        assert COMMON_KEYS.SAVE == "common.save"
        assert COMMON_KEYS.RESET == "common.reset"
        for key in CommonKey:
            assert key.value == f"common.{key.name.lower()}"

    def test_key_count(self) -> None:
        assert len(CommonKey) == 17

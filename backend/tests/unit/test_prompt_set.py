"""
Unit tests for locale prompt sets.
"""

import pytest

from cinematic_mirror.models.enums import Gender, Locale
from cinematic_mirror.prompts import PROMPT_SETS, get_prompt_set
from cinematic_mirror.prompts.consultation_prompt import PROFILE_PLACEHOLDER
from cinematic_mirror.prompts.profile_prompt import CATALOG_PLACEHOLDER


@pytest.mark.parametrize("locale", list(Locale))
def test_every_locale_has_a_prompt_set(locale):
    prompts = get_prompt_set(locale)
    assert prompts.locale == locale
    assert CATALOG_PLACEHOLDER in prompts.profile_prompt
    assert PROFILE_PLACEHOLDER in prompts.consultation_prompt
    assert set(prompts.gender_labels) == set(Gender)


def test_prompt_sets_cover_all_locales():
    assert set(PROMPT_SETS) == set(Locale)


class TestSubjectInfo:
    def test_chinese_with_both_fields(self):
        info = get_prompt_set(Locale.ZH).subject_info("小雨", Gender.MALE)
        assert info.startswith("\n\n")
        assert "- 名字：小雨" in info
        assert "- 性别：男性" in info

    def test_english_missing_fields_are_unknown(self):
        info = get_prompt_set(Locale.EN).subject_info(None, None)
        assert "- Name: Unknown" in info
        assert "- Gender: Unknown" in info


class TestLocaleParsing:
    @pytest.mark.parametrize(
        "value,expected",
        [("en", Locale.EN), ("EN", Locale.EN), ("en-US", Locale.EN), ("zh_CN", Locale.ZH), (None, Locale.ZH), ("fr", Locale.ZH)],
    )
    def test_from_value(self, value, expected):
        assert Locale.from_value(value) == expected

    @pytest.mark.parametrize("value,expected", [("female", Gender.FEMALE), (" Male ", Gender.MALE), ("", None), ("x", None)])
    def test_gender_from_value(self, value, expected):
        assert Gender.from_value(value) == expected

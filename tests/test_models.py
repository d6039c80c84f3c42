import uuid
from datetime import datetime, timedelta, timezone

from vastestsea.models import Language, Word

LANG_ID = uuid.UUID(int=1)
WORD_ID = uuid.UUID(int=2)
MOMENT = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


def test_language_to_json_fields():
    lang = Language(LANG_ID, MOMENT, MOMENT, "Elvish")
    data = lang.to_json()
    assert data["id"] == str(LANG_ID)
    assert data["name"] == "Elvish"
    assert set(data) == {"id", "name", "created_at", "updated_at"}


def test_utc_timestamp_uses_z_suffix():
    lang = Language(LANG_ID, MOMENT, MOMENT, "Elvish")
    assert lang.to_json()["created_at"] == "2024-01-02T03:04:05Z"


def test_fractional_seconds_trimmed():
    moment = MOMENT.replace(microsecond=500000)
    lang = Language(LANG_ID, moment, moment, "x")
    assert lang.to_json()["updated_at"] == "2024-01-02T03:04:05.5Z"


def test_non_utc_offset_rendered():
    moment = MOMENT.replace(tzinfo=timezone(timedelta(hours=-5, minutes=-30)))
    lang = Language(LANG_ID, moment, moment, "x")
    assert lang.to_json()["created_at"].endswith("-05:30")


def test_word_to_json_fields():
    word = Word(WORD_ID, MOMENT, MOMENT, "mellon", "ᛗᛖᛚᛚᛟᚾ", LANG_ID)
    data = word.to_json()
    assert data["id"] == str(WORD_ID)
    assert data["word"] == "mellon"
    assert data["font_formatted"] == "ᛗᛖᛚᛚᛟᚾ"
    assert data["language_id"] == str(LANG_ID)
    assert data["created_at"] == data["updated_at"]


def test_word_missing_formatting_is_empty_string():
    word = Word(WORD_ID, MOMENT, MOMENT, "mellon", None, LANG_ID)
    assert word.to_json()["font_formatted"] == ""


def test_word_field_order():
    word = Word(WORD_ID, MOMENT, MOMENT, "mellon", None, LANG_ID)
    assert list(word.to_json()) == [
        "id",
        "created_at",
        "updated_at",
        "word",
        "font_formatted",
        "language_id",
    ]
import json

import pytest

from bible_api.models import (
    Book,
    Chapter,
    ChapterContent,
    Translation,
    Verse,
    first_present,
)


class TestFirstPresent:
    def test_first_key_wins(self):
        assert first_present({"book_id": "GEN", "id": "gen"}, ("book_id", "id")) == "GEN"

    def test_falls_back_to_later_key(self):
        assert first_present({"id": "gen"}, ("book_id", "id")) == "gen"

    def test_empty_value_is_skipped(self):
        assert first_present({"book_id": "", "id": "gen"}, ("book_id", "id")) == "gen"

    def test_default_when_nothing_matches(self):
        assert first_present({}, ("book_id", "id"), "fallback") == "fallback"


class TestBook:
    def test_prefers_book_id(self):
        book = Book.from_dict({"book_id": "GEN", "id": "genesis", "name": "Genesis"})
        assert book.id == "GEN"

    def test_falls_back_to_id(self):
        book = Book.from_dict({"id": "EXO", "name": "Exodus", "testament": "OT", "chapters": 40})
        assert book == Book(id="EXO", name="Exodus", testament="OT", chapters=40)

    def test_optional_fields_default_to_none(self):
        book = Book.from_dict({"book_id": "GEN", "name": "Genesis"})
        assert book.testament is None
        assert book.chapters is None

    def test_missing_identifier_is_rejected(self):
        with pytest.raises(ValueError):
            Book.from_dict({"name": "Nameless"})

    def test_records_are_frozen(self):
        book = Book(id="GEN", name="Genesis")
        with pytest.raises(AttributeError):
            book.id = "EXO"


class TestVerse:
    def test_numeric_label_becomes_string(self):
        assert Verse.from_dict({"verse": 3, "text": "And God said"}).verse == "3"

    def test_range_label_kept(self):
        verse = Verse.from_dict({"verse": "2-4", "text": "...", "title": "The Creation"})
        assert verse.verse == "2-4"
        assert verse.title == "The Creation"

    @pytest.mark.parametrize("raw", [
        {"text": "No label"},
        {"verse": None, "text": "Null label"},
        {"verse": "", "text": "Empty label"},
    ])
    def test_missing_label_is_rejected(self, raw):
        with pytest.raises(ValueError, match="no label"):
            Verse.from_dict(raw)

    def test_unknown_keys_kept_in_extra(self):
        verse = Verse.from_dict({"verse": "1", "text": "...", "footnotes": [1]})
        assert verse.extra == {"footnotes": [1]}


class TestTranslation:
    def test_unknown_keys_kept_in_extra(self):
        translation = Translation.from_dict({
            "id": "BSB",
            "name": "Berean Standard Bible",
            "language": "eng",
            "englishName": "Berean Standard Bible",
            "shortName": "BSB",
        })

        assert translation.language == "eng"
        assert translation.extra == {"englishName": "Berean Standard Bible", "shortName": "BSB"}

    def test_no_extra_keys(self):
        assert Translation.from_dict({"id": "BSB", "name": "Berean"}).extra == {}


class TestChapter:
    def test_upstream_identifiers_preferred(self):
        chapter = Chapter.from_dict(
            {"translation_id": "KJV", "book_id": "EXO", "chapter": 2}, "BSB", "GEN", 1
        )
        assert chapter.translation_id == "KJV"
        assert chapter.book_id == "EXO"
        assert chapter.chapter_number == "2"

    def test_chapter_number_fallback_chain(self):
        chapter = Chapter.from_dict({"chapter_number": "5"}, "BSB", "GEN", 1)
        assert chapter.chapter_number == "5"

        chapter = Chapter.from_dict({}, "BSB", "GEN", 7)
        assert chapter.chapter_number == "7"

    def test_chapter_preferred_over_chapter_number(self):
        chapter = Chapter.from_dict({"chapter": 2, "chapter_number": "9"}, "BSB", "GEN", 1)
        assert chapter.chapter_number == "2"

    def test_missing_verses_become_empty_list(self):
        chapter = Chapter.from_dict({}, "BSB", "GEN", 1)
        assert chapter.verses == []

    def test_null_verses_become_empty_list(self):
        chapter = Chapter.from_dict({"verses": None}, "BSB", "GEN", 1)
        assert chapter.verses == []

    def test_has_no_book_name(self):
        chapter = Chapter.from_dict({}, "BSB", "GEN", 1)
        assert "book_name" not in chapter.to_dict()

    def test_with_book_name(self):
        chapter = Chapter.from_dict(
            {"verses": [{"verse": "1", "text": "In the beginning..."}]}, "BSB", "GEN", 1
        )
        content = chapter.with_book_name("Genesis")

        assert isinstance(content, ChapterContent)
        assert content.book_name == "Genesis"
        assert content.reference == "Genesis 1"
        assert content.verses == chapter.verses


class TestSerialization:
    def test_to_json_keeps_non_ascii(self):
        translation = Translation(id="NA28", name="Nestle–Aland Ελληνικά", language="grc")
        data = json.loads(translation.to_json())
        assert data == {"id": "NA28", "name": "Nestle–Aland Ελληνικά", "language": "grc", "extra": {}}
        assert "Ελληνικά" in translation.to_json()

    def test_nested_verses_serialize(self):
        chapter = Chapter("BSB", "GEN", "1", [Verse("1", "In the beginning...")])
        assert chapter.to_dict()["verses"] == [
            {"verse": "1", "text": "In the beginning...", "title": None, "extra": {}}
        ]

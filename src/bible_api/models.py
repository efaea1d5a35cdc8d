"""Data models for the Bible API client."""

import json
from dataclasses import dataclass, field, asdict
from typing import Any, Optional


# =============================================================================
# Field Fallbacks
# =============================================================================

# Upstream key names are not stable; candidates are tried in order.
BOOK_ID_KEYS = ("book_id", "id")
TRANSLATION_ID_KEYS = ("translation_id",)
CHAPTER_BOOK_ID_KEYS = ("book_id",)
CHAPTER_NUMBER_KEYS = ("chapter", "chapter_number")


def first_present(raw: dict, keys: tuple[str, ...], default: Any = None) -> Any:
    """Return the first truthy value among ``keys`` in ``raw``, else ``default``."""
    for key in keys:
        value = raw.get(key)
        if value:
            return value
    return default


def extra_fields(raw: dict, known: tuple[str, ...]) -> dict:
    """Upstream keys the record has no field for, kept verbatim."""
    return {k: v for k, v in raw.items() if k not in known}


class _Record:
    """Serialization helpers shared by all records."""

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return asdict(self)

    def to_json(self, indent: int = 2) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)


# =============================================================================
# Records
# =============================================================================

@dataclass(frozen=True)
class Translation(_Record):
    """
    Represents an edition of the Bible text.

    Upstream keys without a field of their own (``englishName``,
    ``shortName``, ...) are kept in ``extra``.
    """

    id: str  # e.g., "BSB", "KJV"
    name: str  # e.g., "Berean Standard Bible"
    language: Optional[str] = None  # e.g., "en"
    extra: dict = field(default_factory=dict)

    @classmethod
    def from_dict(cls, raw: dict) -> "Translation":
        return cls(
            id=raw.get("id"),
            name=raw.get("name"),
            language=raw.get("language"),
            extra=extra_fields(raw, ("id", "name", "language")),
        )


@dataclass(frozen=True)
class Book(_Record):
    """Represents a book of the Bible within a translation."""

    id: str  # e.g., "GEN"
    name: str  # e.g., "Genesis"
    testament: Optional[str] = None  # e.g., "OT", "NT"
    chapters: Optional[int] = None  # Number of chapters in the book

    @classmethod
    def from_dict(cls, raw: dict) -> "Book":
        """
        Build a Book from an upstream books.json element.

        The identifier comes from ``book_id`` or, failing that, ``id``.

        Raises:
            ValueError: If neither key holds an identifier.
        """
        book_id = first_present(raw, BOOK_ID_KEYS)
        if not book_id:
            raise ValueError(f"Book entry has no identifier: {raw!r}")
        return cls(
            id=book_id,
            name=raw.get("name"),
            testament=raw.get("testament"),
            chapters=raw.get("chapters"),
        )


@dataclass(frozen=True)
class Verse(_Record):
    """A single verse; the label may be a range such as "2-4"."""

    verse: str
    text: str
    title: Optional[str] = None  # Section heading shown above the verse
    extra: dict = field(default_factory=dict)  # Unrecognised upstream keys

    @classmethod
    def from_dict(cls, raw: dict) -> "Verse":
        """
        Build a Verse from an upstream verse object.

        Numeric labels are coerced to strings.

        Raises:
            ValueError: If the verse has no label.
        """
        label = raw.get("verse")
        if label is None or label == "":
            raise ValueError(f"Verse entry has no label: {raw!r}")
        return cls(
            verse=str(label),
            text=raw.get("text"),
            title=raw.get("title"),
            extra=extra_fields(raw, ("verse", "text", "title")),
        )


@dataclass(frozen=True)
class Chapter(_Record):
    """Chapter text as returned by the API, before a book name is attached."""

    translation_id: str
    book_id: str
    chapter_number: str
    verses: list[Verse] = field(default_factory=list)

    @classmethod
    def from_dict(
        cls, raw: dict, translation_id: str, book_id: str, chapter: Any
    ) -> "Chapter":
        """
        Build a Chapter from an upstream chapter response.

        The requested identifiers fill in whatever the response leaves out.
        """
        return cls(
            translation_id=first_present(raw, TRANSLATION_ID_KEYS, translation_id),
            book_id=first_present(raw, CHAPTER_BOOK_ID_KEYS, book_id),
            chapter_number=str(first_present(raw, CHAPTER_NUMBER_KEYS, chapter)),
            verses=[Verse.from_dict(v) for v in raw.get("verses") or []],
        )

    def with_book_name(self, book_name: str) -> "ChapterContent":
        """Attach a book name (usually from a prior Book lookup)."""
        return ChapterContent(
            translation_id=self.translation_id,
            book_id=self.book_id,
            book_name=book_name,
            chapter_number=self.chapter_number,
            verses=list(self.verses),
        )


@dataclass(frozen=True)
class ChapterContent(_Record):
    """Complete chapter ready for display."""

    translation_id: str
    book_id: str
    book_name: str
    chapter_number: str
    verses: list[Verse] = field(default_factory=list)

    @property
    def reference(self) -> str:
        """Human readable reference, e.g. "Genesis 1"."""
        return f"{self.book_name} {self.chapter_number}"

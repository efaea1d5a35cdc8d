"""
Bible API - Reads translations, books and chapters from bible.helloao.org.
"""

from .models import Translation, Book, Verse, Chapter, ChapterContent
from .client import (
    API_BASE_URL,
    BibleApiClient,
    BibleApiError,
    ValidationError,
    FetchError,
    get_translations,
    get_books,
    get_chapter,
)

__all__ = [
    "Translation",
    "Book",
    "Verse",
    "Chapter",
    "ChapterContent",
    "API_BASE_URL",
    "BibleApiClient",
    "BibleApiError",
    "ValidationError",
    "FetchError",
    "get_translations",
    "get_books",
    "get_chapter",
]

__version__ = "0.1.0"

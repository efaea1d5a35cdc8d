"""HTTP client for the helloao.org Bible API."""

import logging
from typing import Optional, Union

import requests

from .models import Translation, Book, Chapter


logger = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

API_BASE_URL = "https://bible.helloao.org/api"

TRANSLATIONS_PATH = "/available_translations.json"
BOOKS_PATH = "/{translation_id}/books.json"
CHAPTER_PATH = "/{translation_id}/{book_id}/{chapter}.json"

# Anything that can go wrong between sending the request and building records.
_FETCH_ERRORS = (requests.RequestException, ValueError, TypeError, AttributeError)


# =============================================================================
# Errors
# =============================================================================

class BibleApiError(Exception):
    """Base class for all client errors."""


class ValidationError(BibleApiError, ValueError):
    """A required argument was missing; no request was sent."""


class FetchError(BibleApiError, RuntimeError):
    """The request failed or the response could not be understood."""


# =============================================================================
# Client
# =============================================================================

class BibleApiClient:
    """
    Read-only client for the Bible API.

    Each call issues a single GET request and either returns records or
    raises ``FetchError``. There are no retries and nothing is cached.
    """

    def __init__(self, base_url: str = API_BASE_URL, session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def close(self):
        self.session.close()

    def _get_json(self, path: str):
        url = f"{self.base_url}{path}"
        logger.debug("GET %s", url)
        response = self.session.get(url)
        response.raise_for_status()
        return response.json()

    def get_translations(self) -> list[Translation]:
        """
        Fetch the list of available translations.

        Returns:
            List of Translation records in the order the API returns them.

        Raises:
            FetchError: If the request or response parsing fails.
        """
        try:
            raw_translations = self._get_json(TRANSLATIONS_PATH)
            return [Translation.from_dict(t) for t in raw_translations]
        except _FETCH_ERRORS:
            logger.exception("Error fetching translations")
            raise FetchError("Failed to load translations.") from None

    def get_books(self, translation_id: str) -> list[Book]:
        """
        Fetch the books available in a translation.

        Args:
            translation_id: Translation code (e.g., 'BSB')

        Returns:
            List of Book records in the order the API returns them.

        Raises:
            ValidationError: If translation_id is empty.
            FetchError: If the request or response parsing fails.
        """
        if not translation_id:
            raise ValidationError("Translation ID is required to fetch books.")

        try:
            raw_books = self._get_json(BOOKS_PATH.format(translation_id=translation_id))
            return [Book.from_dict(b) for b in raw_books]
        except _FETCH_ERRORS:
            logger.exception("Error fetching books for translation %s", translation_id)
            raise FetchError(f"Failed to load books for {translation_id}.") from None

    def get_chapter(
        self, translation_id: str, book_id: str, chapter: Union[int, str]
    ) -> Chapter:
        """
        Fetch the verses of one chapter.

        The result carries no book name; attach one with
        ``Chapter.with_book_name``.

        Args:
            translation_id: Translation code (e.g., 'BSB')
            book_id: Book code (e.g., 'GEN')
            chapter: Chapter number; 0 counts as missing

        Raises:
            ValidationError: If any argument is empty.
            FetchError: If the request or response parsing fails.
        """
        if not translation_id or not book_id or not chapter:
            raise ValidationError("Translation ID, Book ID, and Chapter number are required.")

        path = CHAPTER_PATH.format(translation_id=translation_id, book_id=book_id, chapter=chapter)
        try:
            raw_chapter = self._get_json(path)
            return Chapter.from_dict(raw_chapter, translation_id, book_id, chapter)
        except _FETCH_ERRORS:
            logger.exception("Error fetching chapter %s/%s/%s", translation_id, book_id, chapter)
            raise FetchError(f"Failed to load chapter {book_id} {chapter}.") from None


# =============================================================================
# Public API
# =============================================================================

def get_translations() -> list[Translation]:
    """Fetch available translations with a short-lived client."""
    with BibleApiClient() as client:
        return client.get_translations()


def get_books(translation_id: str) -> list[Book]:
    """Fetch the books of a translation with a short-lived client."""
    with BibleApiClient() as client:
        return client.get_books(translation_id)


def get_chapter(translation_id: str, book_id: str, chapter: Union[int, str]) -> Chapter:
    """Fetch one chapter with a short-lived client."""
    with BibleApiClient() as client:
        return client.get_chapter(translation_id, book_id, chapter)

#!/usr/bin/env python3
"""
CLI for the Bible API client.

Usage:
    python -m bible_api translations             # List available translations
    python -m bible_api books BSB                # List books in a translation
    python -m bible_api chapter BSB GEN 1        # Print a chapter
    python -m bible_api --json chapter BSB JHN 3 # Print a chapter as JSON
"""

import argparse
import json
import logging
import sys
from typing import Optional

from .client import API_BASE_URL, BibleApiClient, BibleApiError
from .models import Book, ChapterContent, Translation


logger = logging.getLogger(__name__)


# =============================================================================
# Configuration
# =============================================================================

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


# =============================================================================
# Output Formatting
# =============================================================================

def format_translation(translation: Translation) -> str:
    line = f"{translation.id:<12} {translation.name}"
    if translation.language:
        line += f" ({translation.language})"
    return line


def format_book(book: Book) -> str:
    testament = book.testament or "-"
    chapters = book.chapters if book.chapters is not None else "?"
    return f"{book.id:<6} {book.name:<24} {testament:<4} {chapters} chapters"


def format_chapter(content: ChapterContent) -> str:
    """Render a chapter as plain text, with section titles above their verse."""
    lines = [f"{content.reference} ({content.translation_id})", ""]
    for verse in content.verses:
        if verse.title:
            if lines[-1]:
                lines.append("")
            lines.append(verse.title)
        lines.append(f"{verse.verse:>4}  {verse.text}")
    return "\n".join(lines)


def _dump(records) -> str:
    if isinstance(records, list):
        return json.dumps([r.to_dict() for r in records], indent=2, ensure_ascii=False)
    return records.to_json()


# =============================================================================
# Commands
# =============================================================================

def cmd_translations(client: BibleApiClient, args) -> str:
    translations = client.get_translations()
    if args.json:
        return _dump(translations)
    return "\n".join(format_translation(t) for t in translations)


def cmd_books(client: BibleApiClient, args) -> str:
    books = client.get_books(args.translation)
    if args.json:
        return _dump(books)
    return "\n".join(format_book(b) for b in books)


def cmd_chapter(client: BibleApiClient, args) -> str:
    chapter = client.get_chapter(args.translation, args.book, args.chapter)

    # The chapter endpoint does not return a book name.
    try:
        books = client.get_books(args.translation)
    except BibleApiError:
        logger.warning("Book list unavailable, showing %s by its ID", chapter.book_id)
        books = []
    book_name = next((b.name for b in books if b.id == chapter.book_id), None)
    content = chapter.with_book_name(book_name or chapter.book_id)

    if args.json:
        return _dump(content)
    return format_chapter(content)


# =============================================================================
# CLI Entry Point
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bible-api",
        description="Read translations, books and chapters from the Bible API."
    )
    parser.add_argument(
        "--base-url",
        type=str,
        default=API_BASE_URL,
        help=f"API base URL (default: {API_BASE_URL})"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print records as JSON"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    translations = subparsers.add_parser("translations", help="List available translations")
    translations.set_defaults(func=cmd_translations)

    books = subparsers.add_parser("books", help="List the books of a translation")
    books.add_argument("translation", help="Translation code (e.g., 'BSB')")
    books.set_defaults(func=cmd_books)

    chapter = subparsers.add_parser("chapter", help="Print one chapter")
    chapter.add_argument("translation", help="Translation code (e.g., 'BSB')")
    chapter.add_argument("book", help="Book code (e.g., 'GEN')")
    chapter.add_argument("chapter", type=int, help="Chapter number")
    chapter.set_defaults(func=cmd_chapter)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT,
    )

    with BibleApiClient(base_url=args.base_url) as client:
        try:
            output = args.func(client, args)
        except BibleApiError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""SQLite-backed storage of languages and words."""

from __future__ import annotations

import sqlite3
import uuid
from datetime import datetime, timezone
from typing import Any, Iterable

from vastestsea.models import Language, Word


class DatabaseError(Exception):
    """A storage operation failed."""


class NotFoundError(DatabaseError):
    """A query expecting one row found none."""


class DuplicateKeyError(DatabaseError):
    """An insert violated a uniqueness constraint."""


_SCHEMA = """
CREATE TABLE IF NOT EXISTS languages (
    id TEXT PRIMARY KEY,
    created_at TEXT NOT NULL,
    updated_at TEXT NOT NULL,
    name TEXT NOT NULL UNIQUE
);
CREATE TABLE IF NOT EXISTS words (
    id TEXT PRIMARY KEY,
    created_at TEXT NOT NULL,
    updated_at TEXT NOT NULL,
    word TEXT NOT NULL,
    font_formatted TEXT,
    language_id TEXT NOT NULL REFERENCES languages(id) ON DELETE CASCADE,
    UNIQUE (word, language_id)
);
"""

_LANGUAGE_COLUMNS = "id, created_at, updated_at, name"
_WORD_COLUMNS = "id, created_at, updated_at, word, font_formatted, language_id"


def create_schema(conn: sqlite3.Connection) -> None:
    """Create the languages and words tables if they do not exist."""
    conn.execute("PRAGMA foreign_keys = ON")
    conn.executescript(_SCHEMA)
    conn.commit()


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _stamp(moment: datetime) -> str:
    return moment.isoformat()


def _translate(exc: sqlite3.Error) -> DatabaseError:
    message = str(exc)
    if isinstance(exc, sqlite3.IntegrityError) and "UNIQUE" in message:
        return DuplicateKeyError(f"duplicate key value violates unique constraint: {message}")
    return DatabaseError(message)


def _language(row: tuple[Any, ...]) -> Language:
    id_, created, updated, name = row
    return Language(
        uuid.UUID(id_), datetime.fromisoformat(created), datetime.fromisoformat(updated), name
    )


def _word(row: tuple[Any, ...]) -> Word:
    id_, created, updated, word, formatted, language_id = row
    return Word(
        uuid.UUID(id_),
        datetime.fromisoformat(created),
        datetime.fromisoformat(updated),
        word,
        formatted,
        uuid.UUID(language_id),
    )


class Queries:
    """Typed queries over a SQLite connection."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn
        self._conn.execute("PRAGMA foreign_keys = ON")

    def _execute(self, sql: str, params: Iterable[Any] = ()) -> None:
        try:
            with self._conn:
                self._conn.execute(sql, tuple(params))
        except sqlite3.Error as exc:
            raise _translate(exc) from exc

    def _fetch_all(self, sql: str, params: Iterable[Any] = ()) -> list[tuple[Any, ...]]:
        try:
            return self._conn.execute(sql, tuple(params)).fetchall()
        except sqlite3.Error as exc:
            raise _translate(exc) from exc

    def _fetch_one(self, sql: str, params: Iterable[Any] = ()) -> tuple[Any, ...]:
        try:
            row = self._conn.execute(sql, tuple(params)).fetchone()
        except sqlite3.Error as exc:
            raise _translate(exc) from exc
        if row is None:
            raise NotFoundError("no rows in result set")
        return row

    # Languages

    def create_language(self, name: str) -> Language:
        """Insert a new language and return it."""
        now = _now()
        language = Language(uuid.uuid4(), now, now, name)
        self._execute(
            f"INSERT INTO languages ({_LANGUAGE_COLUMNS}) VALUES (?, ?, ?, ?)",
            (str(language.id), _stamp(now), _stamp(now), name),
        )
        return language

    def delete_language(self, language_id: uuid.UUID) -> None:
        """Delete the language with the given id, if any."""
        self._execute("DELETE FROM languages WHERE id = ?", (str(language_id),))

    def get_language(self, name: str) -> Language:
        """Return the language whose lower-cased name equals ``name``."""
        return _language(
            self._fetch_one(
                f"SELECT {_LANGUAGE_COLUMNS} FROM languages WHERE LOWER(name) = ?", (name,)
            )
        )

    def get_language_by_id(self, language_id: uuid.UUID) -> Language:
        """Return the language with the given id."""
        return _language(
            self._fetch_one(
                f"SELECT {_LANGUAGE_COLUMNS} FROM languages WHERE id = ?", (str(language_id),)
            )
        )

    def get_languages(self) -> list[Language]:
        """Return every language."""
        return [_language(row) for row in self._fetch_all(f"SELECT {_LANGUAGE_COLUMNS} FROM languages")]

    # Words

    def _insert_word(self, word: str, font_formatted: str | None, language_id: uuid.UUID) -> Word:
        now = _now()
        record = Word(uuid.uuid4(), now, now, word, font_formatted, language_id)
        self._execute(
            f"INSERT INTO words ({_WORD_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?)",
            (str(record.id), _stamp(now), _stamp(now), word, font_formatted, str(language_id)),
        )
        return record

    def create_formatted_word(
        self, word: str, font_formatted: str | None, language_id: uuid.UUID
    ) -> Word:
        """Insert a word with its font-formatted form and return it."""
        return self._insert_word(word, font_formatted, language_id)

    def create_word(self, word: str, language_id: uuid.UUID) -> Word:
        """Insert a word without formatting and return it."""
        return self._insert_word(word, None, language_id)

    def delete_word(self, word_id: uuid.UUID) -> None:
        """Delete the word with the given id, if any."""
        self._execute("DELETE FROM words WHERE id = ?", (str(word_id),))

    def get_word(self, word: str) -> list[Word]:
        """Return every word, across languages, spelled exactly ``word``."""
        return [
            _word(row)
            for row in self._fetch_all(f"SELECT {_WORD_COLUMNS} FROM words WHERE word = ?", (word,))
        ]

    def get_word_by_id(self, word_id: uuid.UUID) -> Word:
        """Return the word with the given id."""
        return _word(
            self._fetch_one(f"SELECT {_WORD_COLUMNS} FROM words WHERE id = ?", (str(word_id),))
        )

    def get_word_from_language(self, word: str, language_id: uuid.UUID) -> Word:
        """Return the word spelled ``word`` in the given language."""
        return _word(
            self._fetch_one(
                f"SELECT {_WORD_COLUMNS} FROM words WHERE word = ? AND language_id = ?",
                (word, str(language_id)),
            )
        )

    def get_words(self) -> list[Word]:
        """Return every word."""
        return [_word(row) for row in self._fetch_all(f"SELECT {_WORD_COLUMNS} FROM words")]

    def get_words_by_language_id(self, language_id: uuid.UUID) -> list[Word]:
        """Return every word registered to the given language."""
        return [
            _word(row)
            for row in self._fetch_all(
                f"SELECT {_WORD_COLUMNS} FROM words WHERE language_id = ?", (str(language_id),)
            )
        ]

    def update_word_formatting(self, word_id: uuid.UUID, font_formatted: str | None) -> None:
        """Set the font-formatted form of a word."""
        self._execute(
            "UPDATE words SET font_formatted = ? WHERE id = ?", (font_formatted, str(word_id))
        )
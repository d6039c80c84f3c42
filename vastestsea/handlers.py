"""Request handlers for the language and word endpoints."""

from __future__ import annotations

import json
from http import HTTPStatus
from typing import Any

from werkzeug.wrappers import Request, Response

from vastestsea.database import DatabaseError, Queries
from vastestsea.helpers import failed_creation_code, respond_error, write_response


class _DecodeError(ValueError):
    """The request body could not be decoded into the expected fields."""


def _reject_constant(name: str) -> Any:
    raise _DecodeError(f"invalid JSON literal {name}")


_DECODER = json.JSONDecoder(parse_constant=_reject_constant)


def _decode_params(request: Request, *fields: str) -> dict[str, str]:
    """Decode the first JSON value of the body into string ``fields``.

    Missing or null fields come back as empty strings. Keys are matched
    without regard to case; unknown keys are ignored.
    """
    text = request.get_data().decode("utf-8", errors="replace").lstrip(" \t\r\n")
    try:
        value, _ = _DECODER.raw_decode(text)
    except ValueError as exc:
        raise _DecodeError(str(exc)) from exc

    params = dict.fromkeys(fields, "")
    if value is None:
        return params
    if not isinstance(value, dict):
        raise _DecodeError("request body is not a JSON object")

    wanted = {field.lower(): field for field in fields}
    for key, raw in value.items():
        field = wanted.get(key.lower())
        if field is None or raw is None:
            continue
        if not isinstance(raw, str):
            raise _DecodeError(f"field {field!r} must be a string")
        params[field] = raw
    return params


class ApiConfig:
    """Handlers bound to a query layer."""

    def __init__(self, queries: Queries) -> None:
        self.queries = queries

    # Languages

    def get_languages(self, request: Request) -> Response:
        """List every language."""
        try:
            languages = self.queries.get_languages()
        except DatabaseError:
            return respond_error("No languages found", HTTPStatus.NOT_FOUND)
        return write_response([language.to_json() for language in languages], HTTPStatus.OK)

    def get_language(self, request: Request, language: str) -> Response:
        """Return the language named in the path."""
        try:
            found = self.queries.get_language(language.lower())
        except DatabaseError:
            return respond_error("Language not found", HTTPStatus.NOT_FOUND)
        return write_response(found.to_json(), HTTPStatus.OK)

    def create_language(self, request: Request) -> Response:
        """Create a language from a body of the form {"name": ...}."""
        try:
            params = _decode_params(request, "name")
        except _DecodeError:
            return respond_error("Could not decode request body", HTTPStatus.BAD_REQUEST)

        if not params["name"]:
            return respond_error("Invalid request body", HTTPStatus.BAD_REQUEST)

        try:
            created = self.queries.create_language(params["name"])
        except DatabaseError as exc:
            return respond_error(f"Failed to create language: {exc}", failed_creation_code(exc))
        return write_response(created.to_json(), HTTPStatus.CREATED)

    # Words

    def get_words_from_language(self, request: Request, language: str) -> Response:
        """List the words registered to the language named in the path."""
        try:
            found = self.queries.get_language(language.lower())
        except DatabaseError:
            return respond_error("Language not found", HTTPStatus.NOT_FOUND)

        try:
            words = self.queries.get_words_by_language_id(found.id)
        except DatabaseError:
            return respond_error("No words found", HTTPStatus.NOT_FOUND)
        return write_response([word.to_json() for word in words], HTTPStatus.OK)

    def get_word_from_language(self, request: Request, language: str, word: str) -> Response:
        """Return one word as registered in one language."""
        try:
            found = self.queries.get_language(language.lower())
        except DatabaseError:
            return respond_error("Language not found", HTTPStatus.NOT_FOUND)

        try:
            record = self.queries.get_word_from_language(word.lower(), found.id)
        except DatabaseError:
            return respond_error("Word not found for that language", HTTPStatus.NOT_FOUND)
        return write_response(record.to_json(), HTTPStatus.OK)

    def get_words(self, request: Request) -> Response:
        """List every word in every language."""
        try:
            words = self.queries.get_words()
        except DatabaseError:
            return respond_error("No words found", HTTPStatus.NOT_FOUND)
        return write_response([word.to_json() for word in words], HTTPStatus.OK)

    def get_word(self, request: Request, word: str) -> Response:
        """List every language's entry for the word named in the path."""
        try:
            words = self.queries.get_word(word.lower())
        except DatabaseError:
            return respond_error("No word found", HTTPStatus.NOT_FOUND)
        return write_response([record.to_json() for record in words], HTTPStatus.OK)

    def create_word(self, request: Request) -> Response:
        """Create a word from {"word": ..., "language": ...}, creating the language if needed."""
        try:
            params = _decode_params(request, "word", "language")
        except _DecodeError:
            return respond_error("Could not decode request body", HTTPStatus.BAD_REQUEST)

        if not params["word"] or not params["language"]:
            return respond_error("Invalid request body", HTTPStatus.BAD_REQUEST)

        try:
            language = self.queries.get_language(params["language"].lower())
        except DatabaseError:
            try:
                language = self.queries.create_language(params["language"])
            except DatabaseError as exc:
                return respond_error(
                    f"Failed to create language: {exc}", failed_creation_code(exc)
                )

        try:
            created = self.queries.create_word(params["word"], language.id)
        except DatabaseError as exc:
            return respond_error(f"Failed to create word: {exc}", failed_creation_code(exc))
        return write_response(created.to_json(), HTTPStatus.CREATED)

    def create_word_for_language(self, request: Request, language: str) -> Response:
        """Create a word, given in the body, for the language named in the path."""
        try:
            found = self.queries.get_language(language)
        except DatabaseError:
            return respond_error("Language not found", HTTPStatus.NOT_FOUND)

        try:
            params = _decode_params(request, "word")
        except _DecodeError:
            return respond_error(
                "Could not decode request body", HTTPStatus.INTERNAL_SERVER_ERROR
            )

        if not params["word"]:
            return respond_error("Invalid request body", HTTPStatus.BAD_REQUEST)

        try:
            created = self.queries.create_word(params["word"], found.id)
        except DatabaseError as exc:
            return respond_error(f"Failed to create word: {exc}", failed_creation_code(exc))
        return write_response(created.to_json(), HTTPStatus.CREATED)
"""JSON response helpers shared by the request handlers."""

from __future__ import annotations

import json
import logging
from http import HTTPStatus
from typing import Any

from werkzeug.wrappers import Response

from vastestsea.database import DuplicateKeyError

logger = logging.getLogger(__name__)

_CONTENT_TYPE = "application/json; charset=utf-8"
_DUPLICATE_PREFIX = "duplicate key value"


def write_response(payload: Any, status: int) -> Response:
    """Serialise ``payload`` as JSON into a response with the given status."""
    try:
        text = json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
    except (TypeError, ValueError) as exc:
        logger.error("Error marshalling JSON: %s", exc)
        return Response(status=HTTPStatus.INTERNAL_SERVER_ERROR)
    text = text.replace("<", "\\u003c").replace(">", "\\u003e").replace("&", "\\u0026")
    return Response(text.encode("utf-8"), status=status, content_type=_CONTENT_TYPE)


def respond_success(msg: str, status: int) -> Response:
    """Wrap ``msg`` in a success body."""
    return write_response({"body": msg}, status)


def respond_error(msg: str, status: int) -> Response:
    """Wrap ``msg`` in an error body."""
    return write_response({"error": msg}, status)


def failed_creation_code(err: BaseException) -> int:
    """Return 422 for a uniqueness violation, 500 for anything else."""
    if isinstance(err, DuplicateKeyError) or str(err).startswith(_DUPLICATE_PREFIX):
        return HTTPStatus.UNPROCESSABLE_ENTITY
    return HTTPStatus.INTERNAL_SERVER_ERROR
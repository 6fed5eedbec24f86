"""Response body decoding and outcome classification."""

from __future__ import annotations

import json
from typing import Protocol

from .errors import ResourceHttpError, classify_http_error
from .transport_shared import is_success_status


class TextResponse(Protocol):
    status_code: int

    @property
    def text(self) -> str: ...

    @property
    def reason_phrase(self) -> str: ...


def decode_body(text: str, *, format: str) -> object:
    """Parse ``text`` as JSON for the ``json`` format; malformed JSON raises as-is."""

    if text and format == "json":
        return json.loads(text)
    return text


def classify_response(
    response: TextResponse,
    *,
    format: str,
) -> tuple[object, ResourceHttpError | None]:
    text = response.text
    body = decode_body(text, format=format)
    if is_success_status(response.status_code):
        return body, None
    return body, classify_http_error(
        body,
        text=text,
        http_status=response.status_code,
        reason_phrase=response.reason_phrase,
    )


__all__ = [
    "TextResponse",
    "decode_body",
    "classify_response",
]

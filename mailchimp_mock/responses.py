"""JSON response helpers for consistent reply construction."""

from __future__ import annotations

import json
from typing import Any, Dict, Optional

from fastapi.responses import JSONResponse


class PrettyJSONResponse(JSONResponse):
    """JSON response rendered with a two-space indent."""

    def render(self, content: Any) -> bytes:
        return json.dumps(content, ensure_ascii=False, indent=2).encode("utf-8")


def make_response(
    status: int,
    body: Any | None = None,
    headers: Optional[Dict[str, str]] = None,
    *,
    pretty: bool = False,
) -> JSONResponse:
    """Build a JSON response, optionally pretty-printed."""

    response_class = PrettyJSONResponse if pretty else JSONResponse
    return response_class(content=body, status_code=status, headers=dict(headers or {}))


def message_response(status: int, message: str, headers: Optional[Dict[str, str]] = None) -> JSONResponse:
    """Build the ``{"message": ...}`` body used by acknowledgements and errors."""

    return make_response(status, {"message": message}, headers)

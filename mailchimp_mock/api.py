"""
API request orchestration for the catch-all route.
"""

from __future__ import annotations

import logging
from typing import Dict

from fastapi import Depends, Request
from fastapi.responses import Response

from .fixture import MemberFixture
from .responses import make_response, message_response
from .routing import Route, parse_or_default, resolve

logger = logging.getLogger(__name__)


DEFAULT_OFFSET = 0
DEFAULT_COUNT = 100


def fixture_dependency(request: Request) -> MemberFixture:
    """Return the fixture owned by the running application."""

    return request.app.state.fixture


async def list_members(request: Request, params: Dict[str, str], fixture: MemberFixture) -> Response:
    """Return one page of the fixture's members inside the fixture envelope."""

    offset = parse_or_default(request.query_params.get("offset"), DEFAULT_OFFSET)
    count = parse_or_default(request.query_params.get("count"), DEFAULT_COUNT)

    body = fixture.page(offset, count)
    logger.info(
        "members_listed",
        extra={
            "list_id": params["list_id"],
            "offset": offset,
            "count": count,
            "returned": len(body["members"]),
            "response": body,
        },
    )
    return make_response(200, body, pretty=True)


async def update_member(request: Request, params: Dict[str, str], fixture: MemberFixture) -> Response:
    """Acknowledge a member update without applying it."""

    logger.info("member_update_acknowledged", extra=dict(params))
    return message_response(200, "OK")


ROUTES = (
    Route("GET", "/3.0/lists/{list_id}/members", list_members),
    Route("PATCH", "/3.0/lists/{list_id}/members/{member_id}", update_member),
)


async def handle_request(
    full_path: str,
    request: Request,
    fixture: MemberFixture = Depends(fixture_dependency),
) -> Response:
    """Entry point for the catch-all FastAPI route."""

    match = resolve(ROUTES, request.method, f"/{full_path}")
    if match is None:
        logger.info("route_not_found", extra={"method": request.method, "url": str(request.url)})
        return message_response(404, "Not Found")

    route, params = match
    return await route.handler(request, params, fixture)

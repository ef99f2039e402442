"""Read-only member fixture loaded once at application startup."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Tuple

from .errors import FixtureLoadError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MemberFixture:
    """The fixture document split into its envelope fields and member records.

    ``fields`` holds every top-level key of the document except ``members``;
    they are passed through untouched on list responses.
    """

    fields: Mapping[str, Any]
    members: Tuple[Any, ...]

    def page(self, offset: int, count: int) -> Dict[str, Any]:
        """Build a list envelope holding ``members[offset:offset + count]``."""

        envelope: Dict[str, Any] = dict(self.fields)
        envelope["members"] = list(self.members[offset : offset + count])
        return envelope

    def __len__(self) -> int:
        return len(self.members)


def parse_fixture(document: Any, *, path: Path) -> MemberFixture:
    """Validate a decoded fixture document and freeze it."""

    if not isinstance(document, dict):
        raise FixtureLoadError("Fixture document must be a JSON object", path=path)

    members = document.get("members")
    if not isinstance(members, list):
        raise FixtureLoadError("Fixture document must contain a 'members' array", path=path)

    fields = {key: value for key, value in document.items() if key != "members"}
    return MemberFixture(fields=MappingProxyType(fields), members=tuple(members))


def load_fixture(path: Path) -> MemberFixture:
    """Read and decode the fixture file at ``path``."""

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise FixtureLoadError("Unable to read fixture file", path=path) from exc

    try:
        document = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise FixtureLoadError(f"Invalid JSON in fixture file ({exc.msg})", path=path) from exc

    fixture = parse_fixture(document, path=path)
    logger.info("fixture_loaded %s (%d members)", path, len(fixture))
    return fixture

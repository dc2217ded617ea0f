"""Novel identifier discovery from the page hydration payload.

Detail pages embed a ``__NUXT_DATA__`` JSON array. The chapter API needs the
novel's internal identifier, which only appears there: the first array
element that is an object with a string ``path`` holds the canonical route,
and the identifier is its last path segment.
"""

from __future__ import annotations

import json
from typing import Any

import structlog
from pydantic import ValidationError

from fictionzone.errors import StructuralParseError
from fictionzone.models.api import HydrationRoute

log = structlog.get_logger()


def decode_payload(raw: str) -> Any:
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        raise StructuralParseError(f"Nuxt data is not valid JSON: {exc}") from exc


def find_route(payload: Any) -> HydrationRoute | None:
    """Return the first route-bearing element, or ``None`` when there is none."""
    if not isinstance(payload, list):
        log.debug("hydration_payload_not_array", payload_type=type(payload).__name__)
        return None

    for element in payload:
        if not isinstance(element, dict) or "path" not in element:
            continue
        try:
            return HydrationRoute.model_validate(element)
        except ValidationError:
            # "path" present but not a string: not a route, keep scanning
            continue
    return None


def extract_novel_id(raw: str) -> str | None:
    """Decode the payload and return the novel identifier, if discoverable.

    Raises ``StructuralParseError`` only when the payload is not JSON at all.
    A well-formed payload without a usable route yields ``None``.
    """
    route = find_route(decode_payload(raw))
    if route is None:
        return None
    novel_id = route.path.rsplit("/", 1)[-1]
    return novel_id or None

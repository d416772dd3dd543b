"""Cache key derivation for the cached routes.

Every key function is pure: it only looks at the request descriptor, so the
same request always maps to the same key. Keys are global; they carry no
user or session discriminator.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from learnhub.entities import CacheTier


@dataclass(frozen=True)
class CacheRequest:
    """Minimal description of an inbound request, as seen by key functions.

    Attributes:
        method: HTTP method
        params: Route parameters (e.g. {"id": "42"})
    """

    method: str = "GET"
    params: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def get(cls, **params: str) -> "CacheRequest":
        return cls(method="GET", params=MappingProxyType(dict(params)))


KeyFn = Callable[[CacheRequest], str]


def course_list_key(request: CacheRequest) -> str:
    return "courses:list"


def course_by_id_key(request: CacheRequest) -> str:
    return f"course:{request.params['id']}"


def notes_by_course_key(request: CacheRequest) -> str:
    return f"notes:course:{request.params['course_id']}"


def note_list_key(request: CacheRequest) -> str:
    return "notes:list"


def summary_latest_key(request: CacheRequest) -> str:
    return f"summary:latest:{request.params['id']}"


# Tier binding for each cached route
ROUTE_TIERS: dict[str, tuple[CacheTier, KeyFn]] = {
    "course_list": (CacheTier.MEDIUM, course_list_key),
    "course_by_id": (CacheTier.LONG, course_by_id_key),
    "notes_by_course": (CacheTier.SHORT, notes_by_course_key),
    "note_list": (CacheTier.SHORT, note_list_key),
    "summary_latest": (CacheTier.LONG, summary_latest_key),
}

# Tiers to flush after a write to each resource
INVALIDATION: dict[str, tuple[CacheTier, ...]] = {
    "course": (CacheTier.SHORT, CacheTier.MEDIUM, CacheTier.LONG),
    "note": (CacheTier.SHORT,),
    "summary": (CacheTier.LONG,),
}

"""Type definitions for the followed rooms client.

This module provides TypedDict definitions for the JSON-serialisable shapes
returned to callers. Field names match the remote API and must not change,
since downstream consumers (templates, scripts) key on them.
"""

from typing import Literal, TypedDict, NotRequired


class RoomDict(TypedDict):
    """A single online room as returned by the API."""
    room: str
    image: str


class SnapshotDict(TypedDict):
    """Raw API response: counts plus the list of online rooms."""
    online: int
    total: int
    online_rooms: list[RoomDict]


class PaginationDict(TypedDict):
    """Pagination metadata attached to a page of results."""
    page: int
    pageSize: int
    totalPages: int
    totalItems: int
    hasNextPage: bool
    hasPrevPage: bool
    startIndex: NotRequired[int]
    endIndex: NotRequired[int]


class PageDict(TypedDict):
    """A page of rooms (paginated listing or search result)."""
    online: int
    total: int
    query: NotRequired[str]
    rooms: list[RoomDict]
    pagination: PaginationDict


class StatsDict(TypedDict):
    """Aggregate statistics about followed rooms."""
    online: int
    offline: int
    total: int
    onlinePercentage: str
    entryCount: int


class Credentials(TypedDict):
    """Cookie credentials used to authenticate against the API."""
    session_id: str
    csrf_token: str


# A page size is either a positive integer or the literal 'all'
PageSize = int | Literal['all']

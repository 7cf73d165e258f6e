"""Room data model and the pure operations over it.

This module contains:
- Entry / Snapshot: immutable value types for one API fetch
- PageView / RoomStats: derived views computed on demand
- parse_snapshot: shape validation of the raw API payload
- paginate, filter_entries, find_by_name, compute_stats: the listing logic
  shared by the client's pagination, search and lookup operations

Nothing here touches the network or the cache.
"""

import math
from dataclasses import dataclass

from core.errors import InvalidResponseError, ValidationError
from models.types import PageDict, PageSize, RoomDict, SnapshotDict, StatsDict
from models.utils import format_percentage

# Page size meaning "everything on a single page"
UNBOUNDED = 'all'


@dataclass(frozen=True)
class Entry:
    """One online room: its name and thumbnail URL."""
    name: str
    thumbnail_url: str = ''

    def to_dict(self) -> RoomDict:
        return {'room': self.name, 'image': self.thumbnail_url}


@dataclass(frozen=True)
class Snapshot:
    """The result of one fetch: aggregate counts plus listed online rooms.

    online_count <= total_followed is expected but not enforced, and
    len(entries) may differ from online_count.
    """
    online_count: int
    total_followed: int
    entries: tuple[Entry, ...] = ()

    def to_dict(self) -> SnapshotDict:
        return {
            'online': self.online_count,
            'total': self.total_followed,
            'online_rooms': [entry.to_dict() for entry in self.entries],
        }


@dataclass(frozen=True)
class PageView:
    """A bounded slice of entries plus pagination metadata.

    start_index and end_index are 1-based and inclusive. They are None when
    everything fits on one page, matching what the API consumers expect.
    """
    items: tuple[Entry, ...]
    page: int
    page_size: int
    total_pages: int
    total_items: int
    has_next: bool
    has_prev: bool
    online: int = 0
    total: int = 0
    start_index: int | None = None
    end_index: int | None = None
    query: str | None = None

    def to_dict(self) -> PageDict:
        """Convert to the outbound JSON shape.

        Returns:
            Dict with online, total, optional query, rooms and pagination keys
        """
        pagination = {
            'page': self.page,
            'pageSize': self.page_size,
            'totalPages': self.total_pages,
            'totalItems': self.total_items,
            'hasNextPage': self.has_next,
            'hasPrevPage': self.has_prev,
        }
        if self.start_index is not None:
            pagination['startIndex'] = self.start_index
            pagination['endIndex'] = self.end_index

        result = {'online': self.online, 'total': self.total}
        if self.query is not None:
            result['query'] = self.query
        result['rooms'] = [entry.to_dict() for entry in self.items]
        result['pagination'] = pagination
        return result


@dataclass(frozen=True)
class RoomStats:
    """Online/offline counts for the followed rooms."""
    online: int
    offline: int
    total: int
    online_percentage: str
    entry_count: int

    def to_dict(self) -> StatsDict:
        return {
            'online': self.online,
            'offline': self.offline,
            'total': self.total,
            'onlinePercentage': self.online_percentage,
            'entryCount': self.entry_count,
        }


def _is_count(value) -> bool:
    # bool is an int subclass but never a valid count
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def parse_snapshot(data) -> Snapshot:
    """Validate a raw API payload and build a Snapshot from it.

    Args:
        data: Parsed JSON from the followed rooms endpoint

    Returns:
        Immutable Snapshot

    Raises:
        InvalidResponseError: If counts or the room list are missing or malformed
    """
    if not isinstance(data, dict):
        raise InvalidResponseError("Invalid response: expected a JSON object")
    if not _is_count(data.get('online')):
        raise InvalidResponseError("Invalid response: missing online count")
    if not _is_count(data.get('total')):
        raise InvalidResponseError("Invalid response: missing total count")

    rooms = data.get('online_rooms')
    if not isinstance(rooms, list):
        raise InvalidResponseError("Invalid response: online_rooms is not an array")

    entries = []
    for index, room in enumerate(rooms):
        if not isinstance(room, dict):
            raise InvalidResponseError(f"Invalid response: room at index {index} is not an object")
        name = room.get('room')
        if not isinstance(name, str) or not name:
            raise InvalidResponseError(f"Invalid response: room at index {index} has no name")
        image = room.get('image', '')
        if image is None:
            image = ''
        if not isinstance(image, str):
            raise InvalidResponseError(f"Invalid response: room at index {index} has a non-string image")
        entries.append(Entry(name=name, thumbnail_url=image))

    return Snapshot(
        online_count=data['online'],
        total_followed=data['total'],
        entries=tuple(entries),
    )


def validate_page(page) -> int:
    """Normalise a requested page number. Pages below 1 clamp to 1."""
    if page is None:
        return 1
    if not isinstance(page, int) or isinstance(page, bool):
        raise ValidationError(f"Page must be an integer, got {page!r}")
    return max(1, page)


def validate_page_size(page_size: PageSize) -> PageSize:
    """Check a page size is a positive integer or 'all'."""
    if page_size == UNBOUNDED:
        return page_size
    if not isinstance(page_size, int) or isinstance(page_size, bool) or page_size < 1:
        raise ValidationError(f"Page size must be a positive integer or '{UNBOUNDED}', got {page_size!r}")
    return page_size


def paginate(items, page: int = 1, page_size: PageSize = 25, **extra) -> PageView:
    """Slice items into a single page and compute pagination metadata.

    Out-of-range page numbers clamp to the last page instead of erroring.

    Args:
        items: Ordered sequence of entries to paginate
        page: Requested page number (1-based)
        page_size: Items per page, or 'all' for a single page
        **extra: online, total and query values copied onto the PageView

    Returns:
        PageView over the requested page
    """
    items = tuple(items)
    page = validate_page(page)
    page_size = validate_page_size(page_size)
    total_items = len(items)

    if page_size == UNBOUNDED or page_size >= total_items:
        return PageView(
            items=items,
            page=1,
            page_size=total_items,
            total_pages=1,
            total_items=total_items,
            has_next=False,
            has_prev=False,
            **extra,
        )

    total_pages = max(1, math.ceil(total_items / page_size))
    safe_page = min(page, total_pages)
    start = (safe_page - 1) * page_size
    end = min(start + page_size, total_items)

    return PageView(
        items=items[start:end],
        page=safe_page,
        page_size=page_size,
        total_pages=total_pages,
        total_items=total_items,
        has_next=safe_page < total_pages,
        has_prev=safe_page > 1,
        start_index=start + 1,
        end_index=end,
        **extra,
    )


def filter_entries(entries, query: str | None) -> tuple[Entry, ...]:
    """Keep entries whose name contains query, ignoring case.

    An empty or whitespace-only query returns every entry.
    """
    needle = (query or '').strip().lower()
    if not needle:
        return tuple(entries)
    return tuple(entry for entry in entries if needle in entry.name.lower())


def find_by_name(entries, name: str) -> Entry | None:
    """Return the first entry whose name equals name, ignoring case."""
    if not isinstance(name, str) or not name.strip():
        raise ValidationError("Room name is required")

    target = name.lower()
    for entry in entries:
        if entry.name.lower() == target:
            return entry
    return None


def compute_stats(snapshot: Snapshot) -> RoomStats:
    """Derive online/offline statistics from a snapshot."""
    return RoomStats(
        online=snapshot.online_count,
        offline=snapshot.total_followed - snapshot.online_count,
        total=snapshot.total_followed,
        online_percentage=format_percentage(snapshot.online_count, snapshot.total_followed),
        entry_count=len(snapshot.entries),
    )

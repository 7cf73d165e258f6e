"""RoomListClient for the followed online rooms API.

This module contains the client class that owns the credentials and the
short-lived snapshot cache, and derives pagination, search, lookup and
statistics views from the cached snapshot.
"""

from typing import Callable, Iterator

import requests

from core.cache import CacheSlot, DEFAULT_TTL_MS, get_cache_info
from core.errors import ConfigurationError, ValidationError
from core.http import make_fetcher
from models.room import (
    Entry,
    PageView,
    RoomStats,
    Snapshot,
    compute_stats,
    filter_entries,
    find_by_name,
    paginate as paginate_entries,
    parse_snapshot,
    validate_page_size,
)
from models.types import PageSize

DEFAULT_PAGE_SIZE = 25


class RoomListClient:
    """Fetches followed online rooms and pages, searches and summarises them."""

    def __init__(self, session_id: str, csrf_token: str,
                 additional_cookies: dict[str, str] | None = None,
                 default_page_size: int = DEFAULT_PAGE_SIZE,
                 cache_ttl_ms: int = DEFAULT_TTL_MS,
                 fetcher: Callable[[], dict] | None = None,
                 clock: Callable[[], int] | None = None):
        """Initialise RoomListClient.

        Args:
            session_id: Session ID cookie (required)
            csrf_token: CSRF token cookie (required)
            additional_cookies: Extra cookies sent with every request
            default_page_size: Page size used when none is given
            cache_ttl_ms: How long a fetched snapshot is reused, in milliseconds
            fetcher: Zero-argument callable returning the parsed API payload;
                defaults to an HTTP fetcher built from the credentials
            clock: Callable returning epoch milliseconds, used by the cache

        Raises:
            ConfigurationError: If credentials are missing or settings invalid
        """
        if not session_id:
            raise ConfigurationError("session_id is required for authentication")
        if not csrf_token:
            raise ConfigurationError("csrf_token is required for authentication")
        try:
            validate_page_size(default_page_size)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid default_page_size: {e}") from e
        if not isinstance(cache_ttl_ms, int) or isinstance(cache_ttl_ms, bool) or cache_ttl_ms < 0:
            raise ConfigurationError(f"cache_ttl_ms must be a non-negative integer, got {cache_ttl_ms!r}")

        self.session_id = session_id
        self.csrf_token = csrf_token
        self.additional_cookies = dict(additional_cookies or {})
        self.default_page_size = default_page_size
        self.session = None

        if fetcher is None:
            self.session = requests.Session()
            fetcher = make_fetcher(self.session, session_id, csrf_token,
                                   self.additional_cookies)
        self._fetch = fetcher
        self._cache = CacheSlot(cache_ttl_ms, clock)

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def close(self):
        """Release the underlying HTTP session, if this client owns one."""
        if self.session is not None:
            self.session.close()

    @property
    def cache_ttl_ms(self) -> int:
        return self._cache.ttl_ms

    def refresh(self, use_cache: bool = True) -> Snapshot:
        """Return the current snapshot, fetching it if the cache is not usable.

        Issues at most one request per call. A failed fetch leaves the
        previously cached snapshot in place.

        Args:
            use_cache: If False, always fetch from the API

        Returns:
            Snapshot with online/total counts and online rooms

        Raises:
            TransportError: If the request fails
            InvalidResponseError: If the payload has the wrong shape
        """
        if use_cache and self._cache.is_valid():
            return self._cache.snapshot

        snapshot = parse_snapshot(self._fetch())
        self._cache.store(snapshot)
        return snapshot

    fetch_all = refresh

    def _resolve_page_size(self, page_size: PageSize | None) -> PageSize:
        return self.default_page_size if page_size is None else page_size

    def get_page(self, page: int = 1, page_size: PageSize | None = None) -> PageView:
        """Get one page of all online rooms.

        Args:
            page: Page number (1-indexed); out-of-range pages clamp
            page_size: Items per page, 'all', or None for the default

        Returns:
            PageView for the requested page
        """
        size = validate_page_size(self._resolve_page_size(page_size))
        snapshot = self.refresh()
        return paginate_entries(snapshot.entries, page, size,
                                online=snapshot.online_count, total=snapshot.total_followed)

    fetch_paginated = get_page

    def search(self, query: str | None, page: int = 1,
               page_size: PageSize | None = None) -> PageView:
        """Search online rooms by name, case-insensitively, with pagination.

        An empty or whitespace-only query matches every room.

        Args:
            query: Substring to look for in room names
            page: Page number (1-indexed)
            page_size: Items per page, 'all', or None for the default

        Returns:
            PageView over the matching rooms, carrying the query
        """
        size = validate_page_size(self._resolve_page_size(page_size))
        snapshot = self.refresh()
        matches = filter_entries(snapshot.entries, query)
        return paginate_entries(matches, page, size,
                                online=snapshot.online_count, total=snapshot.total_followed,
                                query=query if query is not None else '')

    def iterate_pages(self, page_size: PageSize | None = None) -> Iterator[PageView]:
        """Yield every page in order, starting from page 1.

        Each page goes through get_page(), so the cache is re-checked per page.
        Stop consuming at any point to cancel.

        Args:
            page_size: Items per page, 'all', or None for the default

        Yields:
            PageView for pages 1, 2, ... until the last page
        """
        size = validate_page_size(self._resolve_page_size(page_size))
        page = 1
        while True:
            view = self.get_page(page, size)
            yield view
            if not view.has_next:
                return
            page += 1

    paginate = iterate_pages

    def find_entry(self, name: str) -> Entry | None:
        """Find an online room by exact name, ignoring case.

        Args:
            name: Room name to look up

        Returns:
            Matching Entry, or None if the room is not online

        Raises:
            ValidationError: If name is empty
        """
        if not isinstance(name, str) or not name.strip():
            raise ValidationError("Room name is required")
        snapshot = self.refresh()
        return find_by_name(snapshot.entries, name)

    get_room = find_entry

    def get_stats(self) -> RoomStats:
        """Get online/offline statistics about followed rooms."""
        return compute_stats(self.refresh())

    def clear_cache(self):
        """Clear the cached snapshot, forcing the next call to fetch."""
        self._cache.clear()

    def set_cache_ttl(self, ttl_ms: int):
        """Set the cache time-to-live in milliseconds.

        Applies to future validity checks only.
        """
        if not isinstance(ttl_ms, int) or isinstance(ttl_ms, bool) or ttl_ms < 0:
            raise ValidationError(f"Cache TTL must be a non-negative integer, got {ttl_ms!r}")
        self._cache.ttl_ms = ttl_ms

    def cache_info(self) -> dict:
        """Describe the cache slot (see core.cache.get_cache_info)."""
        return get_cache_info(self._cache)

"""Tests for the snapshot cache in core/cache.py"""

import pytest
from unittest.mock import patch

from core.cache import CacheSlot, DEFAULT_TTL_MS, get_cache_info, now_ms
from models.room import Entry, Snapshot


@pytest.fixture
def snapshot():
    return Snapshot(online_count=2, total_followed=4, entries=(Entry('a'), Entry('b')))


class TestNowMs:
    """Test the default clock."""

    @patch('core.cache.time')
    def test_converts_seconds_to_ms(self, mock_time):
        mock_time.time.return_value = 1700000000.1234
        assert now_ms() == 1700000000123


class TestCacheSlot:
    """Test validity, storage and clearing."""

    def test_empty_slot_is_invalid(self, clock):
        slot = CacheSlot(clock=clock)

        assert slot.is_valid() is False
        assert slot.age_ms() is None
        assert slot.ttl_ms == DEFAULT_TTL_MS

    def test_valid_until_ttl(self, clock, snapshot):
        slot = CacheSlot(1000, clock)
        slot.store(snapshot)

        clock.advance(999)
        assert slot.is_valid() is True

        clock.advance(1)
        assert slot.is_valid() is False

    def test_store_replaces_snapshot(self, clock, snapshot):
        slot = CacheSlot(1000, clock)
        slot.store(Snapshot(online_count=0, total_followed=0))
        clock.advance(500)
        slot.store(snapshot)

        assert slot.snapshot is snapshot
        assert slot.age_ms() == 0

    def test_clear(self, clock, snapshot):
        slot = CacheSlot(1000, clock)
        slot.store(snapshot)

        slot.clear()

        assert slot.snapshot is None
        assert slot.fetched_at_ms is None
        assert slot.is_valid() is False

    def test_ttl_change_applies_to_next_check(self, clock, snapshot):
        slot = CacheSlot(1000, clock)
        slot.store(snapshot)
        clock.advance(600)

        slot.ttl_ms = 500

        assert slot.is_valid() is False


class TestGetCacheInfo:
    """Test cache information for display."""

    def test_empty(self, clock):
        info = get_cache_info(CacheSlot(1000, clock))

        assert info == {
            'exists': False,
            'fetched_at_ms': None,
            'age_ms': None,
            'ttl_ms': 1000,
            'is_stale': True,
            'counts': {},
        }

    def test_populated(self, clock, snapshot):
        slot = CacheSlot(1000, clock)
        slot.store(snapshot)
        clock.advance(100)

        info = get_cache_info(slot)

        assert info['exists'] is True
        assert info['fetched_at_ms'] == clock.now - 100
        assert info['age_ms'] == 100
        assert info['is_stale'] is False
        assert info['counts'] == {'online': 2, 'total': 4, 'entries': 2}

    def test_stale(self, clock, snapshot):
        slot = CacheSlot(1000, clock)
        slot.store(snapshot)
        clock.advance(5000)

        assert get_cache_info(slot)['is_stale'] is True

"""Pytest configuration and fixtures for followed rooms tests."""

import pytest
from pathlib import Path
from unittest.mock import MagicMock

from core.client import RoomListClient


@pytest.fixture
def project_root():
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def example_payload():
    """The three-room payload used throughout the tests."""
    return {
        'online': 3,
        'total': 5,
        'online_rooms': [
            {'room': 'alpha', 'image': 'https://img.example/alpha.jpg'},
            {'room': 'Beta', 'image': 'https://img.example/beta.jpg'},
            {'room': 'gamma', 'image': ''},
        ],
    }


class FakeClock:
    """Manually advanced millisecond clock."""

    def __init__(self, start: int = 1_000_000):
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int):
        self.now += ms


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def fetcher(example_payload):
    """Mock fetch capability returning the example payload."""
    return MagicMock(return_value=example_payload)


@pytest.fixture
def client(fetcher, clock):
    """RoomListClient wired to the mock fetcher and fake clock."""
    return RoomListClient('session-123', 'csrf-456', fetcher=fetcher, clock=clock)


@pytest.fixture
def make_payload():
    """Factory building a payload with count rooms named room00, room01, ..."""
    def _make(count: int, online: int | None = None, total: int | None = None) -> dict:
        rooms = [{'room': f'room{i:02d}', 'image': f'https://img.example/{i}.jpg'} for i in range(count)]
        online = count if online is None else online
        return {'online': online, 'total': max(online, count) if total is None else total, 'online_rooms': rooms}
    return _make

"""Tests for utility functions in models/utils.py"""

import pytest
from unittest.mock import patch

from core.errors import ConfigurationError
from models.utils import (
    find_similar_strings,
    format_percentage,
    get_client,
    mask_secret,
    similarity_score,
)


class TestFormatPercentage:
    """Tests for format_percentage function."""

    def test_two_decimals(self):
        assert format_percentage(3, 5) == '60.00'
        assert format_percentage(2, 3) == '66.67'

    def test_all_and_none(self):
        assert format_percentage(4, 4) == '100.00'
        assert format_percentage(0, 4) == '0.00'

    def test_zero_whole(self):
        """Division by zero reports 0.00."""
        assert format_percentage(0, 0) == '0.00'


class TestMaskSecret:
    """Tests for mask_secret function."""

    def test_keeps_last_four(self):
        assert mask_secret('abcdefgh') == '****efgh'

    def test_short_values_fully_masked(self):
        assert mask_secret('abc') == '***'

    def test_empty(self):
        assert mask_secret('') == ''
        assert mask_secret(None) == ''


class TestSimilarityScore:
    """Tests for similarity_score function."""

    def test_exact_match(self):
        assert similarity_score('Alpha', 'alpha') == 100

    def test_prefix_match(self):
        assert similarity_score('alp', 'alpha') == 80

    def test_substring_match(self):
        assert similarity_score('lph', 'alpha') == 60

    def test_no_match(self):
        assert similarity_score('xyz', 'alpha') == 0


class TestFindSimilarStrings:
    """Tests for find_similar_strings function."""

    def test_ranked_by_score(self):
        candidates = ['gamma', 'alphabet', 'alpha', 'beta']
        assert find_similar_strings('alpha', candidates) == ['alpha', 'alphabet']

    def test_limit(self):
        candidates = ['room1', 'room2', 'room3']
        assert len(find_similar_strings('room', candidates, limit=2)) == 2

    def test_empty_candidates(self):
        assert find_similar_strings('alpha', []) == []


class TestGetClient:
    """Tests for get_client helper."""

    @patch('core.config.build_client')
    def test_returns_client(self, mock_build):
        assert get_client(default_page_size=5) is mock_build.return_value
        mock_build.assert_called_once_with(default_page_size=5)

    @patch('core.config.build_client')
    def test_returns_none_without_credentials(self, mock_build, capsys):
        mock_build.side_effect = ConfigurationError('No credentials configured')

        assert get_client() is None
        assert 'No credentials configured' in capsys.readouterr().err

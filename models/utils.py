"""Utility functions for the followed rooms client.

This module contains helper functions used across the application:
- format_percentage: Two-decimal percentage string with a zero-total policy
- mask_secret: Hide most of a credential for display
- get_client: Helper to build a configured client for CLI commands
- similarity_score: Canonical fuzzy string matching algorithm
- find_similar_strings: Find similar strings using fuzzy matching
"""

import click


def format_percentage(part: int, whole: int) -> str:
    """Format part/whole as a percentage with two decimals.

    A zero whole yields '0.00' rather than a not-a-number value.

    Args:
        part: Numerator (e.g. online rooms)
        whole: Denominator (e.g. total followed rooms)

    Returns:
        Percentage string such as '60.00'
    """
    if not whole:
        return '0.00'
    return f"{part / whole * 100:.2f}"


def mask_secret(value: str | None, visible: int = 4) -> str:
    """Mask a credential, keeping only the last few characters."""
    if not value:
        return ''
    if len(value) <= visible:
        return '*' * len(value)
    return '*' * (len(value) - visible) + value[-visible:]


def get_client(**overrides):
    """Get a configured RoomListClient for a CLI command.

    This helper reduces boilerplate in commands that talk to the API.

    Args:
        **overrides: Settings passed through to build_client()

    Returns:
        A RoomListClient, or None if credentials are not configured
    """
    # Import here to avoid circular dependency
    from core.config import build_client
    from core.errors import ConfigurationError

    try:
        return build_client(**overrides)
    except ConfigurationError as e:
        click.secho(f"✗ {e}", fg='red', err=True)
        click.echo("Run 'configure' to set up credentials, or set CB_SESSION_ID and CB_CSRF_TOKEN.", err=True)
        return None


def similarity_score(s1: str, s2: str) -> int:
    """Calculate similarity score between two strings.

    Used for "did you mean" hints: mistyped CLI commands and room names
    that are not in the current snapshot.

    Args:
        s1: First string to compare
        s2: Second string to compare

    Returns:
        Similarity score:
        - 100: Exact match (case-insensitive)
        - 80: Prefix match
        - 60: Substring match
        - 0-50: Character sequence match (proportional to matching characters)
        - 0: No match
    """
    s1_lower = s1.lower()
    s2_lower = s2.lower()

    if s1_lower == s2_lower:
        return 100

    if s2_lower.startswith(s1_lower) or s1_lower.startswith(s2_lower):
        return 80

    if s1_lower in s2_lower or s2_lower in s1_lower:
        return 60

    # Character sequence matching
    matches = 0
    j = 0
    for char in s1_lower:
        while j < len(s2_lower):
            if s2_lower[j] == char:
                matches += 1
                j += 1
                break
            j += 1

    if matches > 0:
        score = int((matches / max(len(s1_lower), len(s2_lower))) * 50)
        return score if score > 20 else 0

    return 0


def find_similar_strings(target: str, candidates: list[str], limit: int = 5) -> list[str]:
    """Rank candidates (command or room names) by similarity to target.

    Args:
        target: The string to match against
        candidates: List of candidate strings to search
        limit: Maximum number of results to return

    Returns:
        List of similar strings, sorted by similarity score (most similar first)
    """
    scored = [(candidate, similarity_score(target, candidate)) for candidate in candidates]
    filtered = [(c, s) for c, s in scored if s > 0]
    sorted_matches = sorted(filtered, key=lambda x: x[1], reverse=True)

    return [c for c, s in sorted_matches[:limit]]

"""Data models and utility functions.

This package contains:
- room: Entry, Snapshot and PageView types plus pagination/search logic
- types: TypedDict shapes of the JSON returned to callers
- utils: Utility functions (similarity_score, format_percentage, etc.)
"""

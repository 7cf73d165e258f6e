"""CLI command modules.

This package contains:
- rooms: Listing commands (list, search, pages, room, stats, dump)
- setup: Setup and help commands, and the coloured command group
"""

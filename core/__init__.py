"""Core functionality for the followed rooms client.

This package contains:
- client: RoomListClient class for fetching, paging and searching rooms
- http: Cookie/header construction and the HTTP request
- cache: The time-boxed in-memory snapshot cache
- config: Credential and settings loading
- errors: Exception types
"""

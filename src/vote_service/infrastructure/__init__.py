"""Infrastructure layer - external systems integration.

This layer contains implementations for:
- Persistence (SQLite repositories over aiosqlite)
- Clients (HTTP document validator over httpx)
"""

"""
Application layer for the catalog bounded context.

Services coordinate domain entities and ports to fulfill
CRUD operations. No framework or infrastructure imports allowed.
"""

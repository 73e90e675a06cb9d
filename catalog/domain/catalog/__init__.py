"""
Catalog bounded context: domain layer.

This module contains the domain model of the catalog:
- Categories and the products tagged with them
- Users and the roles granted to them
- Paging primitives shared by every collection read
"""

"""
Catalog: a REST backend for categories, products, users and roles.

Application package root. A modular monolith using hexagonal
architecture (ports & adapters).

Bounded contexts:
    - catalog: Category, Product, User and Role CRUD.

Layers:
    - domain: Entities, ports (ABCs), errors. No framework imports.
    - application: Services, DTOs, error translation.
    - infrastructure: SQLAlchemy adapters implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas, dependency wiring.
    - shared: Cross-cutting concerns (errors, security, logging).
"""

"""
Campus Accounts: user, organization and school management API.

Application package root. This is a modular monolith using
hexagonal architecture (ports & adapters) with domain-driven design.

Bounded contexts:
    - accounts: Users (validation, hashing, uniqueness), organizations, schools.

Layers:
    - domain: Pure business logic, entities, ports (ABCs), errors.
    - application: The user service, DTOs, orchestration.
    - infrastructure: Adapters (PostgreSQL, bcrypt) implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (errors, security, logging).
"""

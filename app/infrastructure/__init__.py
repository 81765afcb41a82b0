"""
Infrastructure layer package.

Contains concrete implementations (adapters) of the ports
defined in the domain layer: the database engine, repositories
and the password hasher.
"""

"""
Application layer for the accounts bounded context.

The user service coordinates validation, hashing and the repository
port to fulfill account operations. No framework or infrastructure
imports allowed.
"""

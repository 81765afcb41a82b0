"""
Accounts bounded context: domain layer.

This module contains all domain logic for the accounts context:
- User records and their validation rules
- Organization and school records
- Port interfaces for persistence and password hashing
"""

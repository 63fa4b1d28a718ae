"""
Services Package

Business logic, separate from HTTP handling. Every function takes the
SQLAlchemy session first, raises a domain error (library_api.exceptions)
before writing anything when a rule fails, and commits once on success.

Current services:
- catalog.py: Book CRUD and the ISBN soft-uniqueness rule
- registration.py: Borrower CRUD and name/email uniqueness
- lending.py: Borrow/return state machine
- rate_limiter.py: slowapi limiter and its 429 handler (HTTP plumbing)
"""

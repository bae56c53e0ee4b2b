"""
High-level use cases for the Nullspire API.

Routers (FastAPI endpoints) call these services instead of manipulating the
snapshot file or the database directly.
"""

"""
Core utilities shared across the Nullspire API.

This package hosts configuration (env vars, paths) and admin credential
verification. Routers and services depend on these primitives instead of
reading the environment themselves.
"""

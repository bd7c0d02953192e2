"""Business logic for RedShare.

Each module exposes plain functions that take a SQLAlchemy ``Session`` first
and raise :mod:`redshare.core.errors` exceptions on domain failures.
"""

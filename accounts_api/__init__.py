"""Accounts API: user registration, authentication and message logging."""

__version__ = "0.1.0"

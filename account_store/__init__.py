"""User account and session data-access layer over MongoDB."""

__version__ = "0.1.0"

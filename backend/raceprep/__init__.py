"""Race preparation checklist manager."""

__version__ = "0.1.0"

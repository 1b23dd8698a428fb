"""Interactive command-line tool for creating database users."""

__version__ = "0.9.0"
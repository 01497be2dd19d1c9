"""Thread helpers and a printf-style formatter for logging libraries."""

__version__ = "0.1.0"
__all__ = ["locking", "cspec", "cformat"]
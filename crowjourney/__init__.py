"""In-memory JSON HTTP services for books and users, and a greeting server."""

__version__ = "1.0.0"
__all__ = ["books", "hello", "users"]
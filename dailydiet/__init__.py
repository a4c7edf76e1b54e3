"""Daily Diet: session-scoped meal logging with on-diet streak statistics."""

__version__ = "0.1.0"

"""Error types, validation helpers, test-data generators and an HTTP client for a Conduit-style blogging API."""

__version__ = "0.1.0"

__all__ = ["app_errors", "client", "database", "generate", "http_errors", "validation"]
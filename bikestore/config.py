import os

server_mode = os.getenv("SERVER_MODE", "development")
"""The operational mode of the server."""

api_root = ""
"""The base url for the api."""

host = "0.0.0.0"
"""The interface the server binds to."""

port = 3000
"""The port the server listens on."""

sentry_dsn = os.getenv("SENTRY_DSN", None)
"""The sentry DSN to report exceptions to."""

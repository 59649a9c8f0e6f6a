"""Client implementations over concrete transports.

Each client module exports a `Client` alias for its main client class.

Available clients:
- http: HTTP via httpx
"""

from forge_client.clients import http

__all__ = [
    "http",
]

"""Infrastructure layer: HTTP transport.

This layer depends on stdlib and third-party libs (httpx, structlog).
It must never import from domain, services, commands, or output.
"""

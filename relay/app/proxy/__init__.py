"""
Proxy Package
=============

This package implements the API-key protected relay endpoint that forwards
collection creation requests to the local mint factory deploy service.

Main Components:
----------------
- routes.py: FastAPI router with the /create-collection endpoint
- normalize.py: Inbound body to deploy payload mapping and defaults
- forward.py: Single-attempt HTTP call to the deploy service

Usage:
------
    from relay.app.proxy import proxy_router
    app.include_router(proxy_router)
"""

from .routes import proxy_router

__all__ = ["proxy_router"]

"""
FastAPI REST Endpoints
======================

HTTP adapter for hosts that reach the bridge over the network.

Endpoints:
- POST /api/v1/render: Render a component from a request envelope
- GET /api/v1/components: List declared components
- GET /api/v1/health: Health check endpoint
"""

"""
Core Business Logic
==================

Resolution and rendering pipeline.

Modules:
- registry: Component name to renderable mapping, loaded lazily
- bridge: Request decoding, rendering and response encoding
- pool: Worker threads with per-request timeouts
- rendering: Jinja2-backed component rendering
- errors: Failure taxonomy
"""

"""
Data Models
===========

Pydantic data models for the request/response envelopes and the HTTP adapter.

Models:
- schemas: Render request/response envelopes, error and health responses
"""

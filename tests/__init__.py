"""
Test Suite
==========

Test suite matching the viewbridge/ package structure.

Test Categories:
- unit: Unit tests for individual modules
- integration: HTTP adapter and concurrent pipeline tests
"""

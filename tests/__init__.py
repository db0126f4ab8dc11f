"""
Test suite for Citas.

Contains unit and integration tests for the store, the repository and the
HTTP surface.
"""

"""
Tests Package - Unit Tests

Test structure:
- tests/conftest.py - shared fakes (in-memory queue, recording reporter)
- tests/test_*.py - fast, isolated unit tests; no live Redis required

Async code is driven with asyncio.run() from plain pytest functions.
"""

# tests/property/__init__.py
"""Property-based tests for cursorq.

Property-based testing validates invariants that must hold for ALL operation
sequences, not just the specific scenarios we think of.

Test categories:
- core/: IndexedQueue bounds, ordering and cursor invariants
"""

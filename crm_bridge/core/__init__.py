"""Core Layer: pure logic, no IO, no async, no HTTP.

Invariants:
    - No module in core/ imports from services/ or infrastructure/
    - All functions are pure and deterministic

Design Decisions:
    - Functional core separated from the imperative shell (HTTP client, stdio server)
"""

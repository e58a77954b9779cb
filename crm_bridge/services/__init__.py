"""Services Layer: tool schemas, per-entity handlers, registry and dispatch.

Invariants:
    - Tool dispatch uses an explicit dict mapping (no auto-discovery)
    - One define_*_tools.py and one handle_*.py per entity family
"""

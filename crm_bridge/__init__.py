"""CRM Bridge: exposes a marketing-CRM REST API as invocable tools over MCP.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
"""

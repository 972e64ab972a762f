"""
Shared helpers used by every part of the engine:
- configuration constants
- error types.
"""

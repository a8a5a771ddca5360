"""
Data access layer.

Design rules:
- Views call ONLY functions/classes in this package.
- Every users-server call is wrapped so failures surface as a return value, never an exception.
- No env var reads here (config-only).
"""

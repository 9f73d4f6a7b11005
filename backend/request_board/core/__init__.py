"""Core Layer — pure board rules: tags, validation, retention policy, errors, protocols.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Functions are pure and deterministic (the clock is passed in)
"""

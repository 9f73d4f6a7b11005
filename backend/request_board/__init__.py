"""Request Board — campus "ask for help" board: requests, likes, help offers, retention.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""

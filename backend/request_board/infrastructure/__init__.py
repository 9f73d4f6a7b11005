"""Infrastructure Layer — database sessions, logging, and collaborator implementations.

Invariants:
    - Infrastructure implements core protocols; core never imports from here
    - Collaborator failures (notification delivery) never propagate into board operations
"""

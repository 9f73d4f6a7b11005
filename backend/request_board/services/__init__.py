"""Services Layer — Request Store, Like Ledger, Help Offer Ledger, Retention Sweeper.

Invariants:
    - Each service owns one table and takes an AsyncSession in its constructor
    - Services raise core errors; they never build HTTP responses
"""

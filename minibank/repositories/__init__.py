"""Storage for ledger objects."""

"""Infrastructure adapters (ledger, signing, database)."""

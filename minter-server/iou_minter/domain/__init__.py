"""Domain layer: issuance core and mint journal."""

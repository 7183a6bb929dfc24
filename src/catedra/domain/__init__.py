"""Domain layer: identity records and their invariants."""

"""Domain layer - pure entities with no I/O."""

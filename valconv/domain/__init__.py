"""Domain layer - value objects, exceptions and persistence contracts."""

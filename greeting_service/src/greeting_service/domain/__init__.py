"""Domain layer - greeting services and value objects."""

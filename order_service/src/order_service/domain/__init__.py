"""Domain layer - order entities and value objects."""

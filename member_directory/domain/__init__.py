"""Domain layer: entities, value objects, ports and domain services."""

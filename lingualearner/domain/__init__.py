"""Domain layer: entities, repository contracts and the exception hierarchy."""

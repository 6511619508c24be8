"""Domain layer: collection access rules and deletion services."""

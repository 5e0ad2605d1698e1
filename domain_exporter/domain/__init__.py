"""Domain layer - Entities and rules with no infrastructure dependencies."""

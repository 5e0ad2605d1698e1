"""Infrastructure layer - Adapters and settings."""

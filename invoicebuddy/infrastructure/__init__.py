"""Infrastructure layer - storage and export adapters."""

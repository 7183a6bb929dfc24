"""Infrastructure layer: technology-specific adapters."""

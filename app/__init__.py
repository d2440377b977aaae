"""Hotel room search service."""

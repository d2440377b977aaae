"""Infrastructure layer: implementations of application ports (persistence)."""

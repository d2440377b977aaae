"""Persistence: engine, connection factory, named queries and repositories."""

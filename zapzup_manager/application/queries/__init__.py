"""Read operations (CQRS queries)."""

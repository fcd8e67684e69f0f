"""Infrastructure layer: configuration, logging and in-memory storage."""

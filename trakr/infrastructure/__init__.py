"""Infrastructure layer - record stores and repositories."""

"""Output layer: ServiceResult → Rich text, JSON or quiet lines."""

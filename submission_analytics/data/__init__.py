"""Data access layer: models, repositories and the repository facade."""

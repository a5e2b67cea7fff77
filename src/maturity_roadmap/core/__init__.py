"""Pure domain logic: models, category tables, and the roadmap pipeline."""

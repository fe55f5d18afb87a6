"""Infrastructure layer: source scanning and declaration extraction."""

"""Character-level scanning primitives."""

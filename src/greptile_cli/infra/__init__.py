"""Infrastructure adapters for greptile_cli."""

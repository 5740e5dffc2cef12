"""Graph engine: registry, cycle guard, topological sort, path search."""

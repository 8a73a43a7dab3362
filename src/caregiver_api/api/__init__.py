"""HTTP layer: registry, handlers and hosts."""

"""Ray-traceable primitives and the scene that holds them."""

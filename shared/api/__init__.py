"""HTTP-boundary helpers shared by the API apps."""

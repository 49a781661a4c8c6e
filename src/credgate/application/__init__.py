"""Application layer: use cases built on credgate_auth."""

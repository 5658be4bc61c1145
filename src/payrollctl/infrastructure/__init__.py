"""Infrastructure layer — the in-memory employee registry."""

"""Output layer — Rich styling for console text."""

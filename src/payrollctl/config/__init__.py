"""Configuration layer — settings models, TOML loading, and logging setup."""

"""Configuration layer: TOML discovery, settings, and logging."""

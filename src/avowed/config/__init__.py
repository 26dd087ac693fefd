"""Configuration: TOML models, unified settings, discovery, and logging."""

"""Configuration: oopnotes.toml discovery, section models, unified settings, logging."""

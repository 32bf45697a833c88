"""Configuration: settings, config discovery, and logging set-up."""

"""Core - shared server configuration, config API types and registries."""

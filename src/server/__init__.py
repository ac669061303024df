"""Server - API server startup sequence."""

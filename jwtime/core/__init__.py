"""Settings, constants and error kinds."""

"""Option schemas and validation message formatting."""

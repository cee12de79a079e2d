"""Form binding and validation for server-rendered forms."""

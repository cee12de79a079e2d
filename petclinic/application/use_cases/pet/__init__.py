"""Pet form use cases."""

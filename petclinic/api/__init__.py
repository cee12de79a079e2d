"""Web layer: controllers and templating."""

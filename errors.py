class ConfigError(ValueError):
    """Raised when knobs or canvas extents can't host a particle set."""

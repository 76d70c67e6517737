class ConfigurationError(ValueError):
    """Raised for invalid settings such as a model order below 1."""


class EmptyModelError(ValueError):
    """Raised when generation is attempted on a model with no states."""

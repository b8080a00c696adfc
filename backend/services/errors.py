class ValidationError(ValueError):
    """A required input is missing or blank."""


class GatewayError(RuntimeError):
    """The hosted model call failed or returned something we can't read."""

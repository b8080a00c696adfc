class ValidationError(ValueError):
    """Input rejected before anything is sent to the server."""


class TransportError(RuntimeError):
    """The server could not be reached or did not answer with usable JSON."""

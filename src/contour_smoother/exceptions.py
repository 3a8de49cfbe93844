"""Errors and warnings raised by the contour smoother."""


class InvalidInputError(ValueError):
    """Structurally invalid input (empty contour, empty median window, ...)."""


class ConfigurationError(ValueError):
    """Smoother parameters that would change loop termination."""


class ConfigurationWarning(UserWarning):
    """Legal but degenerate smoother parameters."""

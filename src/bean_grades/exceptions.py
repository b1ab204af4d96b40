"""Custom exceptions for bean-grades."""


class BeanGradesError(Exception):
    """Base exception for bean-grades."""

    pass


class DatasetError(BeanGradesError):
    """Raised when the input dataset cannot be read or lacks required columns."""

    pass


class ConfigurationError(BeanGradesError, ValueError):
    """Raised when pipeline configuration is invalid."""

    pass

"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """Settings are missing or unsafe for the target environment."""

    pass


class DependencyInjectionError(UtilError):
    """No provider implementation is registered for a component."""

    pass

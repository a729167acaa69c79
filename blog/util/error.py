"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """Raised when settings are unusable for the current environment."""

    pass


class DependencyInjectionError(UtilError):
    """Raised when a DI container cannot be assembled as requested."""

    def __init__(self, message: str, component: str | None = None):
        self.component = component
        super().__init__(message)

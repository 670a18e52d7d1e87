"""Custom exceptions for mdsite."""


class MdSiteError(Exception):
    """Base exception for mdsite operations."""


class ConfigError(MdSiteError):
    """Site configuration is missing or invalid."""


class MenuSpecError(MdSiteError):
    """Menu specification cannot be interpreted."""

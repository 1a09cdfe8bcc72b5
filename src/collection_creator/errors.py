"""Exceptions raised by collection-creator."""


class CollectionError(Exception):
    """Base class for all collection-creator errors."""


class SerializationError(CollectionError, ValueError):
    """A request body or the collection document could not be encoded as JSON."""


class GeneratorDisabledError(CollectionError):
    """Generation was requested while the generator is disabled in settings."""


class RouteTableError(CollectionError):
    """A route table could not be loaded from a descriptor file or import spec."""


class SettingsError(CollectionError):
    """The settings file is unreadable or invalid."""

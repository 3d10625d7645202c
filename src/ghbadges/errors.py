"""Exceptions raised by the badge composition engine."""


class BadgeError(Exception):
    """Base class for all ghbadges errors."""


class CatalogError(BadgeError):
    """A service or format catalog is missing or malformed."""


class IndexOutOfRangeError(BadgeError, IndexError):
    """A catalog index passed to a selection mutator is out of range."""


class InvalidStyleError(BadgeError, ValueError):
    """A style value is not a member of the style catalog."""


class UnknownServiceError(BadgeError, ValueError):
    """No service in the catalog has the requested name."""


class UnknownFormatError(BadgeError, ValueError):
    """No snippet format has the requested identifier."""

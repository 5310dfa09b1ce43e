"""Exceptions raised while building badge sheets."""


class BadgeError(Exception):
    """Base class for badge generation errors."""


class AssetLoadError(BadgeError):
    """Raised when an input CSV, template image or font file cannot be loaded."""


class MissingNameError(BadgeError):
    """Raised when an input row has no name to print."""


class RuleConfigError(BadgeError):
    """Raised when a badge rule list is malformed."""

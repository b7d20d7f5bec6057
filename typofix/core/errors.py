"""Exception types raised by TypoFix."""


class TypoFixError(Exception):
    """Base class for all TypoFix errors."""


class EmptyDictionaryError(TypoFixError):
    """Raised when a dictionary would be built from zero usable words."""


class FrozenDictionaryError(TypoFixError):
    """Raised when a word is inserted into a dictionary after it was frozen."""


class ConfigError(TypoFixError):
    """Raised when a configuration file cannot be read or parsed."""


class InputError(TypoFixError):
    """Raised when the text to correct cannot be decoded."""

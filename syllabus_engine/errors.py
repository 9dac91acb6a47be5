"""
Exceptions raised by the layers around the extraction engine.

The engine itself never raises on malformed syllabus text; these cover
reading documents from disk and loading configuration.
"""


class SyllabusEngineError(Exception):
    """Base class for all errors raised by this package."""


class UnsupportedDocumentError(SyllabusEngineError):
    """The document could not be decoded into plain text."""


class ConfigError(SyllabusEngineError):
    """A configuration value (usually from the environment) is invalid."""

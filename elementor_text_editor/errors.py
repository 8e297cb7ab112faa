from __future__ import annotations


class ElementorTextError(Exception):
    """Base class for errors raised by the extraction/rebuild engine."""


class MalformedInput(ElementorTextError, ValueError):
    """Text that is not JSON, or JSON of the wrong shape."""


class PathSyntaxError(ElementorTextError, ValueError):
    """A field path that cannot be parsed into traversal steps."""


class ExtractionFailure(ElementorTextError):
    """Unexpected error while walking a document for editable fields."""


class RebuildFailure(ElementorTextError):
    """The rebuild as a whole could not be carried out."""

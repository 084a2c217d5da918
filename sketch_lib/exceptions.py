"""Error types raised by the geometry engine.

Bad input is signalled with ``ValueError`` subclasses so callers that
already catch ``ValueError`` keep working, while callers that care can
branch on the specific type.

Undefined numeric results are not errors: feature functions return
``NaN`` and intersection returns ``None`` when lines have no unique
crossing point.
"""


class SketchGeometryError(ValueError):
    """Base class for all errors raised by sketch_lib."""


class InvalidGeometryError(SketchGeometryError):
    """Geometry that cannot be represented, with no fallback available.

    Raised when an implicit line fails its own endpoint check.
    """


class InvalidArgumentError(SketchGeometryError):
    """A caller-supplied parameter is out of range."""


class InsufficientPointsError(SketchGeometryError):
    """Fewer points than an operation needs."""

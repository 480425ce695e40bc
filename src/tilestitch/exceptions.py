"""Exception hierarchy for Tilestitch."""


class TileStitchError(Exception):
    """Base exception for all Tilestitch errors."""

    pass


class TileError(TileStitchError):
    """Errors related to tile designs and their primitives."""

    pass


class EmptyTileSetError(TileError):
    """A mosaic was requested without any tile designs."""

    def __init__(self) -> None:
        super().__init__("Cannot generate a mosaic from an empty tile list")


class MalformedPrimitiveError(TileError):
    """A primitive does not carry the number of points its kind requires."""

    def __init__(self, kind: str, expected: int, actual: int) -> None:
        self.kind = kind
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Malformed {kind} primitive: expected {expected} points, got {actual}"
        )


class GridError(TileStitchError):
    """Errors related to the mosaic grid."""

    pass


class InvalidRotationError(GridError):
    """Grid cell rotation is not a quarter turn."""

    def __init__(self, rotation: int) -> None:
        self.rotation = rotation
        super().__init__(f"Invalid cell rotation {rotation}: expected 0, 90, 180 or 270")


class StitchError(TileStitchError):
    """Errors in segment stitching."""

    pass


class InvalidToleranceError(StitchError):
    """Stitch tolerance must be non-negative."""

    def __init__(self, tolerance: float) -> None:
        self.tolerance = tolerance
        super().__init__(f"Stitch tolerance must be non-negative, got {tolerance}")


class ExportError(TileStitchError):
    """Errors related to exporting a mosaic."""

    pass


class DocumentSaveError(ExportError):
    """Error saving an SVG document."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save document '{path}': {reason}")

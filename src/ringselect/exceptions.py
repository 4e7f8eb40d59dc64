"""Exception hierarchy for Ringselect."""


class RingSelectError(Exception):
    """Base exception for all Ringselect errors."""

    pass


class GeometryError(RingSelectError):
    """Errors related to geometry values."""

    pass


class EmptyRingError(GeometryError):
    """Operation requires a ring with at least one point."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"Cannot compute {operation} of an empty ring")


class UnsupportedGeometryError(GeometryError):
    """Geometry type is not one of box, ring, polygon or multipolygon."""

    def __init__(self, geometry: object) -> None:
        self.type_name = type(geometry).__name__
        super().__init__(f"Unsupported geometry type '{self.type_name}'")


class InvalidGeometryError(GeometryError):
    """Serialized geometry data is malformed."""

    def __init__(self, details: str) -> None:
        self.details = details
        super().__init__(f"Invalid geometry: {details}")


class DataFileError(RingSelectError):
    """Errors related to reading or writing data files."""

    pass


class GeometryLoadError(DataFileError):
    """Error loading a geometry or intersection map file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load '{path}': {reason}")


class SelectionSaveError(DataFileError):
    """Error saving a selection map."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save selection '{path}': {reason}")

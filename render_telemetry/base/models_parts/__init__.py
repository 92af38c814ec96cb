"""One-class-per-file parts for the frame data model."""

from .field_type import FieldType
from .array_vector import ArrayVector
from .field import Field
from .data_frame import DataFrame

__all__ = [
    "FieldType",
    "ArrayVector",
    "Field",
    "DataFrame",
]

"""Reusable type definitions for key addresses."""

from .base import StrictBaseModel
from .byte_arrays import BaseBytes, Bytes4, Bytes32, Bytes48

__all__ = [
    "StrictBaseModel",
    "BaseBytes",
    "Bytes4",
    "Bytes32",
    "Bytes48",
]

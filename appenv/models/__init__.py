"""Pydantic models used across appenv."""

from .base import EnvModel
from .options import ApiVersionOptions, ArrayOptions
from .results import LoadResult

__all__ = [
    "ApiVersionOptions",
    "ArrayOptions",
    "EnvModel",
    "LoadResult",
]

"""Exceptions raised when generation parameters or the catalog are invalid."""
from __future__ import annotations


class GeneratorError(ValueError):
    """Base class for input validation failures in the generators."""


class InvalidRangeError(GeneratorError):
    """A date range, count or amount range cannot produce a valid dataset."""


class EmptyCatalogError(GeneratorError):
    """A category has no merchants, or the catalog is missing categories."""


__all__ = ["GeneratorError", "InvalidRangeError", "EmptyCatalogError"]

"""Catalog loading and validation utilities."""

from .loader import CatalogDocument, CatalogLoader, DataValidationError, OptionGroupModel, VariantModel

__all__ = [
    "CatalogDocument",
    "CatalogLoader",
    "DataValidationError",
    "OptionGroupModel",
    "VariantModel",
]

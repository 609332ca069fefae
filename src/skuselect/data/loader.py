"""Catalog loaders for YAML/JSON documents and CSV variant tables."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import pandas as pd
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from skuselect.config import SelectorConfig, load_document
from skuselect.engine import CatalogIndex, build_catalog

logger = logging.getLogger(__name__)

OptionItem = str | int | float | dict[str, Any]


class DataValidationError(ValueError):
    """Raised when catalog data fails validation."""


class OptionGroupModel(BaseModel):
    """One option group of a catalog document."""

    model_config = ConfigDict(extra="forbid")

    name: str | None = None
    values: list[OptionItem] = Field(default_factory=list)


class VariantModel(BaseModel):
    """One variant record; its id lives under the configured id key.

    ``values`` is either a list of option values or a mapping of group name
    to value, which pins each value to its group.
    """

    model_config = ConfigDict(extra="allow")

    values: list[OptionItem] | dict[str, OptionItem] = Field(default_factory=list)


class CatalogDocument(BaseModel):
    """Option groups and variants as stored in a catalog file."""

    model_config = ConfigDict(extra="forbid")

    groups: list[OptionGroupModel]
    variants: list[VariantModel] = Field(default_factory=list)

    def group_records(self) -> list[dict[str, Any]]:
        return [group.model_dump() for group in self.groups]

    def variant_records(self) -> list[dict[str, Any]]:
        return [variant.model_dump() for variant in self.variants]


class CatalogLoader:
    """Load catalog files and build the catalog index from them."""

    def __init__(self, config: SelectorConfig | None = None) -> None:
        self.config = config or SelectorConfig()

    def load_document(self, path: str | Path) -> CatalogDocument:
        """Load and validate a YAML/JSON catalog document."""
        data = load_document(path, error_cls=DataValidationError)
        try:
            document = CatalogDocument.model_validate(data)
        except ValidationError as exc:
            raise DataValidationError(f"Invalid catalog document {path}: {exc}") from exc
        self._validate_variant_ids(document.variant_records())
        return document

    def load_variant_table(self, path: str | Path, encoding: str = "utf-8") -> CatalogDocument:
        """Load a CSV table with an id column and one column per option group.

        Group values are collected in order of first appearance. A blank cell
        means the variant does not constrain that group.
        """
        csv_path = Path(path)
        if not csv_path.exists():
            raise FileNotFoundError(f"CSV file not found: {csv_path}")

        dataframe = pd.read_csv(csv_path, encoding=encoding, dtype=str, keep_default_na=False)
        dataframe = dataframe.rename(columns=lambda column: str(column).strip())
        return self.document_from_frame(dataframe)

    def document_from_frame(self, dataframe: pd.DataFrame) -> CatalogDocument:
        id_key = self.config.id_key
        if id_key not in dataframe.columns:
            raise DataValidationError(f"Missing required column: '{id_key}'")

        group_columns = [column for column in dataframe.columns if column != id_key]
        if not group_columns:
            raise DataValidationError("Variant table must contain at least one option group column.")

        cells = dataframe.apply(lambda column: column.str.strip())
        blank_ids = cells[id_key] == ""
        if blank_ids.any():
            rows = (cells.index[blank_ids] + 1).tolist()
            raise DataValidationError(f"Blank variant ids at rows: {rows}")

        groups = [
            OptionGroupModel(name=column, values=[value for value in cells[column].unique().tolist() if value != ""])
            for column in group_columns
        ]
        variants = [
            VariantModel.model_validate(
                {id_key: row[id_key], "values": {column: row[column] for column in group_columns if row[column] != ""}}
            )
            for row in cells.to_dict(orient="records")
        ]
        document = CatalogDocument(groups=groups, variants=variants)
        self._validate_variant_ids(document.variant_records())
        return document

    def load_catalog(self, path: str | Path) -> CatalogIndex:
        """Load a catalog file by suffix and build its index."""
        suffix = Path(path).suffix.lower()
        if suffix == ".csv":
            document = self.load_variant_table(path)
        else:
            document = self.load_document(path)

        catalog = build_catalog(document.group_records(), document.variant_records(), config=self.config)
        logger.info(
            "Loaded catalog %s: %d option groups, %d variants.",
            path,
            catalog.group_count,
            len(catalog.variants),
        )
        return catalog

    def _validate_variant_ids(self, variants: list[dict[str, Any]]) -> None:
        id_key = self.config.id_key
        missing = [index for index, variant in enumerate(variants) if variant.get(id_key) is None]
        if missing:
            raise DataValidationError(f"Variants without '{id_key}' at positions: {missing}")

        seen: set[Any] = set()
        duplicates: list[Any] = []
        for variant in variants:
            variant_id = variant[id_key]
            if variant_id in seen:
                duplicates.append(variant_id)
            seen.add(variant_id)
        if duplicates:
            raise DataValidationError(f"Duplicate variant ids: {duplicates}")

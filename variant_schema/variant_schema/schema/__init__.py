"""Bundled meta-schema describing the schema document format.

This package holds data only; loading and checking live in
``models.document_loader``.
"""

from pathlib import Path

META_SCHEMA_FILE = "variant_schema.meta.json"


def get_meta_schema_path() -> Path:
    return Path(__file__).parent / META_SCHEMA_FILE

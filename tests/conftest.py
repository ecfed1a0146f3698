"""Pytest configuration and fixtures for variant_schema tests"""
import json
import logging
from pathlib import Path

import pytest

from variant_schema.models.document_loader import clear_cache


@pytest.fixture(autouse=True)
def fresh_document_cache():
    """Start every test with an empty document cache"""
    clear_cache()
    yield
    clear_cache()


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers the CLI attaches so they never outlive a captured stream"""
    yield
    logger = logging.getLogger("variant_schema")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def person_schema_document():
    """A schema using definitions, pointers, composition and combined keywords"""
    return {
        "$schema": "http://json-schema.org/draft-07/schema#",
        "title": "Person",
        "definitions": {
            "name": {"type": "string"},
            "age": {"allOf": [{"type": "integer"}, {"not": {"enum": [{"type": "null"}]}}]},
            "tags": {"items": {"type": "string"}, "uniqueItems": True},
        },
        "type": "object",
        "properties": {
            "name": "#/definitions/name",
            "age": {"$ref": "#/definitions/age"},
            "tags": "#/definitions/tags",
        },
        "required": ["name"],
        "additionalProperties": False,
    }


@pytest.fixture
def write_document(tmp_path):
    """Write a JSON/YAML document under tmp_path and return its path"""
    def _write(relative: str, content) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        if not isinstance(content, str):
            content = json.dumps(content, indent=2)
        path.write_text(content, encoding="utf-8")
        return path
    return _write

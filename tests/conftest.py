"""Shared fixtures for springgen tests."""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any

import pytest

from springgen.codegen import GeneratorConfig, Project, load_project
from springgen.codegen.languages.spring import SpringGenerator

PETSTORE_DOCUMENT: dict[str, Any] = {
    "name": "petstore",
    "version": "1.2.0",
    "targetPackage": "com.example.api",
    "modules": {
        "Pet": {
            "entities": {
                "Status": {
                    "type": "enum",
                    "fields": [{"name": "available"}, {"name": "sold"}],
                },
                "Tag": {
                    "type": "data",
                    "fields": [{"name": "label", "type": "string"}],
                },
                "PetInfo": {
                    "type": "response",
                    "description": "A pet in the store",
                    "fields": [
                        {"name": "id", "type": "long"},
                        {"name": "name", "type": "string"},
                        {"name": "status", "type": "Status"},
                        {"name": "tags", "type": "Tag[]"},
                    ],
                },
                "BaseReq": {
                    "type": "request",
                    "abstract": True,
                    "path": "/pet/base",
                    "response": "PetInfo",
                },
                "GetPet": {
                    "type": "request",
                    "method": "GET",
                    "path": "/pet/get",
                    "response": "PetInfo",
                    "fields": [{"name": "id", "type": "long"}],
                },
                "AddPet": {
                    "type": "request",
                    "path": "/pet/add",
                    "response": "PetInfo",
                    "fields": [{"name": "name", "type": "string"}],
                },
                "PatchPet": {
                    "type": "request",
                    "method": "PATCH",
                    "path": "/pet/patch",
                    "response": "PetInfo",
                },
            }
        },
        "Store": {
            "entities": {
                "Order": {
                    "type": "data",
                    "fields": [{"name": "count", "type": "int"}],
                },
            }
        },
    },
}


@pytest.fixture
def petstore_document() -> dict[str, Any]:
    """A fresh copy of the sample project document."""
    return copy.deepcopy(PETSTORE_DOCUMENT)


@pytest.fixture
def petstore(petstore_document: dict[str, Any]) -> Project:
    """The sample document loaded into a project model."""
    return load_project(petstore_document)


@pytest.fixture
def petstore_file(tmp_path: Path, petstore_document: dict[str, Any]) -> Path:
    """The sample document written to a JSON file."""
    path = tmp_path / "petstore.json"
    path.write_text(json.dumps(petstore_document), encoding="utf-8")
    return path


@pytest.fixture
def make_spring():
    """Factory for Spring generators with custom options."""

    def _make(**custom: Any) -> SpringGenerator:
        custom.setdefault("name", "petstore")
        return SpringGenerator(GeneratorConfig(custom=custom))

    return _make

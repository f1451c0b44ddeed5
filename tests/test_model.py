"""Tests for loading project documents into the model."""

from __future__ import annotations

from typing import Any

import pytest

from springgen.codegen.core.model import (
    ElementPath,
    EntityType,
    ProjectError,
    ReqMethod,
    load_project,
)


class TestElementPath:
    """Tests for ElementPath parsing."""

    def test_parse_qualified(self) -> None:
        assert ElementPath.parse("Pet.PetInfo", "Store") == ElementPath("Pet", "PetInfo")

    def test_parse_bare_uses_default_module(self) -> None:
        assert ElementPath.parse("PetInfo", "Pet") == ElementPath("Pet", "PetInfo")

    def test_parse_empty_rejected(self) -> None:
        with pytest.raises(ProjectError):
            ElementPath.parse("  ", "Pet")

    def test_str(self) -> None:
        assert str(ElementPath("Pet", "Tag")) == "Pet.Tag"


class TestLoadProject:
    """Tests for load_project."""

    def test_project_attributes(self, petstore) -> None:
        assert petstore.name == "petstore"
        assert petstore.version == "1.2.0"
        assert petstore.target_package == "com.example.api"
        assert list(petstore.modules) == ["Pet", "Store"]

    def test_entities_keep_document_order(self, petstore) -> None:
        names = list(petstore.modules["Pet"].entities)
        assert names == [
            "Status",
            "Tag",
            "PetInfo",
            "BaseReq",
            "GetPet",
            "AddPet",
            "PatchPet",
        ]

    def test_entity_kinds_and_methods(self, petstore) -> None:
        pet = petstore.modules["Pet"]
        assert pet.entities["Status"].type == EntityType.ENUM
        assert pet.entities["BaseReq"].is_abstract
        assert pet.entities["GetPet"].method == ReqMethod.GET
        assert pet.entities["AddPet"].method is None
        assert pet.entities["PatchPet"].method == ReqMethod.PATCH
        assert pet.entities["GetPet"].response == ElementPath("Pet", "PetInfo")

    def test_field_references_and_lists(self, petstore) -> None:
        fields = {f.name: f for f in petstore.modules["Pet"].entities["PetInfo"].fields}
        assert fields["id"].is_primitive
        assert fields["status"].ref == ElementPath("Pet", "Status")
        assert fields["tags"].is_list
        assert fields["tags"].type == "Tag"

    def test_resolve(self, petstore) -> None:
        entity = petstore.resolve(ElementPath("Pet", "Tag"))
        assert entity is not None and entity.name == "Tag"
        assert petstore.resolve(ElementPath("Nope", "Tag")) is None

    def test_method_is_case_insensitive(self, petstore_document: dict[str, Any]) -> None:
        petstore_document["modules"]["Pet"]["entities"]["GetPet"]["method"] = "get"
        project = load_project(petstore_document)
        assert project.modules["Pet"].entities["GetPet"].method == ReqMethod.GET

    def test_snake_case_target_package(self) -> None:
        project = load_project({"name": "x", "target_package": "a.b"})
        assert project.target_package == "a.b"
        assert project.modules == {}

    @pytest.mark.parametrize(
        "document",
        [
            [],
            {},
            {"name": "x", "modules": []},
            {"name": "x", "modules": {"M": 3}},
            {"name": "x", "modules": {"M": {"entities": []}}},
        ],
    )
    def test_malformed_documents(self, document: Any) -> None:
        with pytest.raises(ProjectError):
            load_project(document)

    def test_unknown_method(self, petstore_document: dict[str, Any]) -> None:
        petstore_document["modules"]["Pet"]["entities"]["GetPet"]["method"] = "FETCH"
        with pytest.raises(ProjectError, match="FETCH"):
            load_project(petstore_document)

    def test_unknown_entity_type(self, petstore_document: dict[str, Any]) -> None:
        petstore_document["modules"]["Pet"]["entities"]["Tag"]["type"] = "table"
        with pytest.raises(ProjectError, match="table"):
            load_project(petstore_document)

    def test_unresolved_response(self, petstore_document: dict[str, Any]) -> None:
        petstore_document["modules"]["Pet"]["entities"]["GetPet"]["response"] = "Missing"
        with pytest.raises(ProjectError, match="Pet.Missing"):
            load_project(petstore_document)

    def test_unresolved_field_type(self, petstore_document: dict[str, Any]) -> None:
        fields = petstore_document["modules"]["Pet"]["entities"]["Tag"]["fields"]
        fields.append({"name": "owner", "type": "Store.Owner"})
        with pytest.raises(ProjectError, match="Store.Owner"):
            load_project(petstore_document)

    def test_field_without_name(self, petstore_document: dict[str, Any]) -> None:
        petstore_document["modules"]["Pet"]["entities"]["Tag"]["fields"] = [{"type": "int"}]
        with pytest.raises(ProjectError):
            load_project(petstore_document)

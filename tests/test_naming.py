"""Tests for naming helpers."""

from __future__ import annotations

import pytest

from springgen.codegen.core.naming import (
    NameSanitizer,
    NamingCase,
    capitalize_first,
    to_camel_case,
    to_kebab_case,
    to_pascal_case,
    to_snake_case,
)
from springgen.codegen.languages.java.naming import (
    accessor_name,
    enum_constant_name,
    is_valid_package_name,
    package_to_path_parts,
    property_name,
)


class TestCaseConversion:
    """Tests for the case conversion functions."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [("userName", "user_name"), ("User-Name", "user_name"), ("user  name", "user_name")],
    )
    def test_snake(self, name: str, expected: str) -> None:
        assert to_snake_case(name) == expected

    def test_camel(self) -> None:
        assert to_camel_case("user_id") == "userId"

    def test_pascal(self) -> None:
        assert to_pascal_case("pet_store") == "PetStore"

    def test_kebab(self) -> None:
        assert to_kebab_case("PetStore") == "pet-store"

    def test_capitalize_first_keeps_rest(self) -> None:
        assert capitalize_first("userId") == "UserId"
        assert capitalize_first("") == ""


class TestNameSanitizer:
    """Tests for NameSanitizer."""

    def test_reserved_word_suffixed(self) -> None:
        sanitizer = NameSanitizer({"for"})
        assert sanitizer.sanitize_name("for") == "for_"

    def test_invalid_characters_replaced(self) -> None:
        sanitizer = NameSanitizer()
        assert sanitizer.sanitize_name("user name!", NamingCase.SNAKE_CASE) == "user_name"
        assert sanitizer.sanitize_name("user.id") == "userId"

    def test_deterministic(self) -> None:
        sanitizer = NameSanitizer({"class"})
        assert sanitizer.sanitize_name("class") == sanitizer.sanitize_name("class")

    def test_empty_name(self) -> None:
        assert NameSanitizer().sanitize_name("!!!") == "field"


class TestJavaNaming:
    """Tests for the Java naming rules."""

    def test_property_name(self) -> None:
        assert property_name("user_id") == "userId"
        assert property_name("default") == "default_"

    def test_accessor_name(self) -> None:
        assert accessor_name("get", "user_id") == "getUserId"
        assert accessor_name("set", "default") == "setDefault"

    def test_accessor_avoids_object_methods(self) -> None:
        assert accessor_name("get", "class") == "getClass_"

    def test_enum_constant(self) -> None:
        assert enum_constant_name("inStock") == "IN_STOCK"

    @pytest.mark.parametrize(
        ("package", "valid"),
        [
            ("com.example", True),
            ("com", True),
            ("", False),
            ("com..example", False),
            ("com.1x", False),
            ("com.class", False),
        ],
    )
    def test_package_validation(self, package: str, valid: bool) -> None:
        assert is_valid_package_name(package) is valid

    def test_package_to_path_parts(self) -> None:
        assert package_to_path_parts("com.example.api") == ["com", "example", "api"]
        assert package_to_path_parts("") == []

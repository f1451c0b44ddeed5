"""Tests for configuration loading and Spring settings."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from springgen.codegen.core.config import (
    EXAMPLE_SPRING_CONFIG,
    ConfigError,
    ConfigManager,
    GeneratorConfig,
    load_config,
)
from springgen.codegen.languages.spring import SpringConfig


class TestConfigManager:
    """Tests for ConfigManager.get_config."""

    def test_spring_defaults(self) -> None:
        config = ConfigManager().get_config("spring")
        assert config.indent_size == 2
        assert config.custom["use_interface"] is False
        assert config.custom["incremental"] is False

    def test_overrides_merge_custom(self) -> None:
        config = ConfigManager().get_config(
            "spring", custom_config={"indent_size": 4, "custom": {"use_demo": True}}
        )
        assert config.indent_size == 4
        assert config.custom["use_demo"] is True
        # Untouched defaults survive the merge
        assert config.custom["use_interface"] is False

    def test_unknown_keys_become_custom(self) -> None:
        config = ConfigManager().get_config("spring", custom_config={"name": "shop"})
        assert config.custom["name"] == "shop"

    def test_defaults_not_mutated(self) -> None:
        manager = ConfigManager()
        manager.get_config("spring", custom_config={"custom": {"use_demo": True}})
        assert manager.get_config("spring").custom["use_demo"] is False

    def test_config_file(self, tmp_path: Path) -> None:
        path = tmp_path / "spring.json"
        path.write_text(json.dumps(EXAMPLE_SPRING_CONFIG))

        config = load_config("spring", config_file=path)
        assert config.indent_size == 4
        assert config.custom["package"] == "com.example.petstore.server"
        assert config.custom["use_demo"] is True

    def test_cli_overrides_file(self, tmp_path: Path) -> None:
        path = tmp_path / "spring.json"
        path.write_text(json.dumps({"indent_size": 4}))
        config = load_config("spring", {"indent_size": 8}, path)
        assert config.indent_size == 8

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="not found"):
            load_config("spring", config_file=tmp_path / "nope.json")

    def test_non_json_file(self, tmp_path: Path) -> None:
        path = tmp_path / "spring.yaml"
        path.write_text("name: x")
        with pytest.raises(ConfigError, match="must be JSON"):
            load_config("spring", config_file=path)

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "spring.json"
        path.write_text("{not json")
        with pytest.raises(ConfigError, match="Invalid JSON"):
            load_config("spring", config_file=path)

    def test_json_must_be_object(self, tmp_path: Path) -> None:
        path = tmp_path / "spring.json"
        path.write_text("[1, 2]")
        with pytest.raises(ConfigError):
            load_config("spring", config_file=path)

    def test_list_languages(self) -> None:
        assert set(ConfigManager().list_languages()) == {"spring", "java"}

    def test_validate_config(self) -> None:
        warnings = ConfigManager().validate_config(
            GeneratorConfig(indent_size=-1, line_ending="\r")
        )
        assert warnings == ["Invalid indent_size: -1", "Invalid line_ending: '\\r'"]

    def test_validate_config_accepts_defaults(self) -> None:
        assert ConfigManager().validate_config(load_config("spring")) == []

    def test_removed_style_keys_are_custom_values(self) -> None:
        """Keys that are not GeneratorConfig fields end up in custom."""
        config = load_config("spring", custom_config={"class_case": "snake"})
        assert config.custom["class_case"] == "snake"
        assert not hasattr(config, "class_case")


class TestGeneratorConfig:
    """Tests for GeneratorConfig."""

    def test_indent_unit_spaces(self) -> None:
        assert GeneratorConfig(indent_size=4).indent_unit == "    "

    def test_indent_unit_tabs(self) -> None:
        assert GeneratorConfig(use_tabs=True).indent_unit == "\t"


class TestSpringConfig:
    """Tests for SpringConfig validation."""

    def test_name_required(self) -> None:
        with pytest.raises(ConfigError, match="--name"):
            SpringConfig(name="")

    def test_blank_name_rejected(self) -> None:
        with pytest.raises(ConfigError):
            SpringConfig(name="   ")

    def test_invalid_package(self) -> None:
        with pytest.raises(ConfigError, match="package"):
            SpringConfig(name="shop", package="com.123")

    def test_from_generator_config(self) -> None:
        config = GeneratorConfig(
            package_name="org.shop",
            custom={"name": "shop", "use_interface": True, "include_api": 1},
        )
        spring = SpringConfig.from_generator_config(config)
        assert spring.name == "shop"
        assert spring.package == "org.shop"
        assert spring.use_interface is True
        assert spring.include_api is True
        assert spring.use_demo is False

    def test_custom_package_wins(self) -> None:
        config = GeneratorConfig(
            package_name="org.shop", custom={"name": "shop", "package": "org.other"}
        )
        assert SpringConfig.from_generator_config(config).package == "org.other"

    def test_empty_package_means_project_default(self) -> None:
        spring = SpringConfig.from_generator_config(GeneratorConfig(custom={"name": "s"}))
        assert spring.package is None

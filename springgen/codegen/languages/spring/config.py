"""
Spring-specific configuration and validation.

Reads the Spring settings out of the ``custom`` section of a
:class:`GeneratorConfig`.
"""

from dataclasses import dataclass
from typing import Optional

from ...core.config import ConfigError, GeneratorConfig
from ...core.model import ReqMethod
from ..java.naming import is_valid_package_name


@dataclass
class SpringConfig:
    """Spring Boot generation settings."""

    name: str
    package: Optional[str] = None
    use_interface: bool = False
    use_demo: bool = False
    incremental: bool = False
    include_api: bool = False

    def __post_init__(self):
        if not self.name or not str(self.name).strip():
            raise ConfigError("A project name is required (use --name <name>)")
        if self.package is not None and not is_valid_package_name(self.package):
            raise ConfigError(f"Invalid Java package name: {self.package}")

    @classmethod
    def from_generator_config(cls, config: GeneratorConfig) -> "SpringConfig":
        custom = config.custom
        return cls(
            name=custom.get("name", ""),
            package=custom.get("package") or config.package_name or None,
            use_interface=bool(custom.get("use_interface", False)),
            use_demo=bool(custom.get("use_demo", False)),
            incremental=bool(custom.get("incremental", False)),
            include_api=bool(custom.get("include_api", False)),
        )


# Spring mapping annotation prefix per HTTP method
MAPPING_ANNOTATIONS = {
    ReqMethod.GET: "Get",
    ReqMethod.POST: "Post",
    ReqMethod.PUT: "Put",
    ReqMethod.DELETE: "Delete",
}

"""
Java model generator module.

Generates plain Java classes and enums for project entities.
"""

from .generator import JavaModelGenerator
from .naming import (
    create_java_sanitizer,
    is_valid_package_name,
    package_to_path_parts,
)
from .types import java_type, java_element_type

__all__ = [
    "JavaModelGenerator",
    "create_java_sanitizer",
    "is_valid_package_name",
    "package_to_path_parts",
    "java_type",
    "java_element_type",
]

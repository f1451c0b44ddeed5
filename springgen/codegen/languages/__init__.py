"""
Target-specific code generators.

This module contains the generators for each supported target.
"""

from .java import JavaModelGenerator
from .spring import SpringGenerator, create_spring_generator

__all__ = [
    "JavaModelGenerator",
    "SpringGenerator",
    "create_spring_generator",
]

"""
Spring Boot code generator module.

Generates REST resources and an application class from project request
entities, plus the Maven project skeleton.
"""

from .generator import SpringGenerator, create_spring_generator
from .config import SpringConfig, MAPPING_ANNOTATIONS
from .demo import DemoGenerator
from .materializer import TemplateMaterializer

__all__ = [
    "SpringGenerator",
    "create_spring_generator",
    "SpringConfig",
    "MAPPING_ANNOTATIONS",
    "DemoGenerator",
    "TemplateMaterializer",
]

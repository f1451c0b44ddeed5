"""
springgen

Generates Spring Boot projects from API project descriptions.
"""

from .codegen import __version__

__all__ = ["__version__"]

"""Template lookup and error types for Strata."""

from strata.environment.exceptions import (
    ErrorCode,
    TemplateError,
    TemplateNotFoundError,
    TemplateSyntaxError,
)
from strata.environment.loaders import DictLoader, FileSystemLoader, Loader

__all__ = [
    "DictLoader",
    "ErrorCode",
    "FileSystemLoader",
    "Loader",
    "TemplateError",
    "TemplateNotFoundError",
    "TemplateSyntaxError",
]

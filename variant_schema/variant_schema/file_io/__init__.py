"""File I/O related utilities.

This package groups small modules that deal with file-backed diagnostics and
rendering reports to files.
"""

from .source_location import SourceLocation, lookup_source
from .template_renderer import TemplateRenderer

__all__ = [
    "SourceLocation",
    "lookup_source",
    "TemplateRenderer",
]

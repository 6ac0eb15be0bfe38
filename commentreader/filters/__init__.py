"""Filter interfaces and the per-stage filter configuration."""

from commentreader.filters.base import (
    DocumentConfigFilter,
    DocumentFilter,
    GenerationFilter,
    OperationConfigFilter,
    OperationFilter,
    PostProcessingDocumentFilter,
    PreProcessingOperationFilter,
)
from commentreader.filters.config import FilterConfig

__all__ = [
    "DocumentConfigFilter",
    "DocumentFilter",
    "FilterConfig",
    "GenerationFilter",
    "OperationConfigFilter",
    "OperationFilter",
    "PostProcessingDocumentFilter",
    "PreProcessingOperationFilter",
]

"""commentreader — inputs for generating OpenAPI documents from C# documentation comments."""

__version__ = "1.0.0"

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
from commentreader.generation.config import ArgumentMissingError, GeneratorConfig
from commentreader.generation.loader import load_generator_config, load_xml_document
from commentreader.settings import SettingsManager

__all__ = [
    "__version__",
    # Generation inputs
    "ArgumentMissingError",
    "GeneratorConfig",
    "load_generator_config",
    "load_xml_document",
    # Filters
    "DocumentConfigFilter",
    "DocumentFilter",
    "FilterConfig",
    "GenerationFilter",
    "OperationConfigFilter",
    "OperationFilter",
    "PostProcessingDocumentFilter",
    "PreProcessingOperationFilter",
    # Settings
    "SettingsManager",
]

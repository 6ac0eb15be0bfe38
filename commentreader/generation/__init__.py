"""Generator inputs — the configuration bundle and its file loader."""

from commentreader.generation.config import ArgumentMissingError, GeneratorConfig
from commentreader.generation.loader import load_generator_config, load_xml_document

__all__ = [
    "ArgumentMissingError",
    "GeneratorConfig",
    "load_generator_config",
    "load_xml_document",
]

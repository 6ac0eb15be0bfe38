"""GeneratorConfig — the input bundle handed to the OpenAPI generator.

Usage::

    from xml.etree import ElementTree as ET
    from commentreader.generation import GeneratorConfig

    docs = [ET.parse("Api.xml")]
    config = GeneratorConfig(docs, ["bin/Api.dll"], "1.0.0")
    config.advanced_config_source = ET.parse("advanced.xml")
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any
from xml.etree.ElementTree import ElementTree

from commentreader.filters.config import FilterConfig

logger = logging.getLogger(__name__)

_DEFAULT: Any = object()


class ArgumentMissingError(ValueError):
    """Raised when a required generator input is absent or blank."""

    def __init__(self, param_name: str) -> None:
        super().__init__(f"Missing required argument: {param_name}")
        self.param_name = param_name


class GeneratorConfig:
    """Configuration used to generate an OpenAPI document from C# comments.

    Parameters
    ----------
    annotation_sources:
        Parsed annotation XML documents.  May be empty, must not be None.
    assembly_paths:
        Relative or absolute paths to the assemblies reflected into for
        the types named in the XML.  May be empty, must not be None.
    document_version:
        Version of the OpenAPI document.  Must contain a non-whitespace
        character.
    filter_config:
        Filters applied while generating the document.  When omitted a
        default :class:`FilterConfig` is created; passing ``None``
        explicitly is an error.

    The input sequences are kept by reference, not copied.
    """

    def __init__(
        self,
        annotation_sources: Sequence[ElementTree],
        assembly_paths: Sequence[str],
        document_version: str,
        filter_config: FilterConfig = _DEFAULT,
    ) -> None:
        if filter_config is _DEFAULT:
            filter_config = FilterConfig()

        if annotation_sources is None:
            raise ArgumentMissingError("annotation_sources")
        if assembly_paths is None:
            raise ArgumentMissingError("assembly_paths")
        if filter_config is None:
            raise ArgumentMissingError("filter_config")
        if document_version is not None and not isinstance(document_version, str):
            raise TypeError(
                f"document_version must be a str, got {type(document_version).__name__}"
            )
        if document_version is None or not document_version.strip():
            raise ArgumentMissingError("document_version")

        self._annotation_sources = annotation_sources
        self._assembly_paths = assembly_paths
        self._document_version = document_version
        self._filter_config = filter_config

        # Parsed XML holding advanced generation directives; freely settable
        self.advanced_config_source: ElementTree | None = None

        logger.debug(
            "GeneratorConfig created: %d annotation source(s), %d assembly path(s), version %s",
            len(annotation_sources),
            len(assembly_paths),
            document_version,
        )

    @property
    def annotation_sources(self) -> Sequence[ElementTree]:
        """The parsed annotation XML documents."""
        return self._annotation_sources

    @property
    def assembly_paths(self) -> Sequence[str]:
        """Paths to the assemblies reflected into during generation."""
        return self._assembly_paths

    @property
    def document_version(self) -> str:
        """Version of the OpenAPI document."""
        return self._document_version

    @property
    def filter_config(self) -> FilterConfig:
        """Filters applied while generating the document."""
        return self._filter_config

    def __repr__(self) -> str:
        return (
            f"GeneratorConfig(annotation_sources={len(self._annotation_sources)}, "
            f"assembly_paths={len(self._assembly_paths)}, "
            f"document_version={self._document_version!r}, "
            f"advanced_config={self.advanced_config_source is not None})"
        )

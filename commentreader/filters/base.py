"""Abstract filter interfaces, one per generation stage.

The generation pipeline that runs these filters lives outside this
package.  Implementations subclass the stage they hook into and are
registered on a :class:`~commentreader.filters.config.FilterConfig`.
"""

from __future__ import annotations

import abc
from collections.abc import Sequence
from typing import Any, ClassVar
from xml.etree.ElementTree import Element, ElementTree


class GenerationFilter(abc.ABC):
    """Base class for all generation filters."""

    stage: ClassVar[str] = ""

    @property
    def name(self) -> str:
        """Short filter identifier."""
        return type(self).__name__

    def __repr__(self) -> str:
        return f"<{self.name} stage={self.stage}>"


class PreProcessingOperationFilter(GenerationFilter):
    """Runs on each operation element before operations are generated."""

    stage = "pre_processing_operation"

    @abc.abstractmethod
    def apply(self, paths: dict[str, Any], element: Element) -> None:
        """Inspect or rewrite *element* ahead of operation generation.

        Parameters
        ----------
        paths:
            The document's path map built so far.
        element:
            The ``<member>`` element describing one operation.
        """


class OperationFilter(GenerationFilter):
    """Populates one generated operation from its annotation element."""

    stage = "operation"

    @abc.abstractmethod
    def apply(self, operation: dict[str, Any], element: Element) -> None:
        """Mutate *operation* in place."""


class OperationConfigFilter(GenerationFilter):
    """Applies advanced configuration to one operation."""

    stage = "operation_config"

    @abc.abstractmethod
    def apply(self, operation: dict[str, Any], advanced_config: Element) -> None:
        """Mutate *operation* in place."""


class DocumentFilter(GenerationFilter):
    """Populates document-level fields once all operations exist."""

    stage = "document"

    @abc.abstractmethod
    def apply(
        self,
        document: dict[str, Any],
        annotation_sources: Sequence[ElementTree],
    ) -> None:
        """Mutate *document* in place."""


class DocumentConfigFilter(GenerationFilter):
    """Applies advanced configuration to the whole document."""

    stage = "document_config"

    @abc.abstractmethod
    def apply(self, document: dict[str, Any], advanced_config: Element) -> None:
        """Mutate *document* in place."""


class PostProcessingDocumentFilter(GenerationFilter):
    """Final pass over the finished document."""

    stage = "post_processing_document"

    @abc.abstractmethod
    def apply(self, document: dict[str, Any]) -> None:
        """Mutate *document* in place."""

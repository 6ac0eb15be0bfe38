"""FilterConfig — which filters the generation pipeline applies, per stage."""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict, Field

from commentreader.filters.base import (
    DocumentConfigFilter,
    DocumentFilter,
    GenerationFilter,
    OperationConfigFilter,
    OperationFilter,
    PostProcessingDocumentFilter,
    PreProcessingOperationFilter,
)

logger = logging.getLogger(__name__)

# Stage name -> field name, in the order the pipeline runs them
_STAGE_FIELDS: dict[str, str] = {
    PreProcessingOperationFilter.stage: "pre_processing_operation_filters",
    OperationFilter.stage: "operation_filters",
    OperationConfigFilter.stage: "operation_config_filters",
    DocumentFilter.stage: "document_filters",
    DocumentConfigFilter.stage: "document_config_filters",
    PostProcessingDocumentFilter.stage: "post_processing_document_filters",
}


class FilterConfig(BaseModel):
    """Configuration encapsulating all filters applied during generation.

    Every list is empty by default, so two default instances compare equal.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    pre_processing_operation_filters: list[PreProcessingOperationFilter] = Field(
        default_factory=list,
    )
    operation_filters: list[OperationFilter] = Field(default_factory=list)
    operation_config_filters: list[OperationConfigFilter] = Field(default_factory=list)
    document_filters: list[DocumentFilter] = Field(default_factory=list)
    document_config_filters: list[DocumentConfigFilter] = Field(default_factory=list)
    post_processing_document_filters: list[PostProcessingDocumentFilter] = Field(
        default_factory=list,
    )

    def add(self, generation_filter: GenerationFilter) -> FilterConfig:
        """Append *generation_filter* to the list for its stage.

        Returns ``self`` so registrations can be chained.
        """
        if not isinstance(generation_filter, GenerationFilter):
            raise TypeError(
                f"Expected a GenerationFilter, got {type(generation_filter).__name__}"
            )
        field_name = _STAGE_FIELDS.get(generation_filter.stage)
        if field_name is None:
            raise TypeError(
                f"{generation_filter.name} does not declare a known filter stage"
            )
        getattr(self, field_name).append(generation_filter)
        logger.debug(
            "Registered %s as %s filter", generation_filter.name, generation_filter.stage
        )
        return self

    def all_filters(self) -> list[GenerationFilter]:
        """Every registered filter, in pipeline order."""
        result: list[GenerationFilter] = []
        for field_name in _STAGE_FIELDS.values():
            result.extend(getattr(self, field_name))
        return result

    @property
    def is_empty(self) -> bool:
        return not self.all_filters()

    def summary(self) -> str:
        return ", ".join(
            f"{stage}: {len(getattr(self, field_name))}"
            for stage, field_name in _STAGE_FIELDS.items()
        )

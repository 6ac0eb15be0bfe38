"""Load annotation and advanced-configuration XML from disk."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from xml.etree import ElementTree as ET

from commentreader.filters.config import FilterConfig
from commentreader.generation.config import ArgumentMissingError, GeneratorConfig

logger = logging.getLogger(__name__)


def load_xml_document(path: str | Path) -> ET.ElementTree:
    """Parse a single XML file.

    Raises FileNotFoundError for a missing file; ``ET.ParseError`` is
    propagated for malformed content.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"XML document not found: {path}")
    tree = ET.parse(path)
    logger.debug("Loaded XML document %s (root <%s>)", path, tree.getroot().tag)
    return tree


def load_generator_config(
    annotation_paths: Sequence[str | Path],
    assembly_paths: Sequence[str | Path],
    document_version: str,
    filter_config: FilterConfig | None = None,
    advanced_config_path: str | Path | None = None,
) -> GeneratorConfig:
    """Build a GeneratorConfig from files on disk.

    Parameters
    ----------
    annotation_paths:
        Annotation XML files, parsed in order.
    assembly_paths:
        Assembly locations.  Missing files are logged, not rejected; they
        are only opened later by the generator.
    document_version:
        Version of the OpenAPI document.
    filter_config:
        Filters to apply.  A default FilterConfig is used when None.
    advanced_config_path:
        Optional advanced-configuration XML file.
    """
    if annotation_paths is None:
        raise ArgumentMissingError("annotation_paths")
    if assembly_paths is None:
        raise ArgumentMissingError("assembly_paths")
    for param_name, value in (
        ("annotation_paths", annotation_paths),
        ("assembly_paths", assembly_paths),
    ):
        if isinstance(value, (str, Path)):
            raise TypeError(
                f"{param_name} must be a sequence of paths, got a single "
                f"{type(value).__name__}"
            )

    documents = [load_xml_document(p) for p in annotation_paths]

    assemblies: list[str] = []
    for assembly in assembly_paths:
        if not Path(assembly).is_file():
            logger.warning("Assembly not found: %s", assembly)
        assemblies.append(str(assembly))

    if filter_config is None:
        config = GeneratorConfig(documents, assemblies, document_version)
    else:
        config = GeneratorConfig(documents, assemblies, document_version, filter_config)

    if advanced_config_path is not None:
        config.advanced_config_source = load_xml_document(advanced_config_path)

    logger.info(
        "Loaded generator config: %d annotation file(s), %d assembly path(s)",
        len(documents),
        len(assemblies),
    )
    return config

"""Tests for loading generator inputs from disk."""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path
from xml.etree import ElementTree as ET

import pytest

from commentreader.filters.config import FilterConfig
from commentreader.generation.config import ArgumentMissingError
from commentreader.generation.loader import load_generator_config, load_xml_document

_ANNOTATION_XML = """<?xml version="1.0"?>
<doc>
  <assembly><name>Api</name></assembly>
  <members>
    <member name="M:Api.SampleController.Get(System.String)">
      <summary>Sample get</summary>
      <url>http://localhost/V1/samples/{id}</url>
      <verb>GET</verb>
    </member>
  </members>
</doc>
"""

_ADVANCED_XML = """<configuration><document><variant name="swagger" /></document></configuration>"""


@pytest.fixture
def workdir():
    with tempfile.TemporaryDirectory() as tmp:
        root = Path(tmp)
        (root / "Api.xml").write_text(_ANNOTATION_XML, encoding="utf-8")
        (root / "advanced.xml").write_text(_ADVANCED_XML, encoding="utf-8")
        (root / "Api.dll").write_bytes(b"MZ")
        yield root


class TestLoadXmlDocument:

    def test_parses_file(self, workdir: Path) -> None:
        tree = load_xml_document(workdir / "Api.xml")
        assert tree.getroot().tag == "doc"
        assert tree.findtext("assembly/name") == "Api"

    def test_accepts_str_path(self, workdir: Path) -> None:
        tree = load_xml_document(str(workdir / "Api.xml"))
        assert len(tree.findall("members/member")) == 1

    def test_missing_file(self, workdir: Path) -> None:
        with pytest.raises(FileNotFoundError, match="missing.xml"):
            load_xml_document(workdir / "missing.xml")

    def test_malformed_file(self, workdir: Path) -> None:
        bad = workdir / "bad.xml"
        bad.write_text("<doc><unclosed></doc>", encoding="utf-8")
        with pytest.raises(ET.ParseError):
            load_xml_document(bad)


class TestLoadGeneratorConfig:

    def test_builds_config(self, workdir: Path) -> None:
        config = load_generator_config(
            [workdir / "Api.xml"], [workdir / "Api.dll"], "1.0.0"
        )
        assert len(config.annotation_sources) == 1
        assert config.annotation_sources[0].getroot().tag == "doc"
        assert config.assembly_paths == [str(workdir / "Api.dll")]
        assert config.document_version == "1.0.0"
        assert config.filter_config == FilterConfig()
        assert config.advanced_config_source is None

    def test_uses_given_filter_config(self, workdir: Path) -> None:
        filters = FilterConfig()
        config = load_generator_config([], [], "1.0", filter_config=filters)
        assert config.filter_config is filters

    def test_loads_advanced_config(self, workdir: Path) -> None:
        config = load_generator_config(
            [workdir / "Api.xml"], [], "1.0", advanced_config_path=workdir / "advanced.xml"
        )
        assert config.advanced_config_source is not None
        assert config.advanced_config_source.getroot().tag == "configuration"

    def test_missing_assembly_warns(self, workdir: Path, caplog) -> None:
        with caplog.at_level(logging.WARNING, logger="commentreader"):
            config = load_generator_config([], [workdir / "Missing.dll"], "1.0")
        assert "Assembly not found" in caplog.text
        assert config.assembly_paths == [str(workdir / "Missing.dll")]

    def test_missing_annotation_file(self, workdir: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_generator_config([workdir / "Nope.xml"], [], "1.0")

    def test_none_path_lists(self) -> None:
        with pytest.raises(ArgumentMissingError) as exc:
            load_generator_config(None, [], "1.0")
        assert exc.value.param_name == "annotation_paths"
        with pytest.raises(ArgumentMissingError) as exc:
            load_generator_config([], None, "1.0")
        assert exc.value.param_name == "assembly_paths"

    @pytest.mark.parametrize("as_path", [False, True])
    def test_single_annotation_path_rejected(self, workdir: Path, as_path: bool) -> None:
        single = workdir / "Api.xml"
        with pytest.raises(TypeError, match="annotation_paths"):
            load_generator_config(single if as_path else str(single), [], "1.0")

    def test_single_assembly_path_rejected(self, workdir: Path) -> None:
        with pytest.raises(TypeError, match="assembly_paths"):
            load_generator_config([], str(workdir / "Api.dll"), "1.0")

    def test_blank_version_rejected(self, workdir: Path) -> None:
        with pytest.raises(ArgumentMissingError) as exc:
            load_generator_config([workdir / "Api.xml"], [], "  ")
        assert exc.value.param_name == "document_version"

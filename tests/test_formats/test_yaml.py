import yaml as yaml_lib
from unittest.mock import patch
import pytest
from inidoc.document import Document
from inidoc.formats import yaml


def make_document():
    doc = Document()
    doc.add_option("b", "y", "1")
    doc.add_option("a", "x", "2")
    return doc


class TestYamlDocumentFormat:
    def test_available(self):
        assert yaml.IS_AVAILABLE
        yaml.YamlDocumentFormat()

    @patch("inidoc.formats.yaml.IS_AVAILABLE", False)
    def test_not_available(self):
        with pytest.raises(TypeError):
            x = yaml.YamlDocumentFormat()

    def test_dumps(self):
        fmt = yaml.YamlDocumentFormat()
        content = fmt.dumps(make_document())
        assert content == b"b:\n  y: '1'\na:\n  x: '2'\n"

    def test_loads(self):
        fmt = yaml.YamlDocumentFormat()
        doc = Document()
        fmt.loads(doc, b"b:\n  y: '1'\na:\n  x: '2'\n")
        assert doc.list_sections() == ["b", "a"]
        assert doc.get_option("b", "y") == ("1", True)

    def test_dumps_root_key(self):
        fmt = yaml.YamlDocumentFormat(root_key="INI")
        tree = yaml_lib.safe_load(fmt.dumps(make_document()).decode())
        assert tree == {"INI": {"b": {"y": "1"}, "a": {"x": "2"}}}

    def test_loads_root_key(self):
        fmt = yaml.YamlDocumentFormat(root_key="INI")
        doc = Document()
        fmt.loads(doc, b"INI:\n  a:\n    x: '2'\n")
        assert doc.to_tree() == {"a": {"x": "2"}}

    def test_loads_empty(self):
        doc = Document()
        yaml.YamlDocumentFormat().loads(doc, b"")
        assert doc.list_sections() == []

    def test_loads_not_mapping(self):
        with pytest.raises(TypeError):
            yaml.YamlDocumentFormat().loads(Document(), b"- 1\n- 2\n")

    def test_loads_not_string(self):
        with pytest.raises(TypeError):
            yaml.YamlDocumentFormat().loads(Document(), b"a:\n  x: 1\n")

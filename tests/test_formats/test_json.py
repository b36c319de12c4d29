import json

import pytest
from inidoc.document import Document
from inidoc.formats.json import JsonDocumentFormat


def make_document():
    doc = Document()
    doc.add_option("b", "y", "1")
    doc.add_option("a", "x", "2")
    return doc


class TestJsonDocumentFormat:
    def test_dumps(self):
        fmt = JsonDocumentFormat(pretty=False)
        obj = {"b": {"y": "1"}, "a": {"x": "2"}}
        assert fmt.dumps(make_document()) == json.dumps(obj).encode()

    def test_dumps_pretty(self):
        fmt = JsonDocumentFormat(pretty=True)
        obj = {"b": {"y": "1"}, "a": {"x": "2"}}
        assert fmt.dumps(make_document()) == json.dumps(obj, indent=2).encode()

    def test_loads(self):
        fmt = JsonDocumentFormat()
        doc = Document()
        fmt.loads(doc, b'{"b": {"y": "1"}, "a": {"x": "2"}}')
        assert doc.list_sections() == ["b", "a"]
        assert doc.get_option("a", "x") == ("2", True)

    def test_loads_not_object(self):
        with pytest.raises(TypeError):
            JsonDocumentFormat().loads(Document(), b"[1, 2]")

    def test_loads_not_string(self):
        with pytest.raises(TypeError):
            JsonDocumentFormat().loads(Document(), b'{"a": {"x": 1}}')

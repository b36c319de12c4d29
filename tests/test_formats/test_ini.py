import pytest
from inidoc.codec import IniSyntaxError
from inidoc.document import Document
from inidoc.formats.ini import IniDocumentFormat


class TestIniDocumentFormat:
    def test_dumps(self):
        fmt = IniDocumentFormat()
        doc = Document()
        doc.add_option("a", "x", "1")
        assert fmt.dumps(doc) == b"[a]\nx = 1\n\n"

    def test_dumps_encoding(self):
        fmt = IniDocumentFormat(encoding="latin-1")
        doc = Document()
        doc.add_option("a", "x", "ü")
        assert fmt.dumps(doc) == "[a]\nx = ü\n\n".encode("latin-1")

    def test_loads(self):
        fmt = IniDocumentFormat()
        doc = Document()
        doc.add_option("a", "x", "old")
        fmt.loads(doc, b"[a]\nx = 1\n[b]\ny = 2\n")
        assert doc.to_tree() == {"a": {"x": "1"}, "b": {"y": "2"}}

    def test_loads_syntax_error(self):
        fmt = IniDocumentFormat()
        with pytest.raises(IniSyntaxError) as exc:
            fmt.loads(Document(), b"[a]\nnope\n")
        assert exc.value.line == 2

    def test_dumps_utf16(self):
        fmt = IniDocumentFormat(encoding="utf-16")
        doc = Document()
        doc.add_option("a", "x", "1")
        doc.add_option("b", "y", "2")
        content = fmt.dumps(doc)
        assert content.decode("utf-16") == "[a]\nx = 1\n\n[b]\ny = 2\n\n"

        other = Document()
        fmt.loads(other, content)
        assert other.to_tree() == doc.to_tree()

    def test_document_save_load_utf16(self, tmp_path):
        path = str(tmp_path / "doc.ini")
        doc = Document()
        doc.add_option("a", "x", "ü")
        with open(path, "wb") as fp:
            fp.write(doc.dumps(encoding="utf-16"))

        other = Document()
        with open(path, "rb") as fp:
            other.loads(fp.read(), encoding="utf-16")
        assert other.to_tree() == {"a": {"x": "ü"}}

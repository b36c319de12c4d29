from inidoc.options import OptionSet


class TestOptionSet:
    def test_add_new(self):
        opts = OptionSet()
        assert opts.add("x", "1") is True
        assert opts.exists("x")
        assert opts.get("x") == ("1", True)

    def test_add_overwrite_keeps_position(self):
        opts = OptionSet(ordered=True)
        opts.add("a", "1")
        opts.add("b", "2")
        assert opts.add("a", "3") is True
        assert opts.list_names() == ["a", "b"]
        assert opts.get("a") == ("3", True)
        assert len(opts) == 2

    def test_get_missing(self):
        opts = OptionSet()
        assert opts.get("x") == ("", False)

    def test_get_empty_value(self):
        opts = OptionSet()
        opts.add("x", "")
        assert opts.get("x") == ("", True)

    def test_remove(self):
        opts = OptionSet()
        opts.add("a", "1")
        opts.add("b", "2")
        assert opts.remove("a") is True
        assert not opts.exists("a")
        assert opts.get("a") == ("", False)
        assert opts.list_names() == ["b"]

    def test_remove_missing(self):
        opts = OptionSet()
        opts.add("a", "1")
        assert opts.remove("b") is False
        assert opts.list_names() == ["a"]
        assert opts.get("a") == ("1", True)

    def test_readd_after_remove_appends(self):
        opts = OptionSet(ordered=True)
        opts.add("a", "1")
        opts.add("b", "2")
        opts.remove("a")
        opts.add("a", "3")
        assert opts.list_names() == ["b", "a"]

    def test_list_names_ordered(self):
        opts = OptionSet(ordered=True)
        for name in ("z", "m", "a", "q"):
            opts.add(name, name)
        assert opts.list_names() == ["z", "m", "a", "q"]

    def test_list_names_returns_copy(self):
        opts = OptionSet(ordered=True)
        opts.add("a", "1")
        opts.list_names().append("b")
        assert opts.list_names() == ["a"]
        assert not opts.exists("b")

    def test_list_names_unordered(self):
        opts = OptionSet(ordered=False)
        for name in ("z", "m", "a"):
            opts.add(name, name)
        opts.add("m", "again")
        opts.remove("z")
        assert sorted(opts.list_names()) == ["a", "m"]

    def test_unordered_does_not_track_names(self):
        opts = OptionSet(ordered=False)
        opts.add("a", "1")
        assert opts._names == []
        assert opts.remove("a") is True
        assert opts._names == []

    def test_dunder(self):
        opts = OptionSet()
        opts.add("a", "1")
        opts.add("b", "2")
        assert "a" in opts
        assert "c" not in opts
        assert len(opts) == 2
        assert list(opts) == ["a", "b"]

    def test_repr(self):
        opts = OptionSet()
        opts.add("a", "1")
        assert repr(opts) == "<OptionSet ordered=True {'a': '1'}>"

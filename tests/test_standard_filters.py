"""
Поведение стандартных фильтров и пайпа фильтров.
"""

import datetime as dt

import pytest

from lq import Engine
from lq.errors import FilterError
from tests.infrastructure import lit, out, pipe, var


class TestStandardFilters:

    def setup_method(self):
        self.engine = Engine()

    def apply(self, name, value, *params):
        return self.engine.get_filter(name).apply(value, *params)

    # --- строки ---

    def test_append_prepend(self):
        assert self.apply("append", "foo", "bar") == "foobar"
        assert self.apply("prepend", "bar", "foo") == "foobar"
        assert self.apply("append", None, 1) == "1"

    def test_capitalize(self):
        assert self.apply("capitalize", "hello world") == "Hello world"
        assert self.apply("capitalize", "hELLO") == "HELLO"
        assert self.apply("capitalize", "") == ""

    def test_case_conversion(self):
        assert self.apply("upcase", "Hello") == "HELLO"
        assert self.apply("downcase", "Hello") == "hello"
        assert self.apply("upcase", None) == ""

    def test_remove_and_replace(self):
        assert self.apply("remove", "a-b-c", "-") == "abc"
        assert self.apply("remove_first", "a-b-c", "-") == "ab-c"
        assert self.apply("replace", "aaa", "a", "b") == "bbb"
        assert self.apply("replace_first", "aaa", "a", "b") == "baa"

    def test_split(self):
        assert self.apply("split", "a,b,c", ",") == ["a", "b", "c"]
        assert self.apply("split", "abc", "") == ["a", "b", "c"]
        assert self.apply("split", "a,b,,", ",") == ["a", "b"]

    def test_strip_newlines(self):
        assert self.apply("strip_newlines", "a\nb\r\nc") == "abc"

    def test_truncate(self):
        assert self.apply("truncate", "Ground control to Major Tom.", 20) == "Ground control to..."
        assert self.apply("truncate", "short") == "short"
        assert self.apply("truncate", "abcdef", 3, "") == "abc"
        assert self.apply("truncate", "abcdef", 2) == "..."
        assert self.apply("truncate", "x" * 60) == "x" * 47 + "..."

    def test_truncatewords(self):
        assert self.apply("truncatewords", "one two three four", 2) == "one two..."
        assert self.apply("truncatewords", "one two", 5) == "one two"
        assert self.apply("truncatewords", "one two three", 1, "--") == "one--"

    # --- числа ---

    def test_arithmetic(self):
        assert self.apply("plus", 1, 2) == 3
        assert self.apply("plus", "1", "2.5") == 3.5
        assert self.apply("minus", 5, 2) == 3
        assert self.apply("times", 3, "4") == 12
        assert self.apply("modulo", 7, 3) == 1

    def test_divided_by(self):
        assert self.apply("divided_by", 7, 2) == 3
        assert self.apply("divided_by", 7.0, 2) == 3.5
        assert self.apply("divided_by", "10", "5") == 2

    @pytest.mark.parametrize("name", ["divided_by", "modulo"])
    def test_division_by_zero(self, name):
        with pytest.raises(FilterError) as exc:
            self.apply(name, 1, 0)
        assert "divided by 0" in str(exc.value)
        assert exc.value.filter_name == name

    def test_non_numeric_input_counts_as_zero(self):
        assert self.apply("plus", "abc", 2) == 2

    # --- html ---

    def test_escape(self):
        raw = "<a href=\"x\">'&'</a>"
        expected = "&lt;a href=&quot;x&quot;&gt;&#39;&amp;&#39;&lt;/a&gt;"
        assert self.apply("escape", raw) == expected
        assert self.apply("h", raw) == expected

    def test_escape_once(self):
        assert self.apply("escape_once", "&lt;b&gt; & <i>") == "&lt;b&gt; &amp; &lt;i&gt;"
        assert self.apply("escape_once", "&#39; &#x27;") == "&#39; &#x27;"

    def test_strip_html(self):
        html = "<p>Hi <b>there</b></p><script>alert(1)</script><!-- note -->"
        assert self.apply("strip_html", html) == "Hi there"

    # --- коллекции ---

    def test_first_last(self):
        assert self.apply("first", [1, 2, 3]) == 1
        assert self.apply("last", [1, 2, 3]) == 3
        assert self.apply("first", []) is None
        assert self.apply("last", "abc") is None

    def test_join(self):
        assert self.apply("join", [1, 2, 3]) == "1 2 3"
        assert self.apply("join", ["a", "b"], ", ") == "a, b"

    def test_map(self):
        items = [{"n": "a"}, {"n": "b"}, {}]
        assert self.apply("map", items, "n") == ["a", "b", None]

    def test_size(self):
        assert self.apply("size", "abc") == 3
        assert self.apply("size", [1, 2]) == 2
        assert self.apply("size", {"a": 1}) == 1
        assert self.apply("size", 5) == 0
        assert self.apply("size", None) == 0

    def test_sort(self):
        assert self.apply("sort", [3, 1, 2]) == [1, 2, 3]
        items = [{"k": 2}, {}, {"k": 1}]
        assert self.apply("sort", items, "k") == [{"k": 1}, {"k": 2}, {}]

    def test_sort_incomparable(self):
        with pytest.raises(FilterError):
            self.apply("sort", [1, "a"])

    # --- даты ---

    def test_date_formats_datetime(self):
        moment = dt.datetime(2024, 3, 5, 14, 30)
        assert self.apply("date", moment, "%Y-%m-%d %H:%M") == "2024-03-05 14:30"

    def test_date_parses_iso_string(self):
        assert self.apply("date", "2024-03-05", "%d/%m/%Y") == "05/03/2024"

    def test_date_now(self):
        assert self.apply("date", "now", "%Y") == str(dt.datetime.now().year)

    def test_date_leaves_unparsable_input(self):
        assert self.apply("date", "not a date", "%Y") == "not a date"
        assert self.apply("date", [1], "%Y") == [1]

    @pytest.mark.parametrize("value", [10 ** 20, -(10 ** 20), str(10 ** 20), float("inf")])
    def test_date_out_of_range_epoch_is_left_unchanged(self, value):
        assert self.apply("date", value, "%Y") == value

    def test_date_empty_format(self):
        moment = dt.date(2020, 1, 2)
        assert self.apply("date", moment, "") is moment


class TestFilterPipe:

    def test_applies_left_to_right(self, engine):
        stages = [("append", ["a"]), ("upcase", [])]
        assert engine.apply_filters("hello", stages) == "HELLOA"

        stages = [("upcase", []), ("append", ["a"])]
        assert engine.apply_filters("hello", stages) == "HELLOa"

    def test_empty_pipe_returns_value(self, engine):
        value = object()
        assert engine.apply_filters(value, []) is value

    def test_output_node(self, engine):
        node = out(var("name"), pipe("upcase"), pipe("append", "!"), pipe("prepend", lit(">")))
        assert engine.render(node, {"name": "hello"}) == ">HELLO!"

    def test_unknown_filter_aborts_render(self, engine):
        from lq.errors import UnknownFilterError

        node = out(lit("x"), pipe("upcase"), pipe("nope"))
        with pytest.raises(UnknownFilterError):
            engine.render(node)

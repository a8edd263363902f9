"""tests/unit/test_params.py"""

import random

import pytest

from serpurl.uri.params import QueryParam, QueryParams


class TestQueryParam:
    """Tests for QueryParam class."""

    def test_accessors(self):
        """Test name, value and raw flag accessors."""
        param = QueryParam("foo", "bar", raw=True)
        assert param.get_name() == "foo"
        assert param.get_value() == "bar"
        assert param.is_raw() is True

    def test_raw_defaults_to_false(self):
        """Test that parameters are encoded unless told otherwise."""
        assert QueryParam("foo", "bar").is_raw() is False

    def test_format_encodes_space_as_plus(self):
        """Test that spaces in values are encoded as +."""
        assert QueryParam("foobar", "foo bar").format() == "foobar=foo+bar"

    def test_format_raw_value_verbatim(self):
        """Test that raw values are inserted without encoding."""
        assert QueryParam("foobar", "foo bar", raw=True).format() == "foobar=foo bar"

    def test_format_raw_still_encodes_name(self):
        """Test that the raw flag only applies to the value."""
        assert QueryParam("a b", "c d", raw=True).format() == "a+b=c d"

    def test_format_bare_name(self):
        """Test that a None value emits the name alone."""
        assert QueryParam("flag", None).format() == "flag"

    def test_format_empty_value(self):
        """Test that an empty value keeps the equals sign."""
        assert QueryParam("q", "").format() == "q="

    def test_equality_and_hash(self):
        """Test value-based equality."""
        assert QueryParam("a", "1") == QueryParam("a", "1")
        assert QueryParam("a", "1") != QueryParam("a", "1", raw=True)
        assert hash(QueryParam("a", "1")) == hash(QueryParam("a", "1"))

    def test_non_string_value_is_stored_as_str(self):
        """Test that values such as ints are kept as their string form."""
        param = QueryParam("page", 2)
        assert param.get_value() == "2"
        assert param.format() == "page=2"

    def test_format_escapes_question_mark(self):
        """Test that a value never adds a second query delimiter."""
        assert QueryParam("q", "what?").format() == "q=what%3F"

    def test_from_pair_keeps_encoded_text(self):
        """Test that a parsed pair decodes its value but formats as read."""
        param = QueryParam.from_pair("next=%2Fhome%3Fx")
        assert param.get_name() == "next"
        assert param.get_value() == "/home?x"
        assert param.format() == "next=%2Fhome%3Fx"
        assert param == QueryParam("next", "/home?x")


class TestQueryParams:
    """Tests for QueryParams class."""

    def test_init_empty(self):
        """Test QueryParams initialization with no arguments."""
        params = QueryParams()
        assert len(params) == 0
        assert params.to_query_string() == ""

    def test_init_with_dict(self):
        """Test initialization from plain values keeps order."""
        params = QueryParams({"b": "2", "a": "1"})
        assert list(params) == ["b", "a"]
        assert params["a"] == QueryParam("a", "1")

    def test_init_with_query_params(self):
        """Test initialization from QueryParam values keeps raw flags."""
        params = QueryParams({"a": QueryParam("a", "x y", raw=True)})
        assert params["a"].is_raw() is True

    def test_init_keys_query_param_by_its_name(self):
        """Test that a QueryParam is stored under its own name, not the dict key."""
        params = QueryParams({"a": QueryParam("b", "1")})
        assert "b" in params
        assert "a" not in params
        assert params.to_query_string() == "b=1"

    def test_set_appends(self):
        """Test that new names are appended."""
        params = QueryParams()
        params.set("foo", "bar")
        params.set("foobar", "foo bar")
        assert params.to_query_string() == "foo=bar&foobar=foo+bar"

    def test_set_overwrites_in_place(self):
        """Test that overwriting a name keeps its position."""
        params = QueryParams()
        params.set("a", "1")
        params.set("b", "2")
        params.set("a", "3")
        assert params.to_query_string() == "a=3&b=2"

    def test_set_overwrites_raw_flag(self):
        """Test that overwriting replaces the raw flag too."""
        params = QueryParams()
        params.set("foobar", "foo bar")
        params.set("foobar", "foo bar", True)
        assert params.to_query_string() == "foobar=foo bar"

    def test_remove(self):
        """Test that removal keeps the order of the others."""
        params = QueryParams({"a": "1", "b": "2", "c": "3"})
        params.remove("b")
        assert params.to_query_string() == "a=1&c=3"

    def test_remove_absent_is_noop(self):
        """Test that removing an absent name changes nothing."""
        params = QueryParams({"a": "1"})
        params.remove("missing")
        params.remove("missing")
        assert params.to_query_string() == "a=1"

    def test_get_value(self):
        """Test get_value with and without default."""
        params = QueryParams({"q": "bar"})
        assert params.get_value("q") == "bar"
        assert params.get_value("missing") is None
        assert params.get_value("missing", "foo") == "foo"
        assert params.get_value("q", "foo") == "bar"

    def test_names_are_exact_match(self):
        """Test that names are not percent-decoded for lookup."""
        params = QueryParams({"a b": "1"})
        assert params.get_value("a+b") is None
        assert params.get_value("a%20b") is None
        assert "a b" in params

    def test_getitem_raises_keyerror(self):
        """Test __getitem__ raises KeyError for missing names."""
        with pytest.raises(KeyError):
            _ = QueryParams()["missing"]

    def test_copy_is_independent(self):
        """Test that copies do not share state."""
        params = QueryParams({"a": "1"})
        clone = params.copy()
        clone.set("b", "2")
        assert "b" not in params
        assert clone == QueryParams({"a": "1", "b": "2"})

    def test_equality_depends_on_order(self):
        """Test that equal stores need the same order."""
        assert QueryParams({"a": "1", "b": "2"}) != QueryParams({"b": "2", "a": "1"})


class TestFromQueryString:
    """Tests for QueryParams.from_query_string()."""

    def test_simple(self):
        """Test parsing name=value pairs."""
        params = QueryParams.from_query_string("qux=baz&a=1")
        assert list(params) == ["qux", "a"]
        assert params.get_value("qux") == "baz"

    def test_decodes(self):
        """Test that names and values are decoded."""
        params = QueryParams.from_query_string("q=foo+bar&x%20y=%26")
        assert params.get_value("q") == "foo bar"
        assert params.get_value("x y") == "&"

    def test_bare_name(self):
        """Test that a pair without = has a None value."""
        params = QueryParams.from_query_string("q")
        assert "q" in params
        assert params.get_value("q", "default") is None
        assert params.to_query_string() == "q"

    def test_value_with_equals(self):
        """Test that only the first = splits the pair."""
        params = QueryParams.from_query_string("a=b=c")
        assert params.get_value("a") == "b=c"

    def test_skips_empty_pairs(self):
        """Test that empty pairs are ignored."""
        params = QueryParams.from_query_string("&a=1&&b=2&")
        assert list(params) == ["a", "b"]

    def test_repeated_name(self):
        """Test that a repeated name keeps first position and last value."""
        params = QueryParams.from_query_string("a=1&b=2&a=3")
        assert params.to_query_string() == "a=3&b=2"

    def test_normalized_round_trip(self):
        """Test that normalized query strings survive parse and serialize."""
        for query in ("qux=baz", "y/./x", "a=1&b=&c", "q=foo+bar", "k=a:b@c%3Fd"):
            assert QueryParams.from_query_string(query).to_query_string() == query

    @pytest.mark.parametrize(
        "query",
        ["next=%2Fhome%3Fx", "a=%26b&c=%3D", "path=a%2Fb%2F..%2Fc"],
    )
    def test_encoded_reserved_characters_round_trip(self, query):
        """Test that escaped delimiters stay escaped after parse and serialize."""
        assert QueryParams.from_query_string(query).to_query_string() == query

    def test_set_after_parse_reencodes(self):
        """Test that a replaced parameter is encoded from its new value."""
        params = QueryParams.from_query_string("next=%2Fhome&x=1")
        params.set("next", "a?b")
        assert params.to_query_string() == "next=a%3Fb&x=1"


@pytest.mark.parametrize("seed", range(20))
def test_random_operations_match_ordered_model(seed):
    """Replay random set/remove sequences against a list-based model."""
    rng = random.Random(seed)
    names = ["a", "b", "c", "d", "e", "f"]
    params = QueryParams()
    model = []  # [name, value] pairs in insertion order

    for step in range(60):
        name = rng.choice(names)
        if rng.random() < 0.3:
            params.remove(name)
            model = [pair for pair in model if pair[0] != name]
        else:
            value = f"v{step}"
            params.set(name, value)
            for pair in model:
                if pair[0] == name:
                    pair[1] = value
                    break
            else:
                model.append([name, value])

        assert list(params) == [pair[0] for pair in model]
        assert [params.get_value(n) for n in params] == [pair[1] for pair in model]

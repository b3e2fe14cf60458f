from cheap_bananas.sentinel import is_sentinel, resolve_sentinels


def test_underscore_only_strings_become_none():
    assert resolve_sentinels("_") is None
    assert resolve_sentinels("__") is None
    assert resolve_sentinels("_____") is None


def test_empty_string_kept():
    assert resolve_sentinels("") == ""


def test_underscores_stripped_from_other_strings():
    assert resolve_sentinels("a_b") == "ab"
    assert resolve_sentinels("no-underscore") == "no-underscore"


def test_nested_structures():
    out = resolve_sentinels({"a": "_", "b": [" _", "x_y"]})
    assert out == {"a": None, "b": [" ", "xy"]}


def test_deep_nesting_and_tuples():
    body = {
        "name": "example_name",
        "details": {"tags": ("tag_one", "__")},
        "items": [{"id": "____", "value": "_"}, {"id": "item_two", "value": 3}],
    }
    out = resolve_sentinels(body)
    assert out == {
        "name": "examplename",
        "details": {"tags": ("tagone", None)},
        "items": [{"id": None, "value": None}, {"id": "itemtwo", "value": 3}],
    }


def test_input_not_mutated():
    body = {"a": ["_", "b_c"]}
    resolve_sentinels(body)
    assert body == {"a": ["_", "b_c"]}


def test_non_string_scalars_unchanged():
    for x in (0, 1.5, True, False, None):
        assert resolve_sentinels(x) is x


def test_is_sentinel():
    assert is_sentinel("_")
    assert is_sentinel("___")
    assert not is_sentinel("")
    assert not is_sentinel("a_")
    assert not is_sentinel(None)

from cheap_bananas.fields import edit_field, sanitize_value, split_line, suggest


def test_split_pads_to_field_count():
    assert split_line("banana  1.5", 3) == ["banana", "1.5", ""]


def test_split_blank_line():
    assert split_line("   ", 2) == ["", ""]


def test_split_keeps_extra_tokens():
    assert split_line("a b c", 2) == ["a", "b", "c"]


def test_edit_past_end_fills_sentinels():
    values = split_line("banana", 4)
    assert edit_field(values, 3, "kg") == "banana _ _ kg"


def test_edit_on_empty_line():
    assert edit_field(["", "", ""], 2, "x") == "_ _ x"


def test_edit_inside_keeps_other_fields():
    values = split_line("banana 10 _ kg", 4)
    assert edit_field(values, 1, "12") == "banana 12 _ kg"


def test_edit_sanitizes_value():
    assert sanitize_value("Big  Bag") == "big-bag"
    assert edit_field(["tesco", ""], 1, "Near The Station") == "tesco near-the-station"


def test_edit_round_trips_through_split():
    line = edit_field(split_line("id 25", 7), 6, "on sale")
    assert split_line(line, 7) == ["id", "25", "_", "_", "_", "_", "on-sale"]


def test_suggest():
    shops = ("tesco", "lidl", "albert", "billa")
    assert suggest(shops, "Li") == "lidl"
    assert suggest(shops, "x") is None
    assert suggest(shops, "") is None

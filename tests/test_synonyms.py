from catalog.search.synonyms import DEFAULT_SYNONYMS, SynonymTable


def test_short_form_expands_to_long_forms():
    expanded = DEFAULT_SYNONYMS.expand(["db"])

    assert "dumbbell" in expanded.tokens
    assert "dumbell" in expanded.tokens
    assert expanded.tokens[0] == "db"


def test_long_form_expands_back_to_short_form():
    expanded = DEFAULT_SYNONYMS.expand(["dumbbell"])

    assert "db" in expanded.tokens
    assert "dumbell" in expanded.tokens


def test_unknown_token_expands_to_itself():
    expanded = DEFAULT_SYNONYMS.expand(["zercher"])

    assert expanded.tokens == ("zercher",)
    assert expanded.sources["zercher"] == frozenset({"zercher"})


def test_expansion_is_deduplicated_and_tracks_originals():
    expanded = DEFAULT_SYNONYMS.expand(["db", "dumbbell", "curl"])

    assert len(expanded.tokens) == len(set(expanded.tokens))
    assert expanded.originals == ("db", "dumbbell", "curl")
    assert expanded.is_original("dumbbell")
    assert not expanded.is_original("dumbell")


def test_sources_map_each_original_to_its_group():
    expanded = DEFAULT_SYNONYMS.expand(["bb", "row"])

    assert expanded.sources["bb"] == frozenset({"bb", "barbell", "barbells"})
    assert expanded.sources["row"] == frozenset({"row"})


def test_term_in_several_entries_pulls_every_group():
    table = SynonymTable({"lat": ["lats"], "back": ["lats", "upper back"]})

    assert set(table.group("lats")) == {"lat", "lats", "back", "upper back"}


def test_table_normalizes_case_and_blanks():
    table = SynonymTable({" DB ": ["Dumbbell", " ", "DUMBELL"]})

    assert "db" in table
    assert table.group("dumbbell") == ("db", "dumbbell", "dumbell")
    assert len(table) == 1


def test_default_table_covers_common_gym_shorthand():
    for key in ("db", "bb", "machine", "cable", "lat", "bi", "tri", "leg", "chest", "back", "shoulder"):
        assert key in DEFAULT_SYNONYMS

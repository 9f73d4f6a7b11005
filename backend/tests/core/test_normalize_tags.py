"""Tag Normalization — verifies slugging, dedup and the MAX_TAGS cap."""

from request_board.core.normalize_tags import MAX_TAGS, normalize_tags


def test_slugs_hash_whitespace_and_case():
    assert normalize_tags(["#Study Group", "  Calc  II "]) == ["study-group", "calc-ii"]


def test_whitespace_runs_collapse_to_single_dash():
    assert normalize_tags(["late \t night\nride"]) == ["late-night-ride"]


def test_only_one_leading_hash_is_removed():
    assert normalize_tags(["##double"]) == ["#double"]


def test_duplicates_keep_first_occurrence():
    assert normalize_tags(["Math", "#math", "physics", "MATH"]) == ["math", "physics"]


def test_empty_and_non_string_entries_dropped():
    assert normalize_tags(["", "   ", "#", None, 42, "ok"]) == ["ok"]


def test_non_list_input_yields_empty():
    assert normalize_tags(None) == []
    assert normalize_tags("math") == []
    assert normalize_tags({"math": 1}) == []


def test_tuple_input_accepted():
    assert normalize_tags(("a", "b")) == ["a", "b"]


def test_capped_at_max_tags_after_dedup():
    raw = ["dup", "dup"] + [f"t{i}" for i in range(20)]
    result = normalize_tags(raw)
    assert len(result) == MAX_TAGS
    assert result[0] == "dup"
    assert result[-1] == "t8"


def test_idempotent_on_normalized_output():
    once = normalize_tags(["#Study Group", "Math", "math"])
    assert normalize_tags(once) == once


def test_double_hash_is_the_one_non_idempotent_input():
    once = normalize_tags(["##Tag"])
    assert once == ["#tag"]
    # a second pass strips the remaining '#': only '##'-prefixed input changes
    assert normalize_tags(once) == ["tag"]

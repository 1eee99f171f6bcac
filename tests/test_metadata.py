# tests/test_metadata.py
from puzzlecodec import GridMetadata, Origin, metadata, parse_compact, encode_compact


def test_standard_metadata(fpuzzle):
    meta = metadata(fpuzzle, Origin.STANDARD)
    assert meta == GridMetadata(
        title="Tiny Killer",
        author="Setter Person",
        rules="Normal sudoku rules apply.\nCages sum to the clue.",
        rows_cols=(4, 4),
        has_solution=True,
    )


def test_standard_missing_and_wrong_types():
    meta = metadata({"size": "9", "title": 7, "solution": None}, Origin.STANDARD)
    assert meta.title is None
    assert meta.rows_cols is None
    # presence of the key is what counts
    assert meta.has_solution is True
    assert metadata({"size": True}, Origin.STANDARD).rows_cols is None
    assert metadata({}, Origin.STANDARD) == GridMetadata()


def test_compact_metadata(ctc_puzzle):
    meta = metadata(parse_compact(encode_compact(ctc_puzzle)), Origin.COMPACT)
    assert meta.title == "Three by Three"
    assert meta.author == "Setter Person"
    assert meta.rules == "Place 1-3 in every row.\nIt's small."
    assert meta.rows_cols == (3, 3)
    assert meta.has_solution is True


def test_compact_title_prefix():
    value = parse_compact("{ca:[{v:'title: Foo'}]}")
    assert metadata(value, Origin.COMPACT).title == "Foo"


def test_compact_first_match_wins():
    value = {"ca": [{"v": "note"}, "stray", {"v": "title: First"}, {"v": "title: Second"}]}
    assert metadata(value, Origin.COMPACT).title == "First"


def test_compact_absent_fields_are_none():
    value = {"ce": [], "ca": [{"v": "Title: wrong case"}, {"v": 5}]}
    meta = metadata(value, Origin.COMPACT)
    assert meta == GridMetadata()


def test_compact_rectangular_grid():
    value = {"ce": [[{}, {}, {}, {}], [{}, {}, {}, {}]]}
    assert metadata(value, Origin.COMPACT).rows_cols == (2, 4)


def test_non_object_values():
    assert metadata([1, 2], Origin.COMPACT) == GridMetadata()
    assert metadata("x", Origin.STANDARD) == GridMetadata()

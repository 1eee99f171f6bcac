# tests/conftest.py — shared puzzle fixtures
from decimal import Decimal

import pytest

from puzzlecodec import encode


@pytest.fixture
def fpuzzle():
    """A small f-puzzles style grid."""
    return {
        "size": 4,
        "title": "Tiny Killer",
        "author": "Setter Person",
        "ruleset": "Normal sudoku rules apply.\nCages sum to the clue.",
        "grid": [
            [{"value": 1, "given": True}, {}, {}, {}],
            [{}, {}, {"c": ["#FFFFFF"]}, {}],
            [{}, {}, {}, {}],
            [{}, {}, {}, {"value": 4}],
        ],
        "killercage": [{"cells": ["R1C1", "R1C2"], "value": "3"}],
        "weight": Decimal("1.25"),
        "solution": [1, 2, 3, 4, 3, 4, 1, 2, 2, 1, 4, 3, 4, 3, 2, 1],
    }


@pytest.fixture
def fpuzzle_payload(fpuzzle):
    return encode(fpuzzle)


@pytest.fixture
def ctc_puzzle():
    """A CtC compact-grammar puzzle with metadata stored in the extras."""
    return {
        "id": "ctc-demo",
        "ce": [[{}, {}, {"v": 5}], [{}, {}, {}], [{"v": 1}, {}, {}]],
        "ca": [
            {"c": "#000000", "v": "title: Three by Three"},
            {"v": "author: Setter Person"},
            {"v": "rules: Place 1-3 in every row.\nIt's small."},
            {"v": "solution: 123231312"},
        ],
        "lines": [{"wayPoints": [[Decimal("0.5"), Decimal("1.5")], [2, 3]], "thickness": 8}],
        "settings": {"conflictchecker": True, "fog": False},
    }

"""
Test the bundled example table.

Exercises the whole pipeline on a realistic file: trimming, quoting,
escapes, padded cell rows and top-aggregated answers.
"""

from associativity.examples import EXAMPLE_TABLE_CSV, build_example_table
from associativity.csv_reader import parse_csv_string


def test_example_raw_rows():
    rows = parse_csv_string(EXAMPLE_TABLE_CSV)
    assert len(rows) == 8
    assert rows[0] == ["1", "1", "1", "1", "0"]
    assert rows[3][3] == "cardiac, muscle"
    assert rows[4][3] == "'sweetheart'"


def test_example_table_structure():
    table = build_example_table()

    assert table.cell("1", "A") == "crust"
    assert table.cell("3", "D") == "cardiac, muscle"
    assert table.cell("4", "D") == "'sweetheart'"

    assert table.column("A") == ["bread", "baguette"]
    assert table.column("B") == ["code", "cryptogram", "cypher"]
    assert table.column("C") == ["record", "disc", "LP"]
    assert table.column("D") == ["heart"]
    assert table.final == ["break", "crack"]

    assert table.shuffle == {"A": True, "B": True, "C": True, "D": True, "Sol": False}

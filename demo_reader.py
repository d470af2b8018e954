"""
Demo: Read an associations table and print what was found.

Usage:
    python demo_reader.py table.csv [--yaml out.yaml] [--play]

Without a path, the bundled example table is used.
"""

import argparse
import logging
import sys

from associativity.config import COLUMN_LABELS, ROW_LABELS, SOLUTION_LABEL, cell_labels
from associativity.errors import FormatError
from associativity.examples import build_example_table
from associativity.game import GameState
from associativity.logging_utils import configure_logging
from associativity.serialization import table_to_yaml
from associativity.validator import read_associations_table_file


def print_table(table):
    """Pretty-print an AssociationsTable."""
    print()
    print("=" * 70)
    print("ASSOCIATIONS TABLE")
    print("=" * 70)
    print()

    print("CELLS")
    print("      " + "".join(f"{column:<16}" for column in COLUMN_LABELS))
    for row in ROW_LABELS:
        values = "".join(f"{table.cell(row, column):<16}" for column in COLUMN_LABELS)
        print(f"  {row}   {values}")
    print()

    print("ANSWERS")
    for column in COLUMN_LABELS:
        shuffle = "shuffle" if table.shuffle_allowed(column) else "fixed"
        print(f"  {column} ({shuffle}): {', '.join(table.column(column))}")
    shuffle = "shuffle" if table.shuffle_allowed(SOLUTION_LABEL) else "fixed"
    print(f"  {SOLUTION_LABEL} ({shuffle}): {', '.join(table.final)}")
    print()


def play(table):
    """Minimal console round: uncover cells column by column, then guess."""
    game = GameState.new(table)
    for column in COLUMN_LABELS:
        for cell in cell_labels(column):
            print(f"  {cell}: {game.open_cell(cell)}")
            if not game.can_guess(column):
                continue
            guess = input(f"Column {column} (empty to skip): ").strip()
            if guess and game.guess(column, guess):
                print("Correct!")
                break
        if not game.is_open(column):
            print(f"Column {column} was: {game.give_up(column)}")

    print(f"Hint: {', '.join(game.hint(SOLUTION_LABEL))}")
    guess = input("Final solution (empty to give up): ").strip()
    if guess and game.guess(SOLUTION_LABEL, guess):
        print("Correct!")
    else:
        print(f"The answer was: {game.give_up(SOLUTION_LABEL)}")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Read an associations table CSV file.")
    parser.add_argument("path", nargs="?", help="CSV file (defaults to the bundled example)")
    parser.add_argument("--yaml", help="Export the table to this YAML file")
    parser.add_argument("--play", action="store_true", help="Guess the final solution")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    configure_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        table = read_associations_table_file(args.path) if args.path else build_example_table()
    except FormatError as e:
        print(f"Invalid table ({e.kind.value}): {e}", file=sys.stderr)
        return 1

    print_table(table)

    if args.yaml:
        with open(args.yaml, "w", encoding="utf-8") as f:
            f.write(table_to_yaml(table))
        print(f"Table exported to {args.yaml}")

    if args.play:
        play(table)

    return 0


if __name__ == "__main__":
    sys.exit(main())

"""
Game state built on top of an AssociationsTable (Layer 3).

Consumes a validated table and tracks what the player has uncovered.
It does NOT read tables and does NOT render anything.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Optional, Set

from associativity.acceptables import fix_acceptables, is_acceptable
from associativity.config import COLUMN_LABELS, ROW_LABELS, SOLUTION_LABEL, cell_label, cell_labels
from associativity.logging_utils import get_logger
from associativity.model import AssociationsTable


logger = get_logger("game")


def _copy_table(table: AssociationsTable) -> AssociationsTable:
    return AssociationsTable(
        cells=dict(table.cells),
        columns={label: list(answers) for label, answers in table.columns.items()},
        final=list(table.final),
        shuffle=dict(table.shuffle),
    )


def shuffle_table(table: AssociationsTable, rng: Optional[random.Random] = None) -> AssociationsTable:
    """
    Return a copy of table shuffled where its flags allow it.

    Cells of a column are permuted if the column's flag is set. Whole
    columns (cells and answers together) are permuted if the "Sol" flag is
    set. Flags are copied unchanged.
    """
    rng = rng or random.Random()
    shuffled = _copy_table(table)

    for column in COLUMN_LABELS:
        if not table.shuffle.get(column, False):
            continue
        values = shuffled.column_cells(column)
        rng.shuffle(values)
        for row, value in zip(ROW_LABELS, values):
            shuffled.cells[cell_label(row, column)] = value

    if table.shuffle.get(SOLUTION_LABEL, False):
        order = list(COLUMN_LABELS)
        rng.shuffle(order)
        cells = {}
        columns = {}
        for target, source in zip(COLUMN_LABELS, order):
            for row in ROW_LABELS:
                cells[cell_label(row, target)] = shuffled.cells[cell_label(row, source)]
            columns[target] = shuffled.columns[source]
        shuffled.cells = cells
        shuffled.columns = columns

    return shuffled


def _fix_answers(table: AssociationsTable) -> AssociationsTable:
    return AssociationsTable(
        cells=dict(table.cells),
        columns={label: fix_acceptables(answers) for label, answers in table.columns.items()},
        final=fix_acceptables(table.final),
        shuffle=dict(table.shuffle),
    )


def prepare_table(table: AssociationsTable, rng: Optional[random.Random] = None) -> AssociationsTable:
    """Normalize every answer list with fix_acceptables, then shuffle."""
    return shuffle_table(_fix_answers(table), rng)


@dataclass
class GameState:
    """
    Progress of one game.

    Properties:
        table: The table being played; its answer lists are normalized
            with fix_acceptables on construction
        open_cells: Labels of uncovered cells ("A1", ...)
        open_columns: Labels of solved or given-up columns
        final_open: Whether the final solution is uncovered (game over)

    RULES:
        - A column may be guessed once one of its cells is open,
          and given up once all of its cells are open
        - The final solution may be guessed once one column is open,
          and given up once all columns are open
    """

    table: AssociationsTable
    open_cells: Set[str] = field(default_factory=set)
    open_columns: Set[str] = field(default_factory=set)
    final_open: bool = False

    def __post_init__(self):
        self.table = _fix_answers(self.table)

    @classmethod
    def new(cls, table: AssociationsTable, rng: Optional[random.Random] = None) -> GameState:
        """Start a game on a freshly read table, shuffled where allowed."""
        return cls(table=shuffle_table(table, rng))

    def open_cell(self, cell: str) -> str:
        """Uncover a single cell; returns its value."""
        value = self.table.cells[cell]
        self.open_cells.add(cell)
        return value

    def open_column(self, column: str) -> str:
        """Uncover a column with all its cells; returns its canonical answer."""
        answers = self.table.column(column)
        for cell in cell_labels(column):
            self.open_cells.add(cell)
        self.open_columns.add(column)
        return answers[0]

    def open_final(self) -> str:
        """Uncover everything; returns the canonical final answer."""
        for column in COLUMN_LABELS:
            self.open_column(column)
        self.final_open = True
        logger.info("Game finished")
        return self.table.final[0]

    def _open(self, target: str) -> str:
        if target == SOLUTION_LABEL:
            return self.open_final()
        return self.open_column(target)

    def is_open(self, target: str) -> bool:
        if target == SOLUTION_LABEL:
            return self.final_open
        return target in self.open_columns

    def hint(self, target: str) -> List[str]:
        """
        What is already uncovered towards a target.

        For a column: values of its open cells, top to bottom.
        For "Sol": canonical answers of the open columns, in column order.

        Raises:
            KeyError: If target is neither a column label nor "Sol"
        """
        if target == SOLUTION_LABEL:
            return [self.table.column(column)[0] for column in COLUMN_LABELS if column in self.open_columns]
        self.table.column(target)
        return [self.table.cells[cell] for cell in cell_labels(target) if cell in self.open_cells]

    def can_guess(self, target: str) -> bool:
        return not self.is_open(target) and len(self.hint(target)) > 0

    def can_give_up(self, target: str) -> bool:
        needed = len(COLUMN_LABELS) if target == SOLUTION_LABEL else len(ROW_LABELS)
        return not self.is_open(target) and len(self.hint(target)) == needed

    def guess(self, target: str, guess: str) -> bool:
        """
        Try to solve a column or the final solution.

        A correct guess uncovers the target.

        Raises:
            KeyError: If target is neither a column label nor "Sol"
            ValueError: If the target may not be guessed yet
        """
        if not self.can_guess(target):
            raise ValueError(f"{target} cannot be guessed now")
        correct = is_acceptable(guess, self.table.solution(target))
        if correct:
            self._open(target)
        logger.info("Guess for %s %s", target, "accepted" if correct else "rejected")
        return correct

    def give_up(self, target: str) -> str:
        """
        Uncover a column or the final solution without solving it.

        Raises:
            KeyError: If target is neither a column label nor "Sol"
            ValueError: If giving up on the target is not allowed yet
        """
        if not self.can_give_up(target):
            raise ValueError(f"Cannot give up on {target} now")
        logger.info("Gave up on %s", target)
        return self._open(target)

    def is_finished(self) -> bool:
        """Whether the final solution has been uncovered."""
        return self.final_open

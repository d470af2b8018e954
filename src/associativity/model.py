"""
Associations Table Model

Defines the validated, in-memory form of an associations game table.

An associations table consists of:
    - A 4 × 4 grid of cells (rows "1"–"4", columns "A"–"D")
    - An answer list for every column
    - An answer list for the final solution ("Sol")
    - A shuffle flag for every column and for the final solution

ARCHITECTURAL RULE:
    These objects:
        - Know nothing about CSV
        - Are plain values produced by one read
        - Are fully serializable
"""

from dataclasses import dataclass, field
from typing import Dict, List

from .config import COLUMN_LABELS, ROW_LABELS, SOLUTION_LABEL, cell_label


@dataclass
class AssociationsTable:
    """
    Root container of one associations game table.

    Properties:
        cells:
            Cell values keyed by cell label (column + row)
            Example: {"A1": "apple", ..., "D4": "door"}

        columns:
            Answers of each column keyed by column label
            Index 0 is the canonical answer, the rest are alternates
            in the order they were read

        final:
            Answers of the final solution, same shape as a column's

        shuffle:
            Shuffle permission keyed by column label and "Sol"
            For a column: its cells may be permuted
            For "Sol": whole columns may be permuted

    INVARIANTS (guaranteed by the validator):
        - cells has exactly 16 entries
        - columns has exactly the keys "A"–"D"
        - shuffle has exactly the keys "A"–"D" and "Sol"
    """

    cells: Dict[str, str] = field(default_factory=dict)
    columns: Dict[str, List[str]] = field(default_factory=dict)
    final: List[str] = field(default_factory=list)
    shuffle: Dict[str, bool] = field(default_factory=dict)

    def cell(self, row: str, column: str) -> str:
        """
        Retrieve a cell value by its row and column labels.

        Raises:
            KeyError: If the cell does not exist
        """
        return self.cells[cell_label(row, column)]

    def column(self, column: str) -> List[str]:
        """Answers of a column."""
        return self.columns[column]

    def column_cells(self, column: str) -> List[str]:
        """The four cell values of a column, top to bottom."""
        if column not in COLUMN_LABELS:
            raise KeyError(column)
        return [self.cells[cell_label(row, column)] for row in ROW_LABELS]

    def solution(self, label: str) -> List[str]:
        """
        Answers of a solution track.

        Args:
            label: Column label or "Sol"
        """
        if label == SOLUTION_LABEL:
            return self.final
        return self.columns[label]

    def shuffle_allowed(self, label: str) -> bool:
        """Shuffle permission of a column or of the final solution ("Sol")."""
        return self.shuffle[label]

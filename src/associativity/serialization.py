"""
Serialization helpers for AssociationsTable and GameState.

Provides lossless JSON/YAML round-trip via intermediate dict representation,
plus the flat label mapping ("A1", "A", "AShuffle", ...) used by callers that
address every part of a table by a single string key.
"""
from __future__ import annotations

import json
from typing import Any, Dict

import yaml

from associativity.config import COLUMN_LABELS, SOLUTION_LABEL, shuffle_label, track_labels
from associativity.game import GameState
from associativity.model import AssociationsTable


def table_to_dict(t: AssociationsTable) -> Dict[str, Any]:
    return {
        "cells": dict(t.cells),
        "columns": {label: list(answers) for label, answers in t.columns.items()},
        "final": list(t.final),
        "shuffle": dict(t.shuffle),
    }


def table_from_dict(d: Dict[str, Any]) -> AssociationsTable:
    return AssociationsTable(
        cells=dict(d.get("cells", {})),
        columns={label: list(answers) for label, answers in d.get("columns", {}).items()},
        final=list(d.get("final", [])),
        shuffle={label: bool(flag) for label, flag in d.get("shuffle", {}).items()},
    )


def table_to_json(t: AssociationsTable) -> str:
    return json.dumps(table_to_dict(t), sort_keys=True)


def table_from_json(s: str) -> AssociationsTable:
    return table_from_dict(json.loads(s))


def table_to_yaml(t: AssociationsTable) -> str:
    return yaml.safe_dump(table_to_dict(t), allow_unicode=True)


def table_from_yaml(s: str) -> AssociationsTable:
    return table_from_dict(yaml.safe_load(s))


def table_to_labels(t: AssociationsTable) -> Dict[str, Any]:
    """
    Flatten a table into a single label-keyed mapping.

    Keys:
        "A1".."D4"              cell values
        "A".."D", "Sol"         answer lists
        "AShuffle".."SolShuffle" shuffle flags
    """
    labels: Dict[str, Any] = dict(t.cells)
    for column in COLUMN_LABELS:
        labels[column] = list(t.columns[column])
    labels[SOLUTION_LABEL] = list(t.final)
    for label in track_labels():
        labels[shuffle_label(label)] = t.shuffle[label]
    return labels


def game_state_to_dict(g: GameState) -> Dict[str, Any]:
    return {
        "table": table_to_dict(g.table),
        "open_cells": sorted(g.open_cells),
        "open_columns": sorted(g.open_columns),
        "final_open": g.final_open,
    }


def game_state_from_dict(d: Dict[str, Any]) -> GameState:
    return GameState(
        table=table_from_dict(d["table"]),
        open_cells=set(d.get("open_cells", [])),
        open_columns=set(d.get("open_columns", [])),
        final_open=bool(d.get("final_open", False)),
    )


def game_state_to_json(g: GameState) -> str:
    return json.dumps(game_state_to_dict(g), sort_keys=True)


def game_state_from_json(s: str) -> GameState:
    return game_state_from_dict(json.loads(s))

"""Reads the gain/loss-to-value configuration from a CSV file.

File layout (two header rows, then data):

    Profit,Profit,Cost,Cost
    Gain/Loss,Value,Gain/Loss,Value
    -50,40,-20,10
    0,0,0,0
    50,-10,-,

Every goal owns exactly two columns, in any order, identified by the
second header. A ``-`` in a goal's Gain/Loss cell skips that goal for the
row, so goals may have different numbers of points.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

import pandas as pd

from vbgp.config import ReaderConfig
from vbgp.configuration.errors import ConfigurationFileError
from vbgp.configuration.mapping import MappingPoint
from vbgp.configuration.registry import VBGPConfiguration

logger = logging.getLogger(__name__)

# Rows before the first data row
HEADER_ROW_COUNT = 2

# Each goal must own exactly this many columns
COLUMNS_PER_GOAL = 2


@dataclass
class GoalColumns:
    """Column positions (0-based) belonging to one goal."""
    gain_or_loss_index: int = -1
    value_index: int = -1
    all_indices: list[int] = field(default_factory=list)


def _load_table(path: Path, config: ReaderConfig) -> pd.DataFrame:
    """Load every cell of the file as a string, without any header inference."""
    try:
        return pd.read_csv(
            path,
            header=None,
            dtype=str,
            sep=config.delimiter,
            encoding=config.encoding,
            keep_default_na=False,
            na_values=[],
            skip_blank_lines=True,
        )
    except pd.errors.EmptyDataError as e:
        raise ConfigurationFileError(path, "Missing first CSV header") from e
    except pd.errors.ParserError as e:
        raise ConfigurationFileError(path, f"Invalid number of fields: {e}") from e
    except UnicodeDecodeError as e:
        raise ConfigurationFileError(path, f"Invalid {config.encoding} text: {e}") from e


def _row_cells(path: Path, table: pd.DataFrame, row_index: int) -> list[str]:
    """Return a row's cells, rejecting rows shorter than the first header."""
    cells = table.iloc[row_index].tolist()
    present = sum(1 for cell in cells if isinstance(cell, str))
    if present != len(cells):
        raise ConfigurationFileError(
            path,
            f"Invalid number of fields, expecting {len(cells)}, but received {present}",
            row=row_index + 1,
        )
    return cells


def _parse_goal_columns(path: Path, names: list[str]) -> dict[str, GoalColumns]:
    """Group columns by the goal named in the first header row."""
    if len(names) % 2 == 1:
        raise ConfigurationFileError(
            path, "There is odd number of fields, but it must be even", row=1
        )

    goal_columns: dict[str, GoalColumns] = {}
    for index, goal_name in enumerate(names):
        if not goal_name:
            raise ConfigurationFileError(
                path, f"Invalid goal name in the column #{index + 1}", row=1
            )
        columns = goal_columns.setdefault(goal_name, GoalColumns())
        columns.all_indices.append(index)
        if len(columns.all_indices) > COLUMNS_PER_GOAL:
            raise ConfigurationFileError(
                path, f"Too many columns for the goal '{goal_name}'", row=1, goal_name=goal_name
            )

    for goal_name, columns in goal_columns.items():
        if len(columns.all_indices) < COLUMNS_PER_GOAL:
            raise ConfigurationFileError(
                path, f"Too few columns for the goal '{goal_name}'", row=1, goal_name=goal_name
            )

    return goal_columns


def _assign_column_roles(
    path: Path,
    goal_columns: dict[str, GoalColumns],
    roles: list[str],
    config: ReaderConfig,
) -> None:
    """Resolve which of a goal's columns is Gain/Loss and which is Value."""
    for goal_name, columns in goal_columns.items():
        for index in columns.all_indices:
            role = roles[index]
            if role == config.gain_or_loss_column:
                if columns.gain_or_loss_index >= 0:
                    _report_invalid_column(path, goal_name, index, role, "Duplicate")
                columns.gain_or_loss_index = index
            elif role == config.value_column:
                if columns.value_index >= 0:
                    _report_invalid_column(path, goal_name, index, role, "Duplicate")
                columns.value_index = index
            else:
                _report_invalid_column(path, goal_name, index, role, "Unrecognized")


def _report_invalid_column(path: Path, goal_name: str, index: int, name: str, error_type: str):
    raise ConfigurationFileError(
        path,
        f"{error_type} column '{name}' in the column #{index + 1} for the goal '{goal_name}'",
        row=2,
        goal_name=goal_name,
    )


def _parse_float(path: Path, text: str, row: int, column_index: int) -> float:
    try:
        return float(text)
    except ValueError as e:
        raise ConfigurationFileError(
            path,
            f"Invalid floating point number in the column #{column_index + 1}: {e}",
            row=row,
        ) from e


def read_elements(
    path: Union[str, Path],
    config: Optional[ReaderConfig] = None,
) -> dict[str, list[MappingPoint]]:
    """
    Read raw per-goal mapping elements from a CSV file.

    Args:
        path: CSV file path
        config: File layout; defaults to ReaderConfig()

    Returns:
        Raw ``(argument, value)`` points in percent units per goal, in the
        order goals first appear in the header

    Raises:
        ConfigurationFileError: The file layout or a cell is invalid
    """
    config = config or ReaderConfig()
    path = Path(path)

    table = _load_table(path, config)
    if len(table.index) < 1:
        raise ConfigurationFileError(path, "Missing first CSV header")

    names = _row_cells(path, table, 0)
    goal_columns = _parse_goal_columns(path, names)

    if len(table.index) < HEADER_ROW_COUNT:
        raise ConfigurationFileError(path, "Missing second CSV header")

    roles = _row_cells(path, table, 1)
    _assign_column_roles(path, goal_columns, roles, config)

    elements: dict[str, list[MappingPoint]] = {name: [] for name in goal_columns}
    for row_index in range(HEADER_ROW_COUNT, len(table.index)):
        cells = _row_cells(path, table, row_index)
        for goal_name, columns in goal_columns.items():
            argument_text = cells[columns.gain_or_loss_index].strip()
            if argument_text == config.skip_marker:
                continue
            argument = _parse_float(path, argument_text, row_index + 1, columns.gain_or_loss_index)
            value = _parse_float(
                path, cells[columns.value_index].strip(), row_index + 1, columns.value_index
            )
            elements[goal_name].append(MappingPoint(argument, value))

    logger.debug(
        f"Read {sum(len(points) for points in elements.values())} mapping points "
        f"for {len(elements)} goals from '{path}'"
    )
    return elements


def read_configuration(
    path: Union[str, Path],
    config: Optional[ReaderConfig] = None,
) -> VBGPConfiguration:
    """
    Read and validate the gain/loss-to-value configuration from a CSV file.

    Args:
        path: CSV file path
        config: File layout; defaults to ReaderConfig()

    Returns:
        Validated VBGPConfiguration

    Raises:
        ConfigurationFileError: The file layout or a cell is invalid
        VBGPConfigurationError: A goal's mapping fails validation
    """
    logger.info(f"VBGP: Reading configuration from the file '{path}'")
    return VBGPConfiguration(read_elements(path, config))

"""Configuration for reading gain/loss-to-value tables from CSV."""
from dataclasses import dataclass

# Second-header column names identifying each goal's two columns
GAIN_OR_LOSS_COLUMN_NAME = "Gain/Loss"
VALUE_COLUMN_NAME = "Value"

# A Gain/Loss cell holding only this marker skips the goal for that row,
# letting goals with fewer points share a file with longer ones
SKIP_MARKER = "-"


@dataclass
class ReaderConfig:
    """Layout of a gain/loss-to-value CSV file.

    The first header row names the goal owning each column (every goal
    appears in exactly two columns), the second header row names the
    column role. Remaining rows are data.
    """

    gain_or_loss_column: str = GAIN_OR_LOSS_COLUMN_NAME
    value_column: str = VALUE_COLUMN_NAME
    skip_marker: str = SKIP_MARKER
    delimiter: str = ","
    encoding: str = "utf-8"

    def __post_init__(self):
        if not self.gain_or_loss_column or not self.value_column:
            raise ValueError("Column names must be non-empty")
        if self.gain_or_loss_column == self.value_column:
            raise ValueError(
                f"Gain/loss and value columns must differ, both are '{self.value_column}'"
            )
        if len(self.delimiter) != 1:
            raise ValueError(f"Delimiter must be a single character, got {self.delimiter!r}")

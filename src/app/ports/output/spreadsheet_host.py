from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Sequence

from src.domain.models import CellEdit

CellChangedHandler = Callable[[CellEdit], Any]


class ISpreadsheetHost(ABC):
    """Port for the spreadsheet the add-on lives in.

    Rows and columns are 1-based, as in the spreadsheet UI.
    """

    @abstractmethod
    def read_cell(self, sheet: str, row: int, column: int) -> Any:
        raise NotImplementedError

    @abstractmethod
    def read_range(
        self, sheet: str, row: int, column: int, num_rows: int, num_columns: int
    ) -> list[list[Any]]:
        raise NotImplementedError

    @abstractmethod
    def write_range(
        self, sheet: str, row: int, column: int, values: Sequence[Sequence[Any]]
    ) -> None:
        raise NotImplementedError

    @abstractmethod
    def clear_range(
        self, sheet: str, row: int, column: int, num_rows: int, num_columns: int
    ) -> None:
        raise NotImplementedError

    @abstractmethod
    def max_row(self, sheet: str) -> int:
        """Last row that may hold data in the sheet."""

    @abstractmethod
    def sheet_names(self) -> list[str]:
        raise NotImplementedError

    @abstractmethod
    def create_sheet(self, name: str) -> None:
        """Create an output sheet named exactly `name`."""

    @abstractmethod
    def set_constrained_choice(
        self,
        sheet: str,
        row: int,
        column: int,
        source_sheet: str,
        source_row: int,
        source_column: int,
        num_rows: int,
    ) -> None:
        """Restrict a cell to the values of a single-column range (a dropdown).

        The range starts at (`source_row`, `source_column`) of `source_sheet` and
        spans `num_rows` rows; `num_rows <= 0` leaves the cell unconstrained.
        """

    @abstractmethod
    def clear_constrained_choice(self, sheet: str, row: int, column: int) -> None:
        raise NotImplementedError

    @abstractmethod
    def subscribe_cell_changed(self, handler: CellChangedHandler) -> None:
        raise NotImplementedError

    @abstractmethod
    def edit_cell(self, sheet: str, row: int, column: int, value: Any) -> list[Any]:
        """Apply a user edit and notify subscribers; returns their results."""

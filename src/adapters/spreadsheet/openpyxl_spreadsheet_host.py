from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Sequence

from openpyxl import Workbook, load_workbook
from openpyxl.utils import get_column_letter, range_boundaries
from openpyxl.worksheet.datavalidation import DataValidation
from openpyxl.worksheet.worksheet import Worksheet

from src.app.ports.output import CellChangedHandler, ISpreadsheetHost
from src.domain.models import CellEdit

logger = logging.getLogger(__name__)


def _cell_ref(row: int, column: int) -> str:
    return f"{get_column_letter(column)}{row}"


def _range_formula(sheet: str, row: int, column: int, num_rows: int) -> str:
    # Excel caps inline list formulas at 255 chars; a cell range has no such cap.
    quoted = "'" + sheet.replace("'", "''") + "'"
    col = get_column_letter(column)
    return f"{quoted}!${col}${row}:${col}${row + num_rows - 1}"


def _split_range_formula(formula: str) -> tuple[str, str]:
    sheet, _, cells = formula.lstrip("=").rpartition("!")
    if sheet.startswith("'") and sheet.endswith("'"):
        sheet = sheet[1:-1].replace("''", "'")
    return sheet, cells


@dataclass(slots=True)
class OpenpyxlSpreadsheetHost(ISpreadsheetHost):
    """Spreadsheet host backed by an openpyxl workbook (.xlsx).

    The workbook lives in memory; `save()` writes it to `path`.
    """

    workbook: Workbook
    path: str | Path | None = None
    _handlers: list[CellChangedHandler] = field(default_factory=list, repr=False)

    @staticmethod
    def open(
        path: str | Path, *, ensure_sheets: Iterable[str] = ()
    ) -> "OpenpyxlSpreadsheetHost":
        p = Path(path)
        if p.exists():
            workbook = load_workbook(p)
        else:
            workbook = Workbook()
        host = OpenpyxlSpreadsheetHost(workbook=workbook, path=p)
        host.ensure_sheets(ensure_sheets)
        return host

    def ensure_sheets(self, names: Iterable[str]) -> None:
        names = list(names)
        default = self.workbook.active
        fresh = (
            len(self.workbook.worksheets) == 1
            and default is not None
            and default.max_row == 1
            and default.max_column == 1
            and default["A1"].value is None
        )
        for name in names:
            if name in self.workbook.sheetnames:
                continue
            if fresh and default is not None and default.title not in names:
                # Reuse the blank default sheet of a new workbook.
                default.title = name
                fresh = False
                continue
            self.workbook.create_sheet(title=name)

    def save(self, path: str | Path | None = None) -> None:
        if not (path or self.path):
            raise RuntimeError("No workbook path configured")
        target = Path(path or self.path)  # type: ignore[arg-type]
        target.parent.mkdir(parents=True, exist_ok=True)
        self.workbook.save(target)
        logger.debug("Saved workbook to %s", target)

    def _sheet(self, name: str) -> Worksheet:
        if name not in self.workbook.sheetnames:
            raise KeyError(f"Sheet not found: {name}")
        return self.workbook[name]

    def read_cell(self, sheet: str, row: int, column: int) -> Any:
        return self._sheet(sheet).cell(row=row, column=column).value

    def read_range(
        self, sheet: str, row: int, column: int, num_rows: int, num_columns: int
    ) -> list[list[Any]]:
        ws = self._sheet(sheet)
        if num_rows <= 0 or num_columns <= 0:
            return []
        return [
            list(r)
            for r in ws.iter_rows(
                min_row=row,
                max_row=row + num_rows - 1,
                min_col=column,
                max_col=column + num_columns - 1,
                values_only=True,
            )
        ]

    def write_range(
        self, sheet: str, row: int, column: int, values: Sequence[Sequence[Any]]
    ) -> None:
        ws = self._sheet(sheet)
        for r_off, row_values in enumerate(values):
            for c_off, value in enumerate(row_values):
                ws.cell(row=row + r_off, column=column + c_off, value=value)

    def clear_range(
        self, sheet: str, row: int, column: int, num_rows: int, num_columns: int
    ) -> None:
        ws = self._sheet(sheet)
        for r in range(row, row + num_rows):
            for c in range(column, column + num_columns):
                ws.cell(row=r, column=c).value = None

    def max_row(self, sheet: str) -> int:
        return self._sheet(sheet).max_row

    def sheet_names(self) -> list[str]:
        return list(self.workbook.sheetnames)

    def create_sheet(self, name: str) -> None:
        ws = self.workbook.create_sheet(title=name)
        if ws.title != name:
            # openpyxl renames on case-insensitive clashes; the caller asked for
            # an exact name.
            self.workbook.remove(ws)
            raise ValueError(f"Sheet name already in use: {name}")

    def _validations_at(self, ws: Worksheet, ref: str) -> list[DataValidation]:
        return [dv for dv in ws.data_validations.dataValidation if ref in dv.sqref]

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
        ws = self._sheet(sheet)
        ref = _cell_ref(row, column)
        self.clear_constrained_choice(sheet, row, column)
        if num_rows <= 0:
            return
        dv = DataValidation(
            type="list",
            formula1=_range_formula(source_sheet, source_row, source_column, num_rows),
            allow_blank=True,
            showDropDown=False,
            showErrorMessage=True,
        )
        ws.add_data_validation(dv)
        dv.add(ref)

    def clear_constrained_choice(self, sheet: str, row: int, column: int) -> None:
        ws = self._sheet(sheet)
        ref = _cell_ref(row, column)
        for dv in self._validations_at(ws, ref):
            try:
                dv.sqref.remove(ref)
            except (KeyError, ValueError):
                # Rule spans a wider range the user set up; leave it alone.
                continue
            if not dv.sqref.ranges:
                ws.data_validations.dataValidation.remove(dv)

    def constrained_choices(self, sheet: str, row: int, column: int) -> list[str]:
        """Values offered by the list rule on a cell (empty when unconstrained)."""
        ws = self._sheet(sheet)
        for dv in self._validations_at(ws, _cell_ref(row, column)):
            source, cells = _split_range_formula((dv.formula1 or "").strip())
            min_col, min_row, max_col, max_row = range_boundaries(cells)
            values = self.read_range(
                source, min_row, min_col, max_row - min_row + 1, max_col - min_col + 1
            )
            return [str(v) for r in values for v in r if v not in (None, "")]
        return []

    def subscribe_cell_changed(self, handler: CellChangedHandler) -> None:
        self._handlers.append(handler)

    def edit_cell(self, sheet: str, row: int, column: int, value: Any) -> list[Any]:
        self._sheet(sheet).cell(row=row, column=column).value = value
        edit = CellEdit(sheet=sheet, row=row, column=column, value=value)
        return [handler(edit) for handler in self._handlers]

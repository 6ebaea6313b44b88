from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Sequence

from src.app.ports.output import ISpreadsheetHost, IStationCache
from src.app.services.input_layout import InputLayout
from src.domain.models import Station


def _text(value: Any) -> str:
    return "" if value is None else str(value).strip()


@dataclass(slots=True)
class SheetStationCache(IStationCache):
    """Station lookup table kept in the workbook's data sheet.

    Each input slot owns a (name, code) column pair; rows start below the
    header row. Lookups scan every slot. The slot's input cell carries a
    dropdown over the cached names, kept in step with every write.
    """

    host: ISpreadsheetHost
    layout: InputLayout = field(default_factory=InputLayout)

    def _rows(self) -> list[list[Any]]:
        sheet = self.layout.data_sheet
        first = self.layout.data_first_row
        height = self.host.max_row(sheet) - first + 1
        return self.host.read_range(sheet, first, 1, height, self.layout.slots * 2)

    def entries(self) -> list[Station]:
        out: list[Station] = []
        rows = self._rows()
        for slot in range(self.layout.slots):
            name_col, code_col = self.layout.data_columns(slot)
            for row in rows:
                name = _text(row[name_col - 1])
                code = _text(row[code_col - 1])
                if name and code:
                    out.append(Station(name=name, code=code))
        return out

    def find(self, name: str) -> Station | None:
        query = name.strip()
        if not query:
            return None
        entries = self.entries()
        for station in entries:
            if station.name == query:
                return station
        for station in entries:
            if query in station.name:
                return station
        return None

    def replace(self, slot: int, stations: Sequence[Station]) -> None:
        self.clear(slot)
        if not stations:
            return
        layout = self.layout
        name_col, _ = layout.data_columns(slot)
        self.host.write_range(
            layout.data_sheet,
            layout.data_first_row,
            name_col,
            [[s.name, s.code] for s in stations],
        )
        # The slot's input cell offers exactly the names just written.
        self.host.set_constrained_choice(
            layout.input_sheet,
            layout.row_for(slot),
            layout.input_column,
            layout.data_sheet,
            layout.data_first_row,
            name_col,
            len(stations),
        )

    def clear(self, slot: int) -> None:
        layout = self.layout
        self.host.clear_constrained_choice(
            layout.input_sheet, layout.row_for(slot), layout.input_column
        )
        sheet = layout.data_sheet
        first = layout.data_first_row
        height = self.host.max_row(sheet) - first + 1
        if height <= 0:
            return
        name_col, _ = layout.data_columns(slot)
        self.host.clear_range(sheet, first, name_col, height, 2)

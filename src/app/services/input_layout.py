from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class InputLayout:
    """Where the add-on reads stop names and caches station candidates.

    Input: `slots` consecutive rows of `input_column` starting at `first_row`
    (origin, waypoint 1, waypoint 2, destination).
    Data sheet: slot n keeps candidate names/codes in columns 2n+1 and 2n+2,
    from `data_first_row` down.
    """

    input_sheet: str = "Route Input"
    input_column: int = 2
    first_row: int = 1
    slots: int = 4
    data_sheet: str = "Station Data"
    data_first_row: int = 2

    def slot_for(self, row: int, column: int) -> int | None:
        if column != self.input_column:
            return None
        slot = row - self.first_row
        if 0 <= slot < self.slots:
            return slot
        return None

    def row_for(self, slot: int) -> int:
        return self.first_row + slot

    def slot_for_stop(self, index: int, count: int) -> int:
        """Slot of the `index`-th (1-based) of `count` stops.

        The last stop is always the destination row, so a short list such as
        (origin, destination) never lands on a waypoint slot.
        """
        if index == count:
            return self.slots - 1
        return index - 1

    def data_columns(self, slot: int) -> tuple[int, int]:
        name_col = slot * 2 + 1
        return name_col, name_col + 1

from __future__ import annotations

import string

from location_service.domain.location import SeatSpec

_LETTERS = string.ascii_uppercase


def row_label(index: int) -> str:
    """
    Spreadsheet-column style label for a zero-based row index.

    0 -> "A", 25 -> "Z", 26 -> "AA", 701 -> "ZZ", 702 -> "AAA".
    """
    if index < 0:
        raise ValueError("row index must be >= 0")

    label = ""
    index += 1
    while index > 0:
        index, remainder = divmod(index - 1, 26)
        label = _LETTERS[remainder] + label
    return label


class SeatLayoutGenerator:
    """
    Partition a number of seats into rows and gates.

    - Seats are spread evenly over rows; the first `seat_count % row_count`
      rows get one extra seat
    - Rows are grouped into gates in contiguous blocks of
      ceil(row_count / gate_count) rows
    - Seat numbers restart at "1" in every row

    Inputs are expected to be validated upstream (see SeatCountValidator).
    A non-positive input is the "no seats" request and yields an empty layout.
    """

    def generate(self, seat_count: int, row_count: int, gate_count: int) -> list[SeatSpec]:
        if seat_count <= 0 or row_count <= 0 or gate_count <= 0:
            return []

        base_seats_per_row, extra_seats = divmod(seat_count, row_count)
        rows_per_gate = -(-row_count // gate_count)  # ceil division

        seats: list[SeatSpec] = []
        for row_index in range(row_count):
            row = row_label(row_index)
            seats_in_row = base_seats_per_row + (1 if row_index < extra_seats else 0)
            gate = str(row_index // rows_per_gate + 1)

            seats.extend(
                SeatSpec(seat_number=str(number), row=row, gate=gate)
                for number in range(1, seats_in_row + 1)
            )

        return seats

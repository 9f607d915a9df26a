# backend/utils/data_store.py

from typing import Any, Dict, Iterable, Mapping, Tuple

Row = Mapping[str, Any]


class DataStore:
    """
    Holds the raw dataset for one session.
    The rows are swapped in one assignment and never mutated in place,
    so readers always see either the old snapshot or the new one.
    """

    def __init__(self) -> None:
        self._rows: Tuple[Row, ...] = ()

    def store_data(self, rows: Iterable[Dict[str, Any]]) -> None:
        self._rows = tuple(rows)

    def get_data(self) -> Tuple[Row, ...]:
        return self._rows

    def __len__(self) -> int:
        return len(self._rows)

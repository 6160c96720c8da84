"""In-memory songlist model."""

from __future__ import annotations

from collections.abc import Iterable

Row = dict[str, str]

ROW_ID_KEY = "id"
HIDDEN_COLUMNS = frozenset({ROW_ID_KEY, "uri"})


class Songlist:
    """A named, identified sequence of rows with a cursor.

    Rows are plain string mappings. The row identity lives under
    ``ROW_ID_KEY``; every other key is a column.
    """

    def __init__(self, rows: Iterable[Row] = (), *, name: str = "", list_id: str = "") -> None:
        self.name = name
        self.id = list_id
        self.visible_columns: list[str] = []
        self._rows: list[Row] = list(rows)
        self._cursor = 0

    def __len__(self) -> int:
        return len(self._rows)

    def __repr__(self) -> str:
        return f"Songlist(id={self.id!r}, name={self.name!r}, rows={len(self._rows)})"

    @property
    def rows(self) -> list[Row]:
        return list(self._rows)

    @property
    def cursor(self) -> int:
        return self._cursor

    def add(self, row: Row) -> None:
        self._rows.append(row)

    def row(self, index: int) -> Row | None:
        if 0 <= index < len(self._rows):
            return self._rows[index]
        return None

    def cursor_row(self) -> Row | None:
        return self.row(self._cursor)

    def index_of(self, row_id: str) -> int | None:
        for index, row in enumerate(self._rows):
            if row.get(ROW_ID_KEY) == row_id:
                return index
        return None

    def set_cursor(self, index: int) -> None:
        """Move the cursor to ``index``, clamped to the list bounds."""

        last = len(self._rows) - 1
        self._cursor = max(0, min(index, last))

    def move_cursor(self, delta: int) -> None:
        self.set_cursor(self._cursor + delta)

    def column_names(self) -> list[str]:
        names: dict[str, None] = {}
        for row in self._rows:
            for key in row:
                if key not in HIDDEN_COLUMNS:
                    names.setdefault(key, None)
        return list(names)

    def set_visible_columns(self, columns: Iterable[str]) -> None:
        self.visible_columns = [column.strip() for column in columns if column.strip()]

    def sort(self, columns: Iterable[str]) -> None:
        """Sort rows by ``columns``, first column most significant.

        Comparison is case-insensitive; rows missing a column sort first.
        The row under the cursor keeps the cursor.
        """

        keys = [column.strip() for column in columns if column.strip()]
        if not keys:
            return
        selected = self.cursor_row()
        for column in reversed(keys):
            self._rows.sort(key=lambda row, column=column: row.get(column, "").casefold())
        if selected is not None:
            self._cursor = next(i for i, row in enumerate(self._rows) if row is selected)

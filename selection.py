from enum import Enum


class SelectionDimension:
    """Cursor over one axis (rows or columns), clamped to ``[0, bound)``.

    The index is relative to the loaded window and has nothing to do with the
    record number in the data. With ``bound == 0`` the index reads as absent;
    the parked position comes back once the bound grows again.
    """

    def __init__(self, index: int | None = None, bound: int = 0):
        self._index = None
        self.bound = max(0, bound)
        if index is not None:
            self.set_index(index)

    @property
    def index(self) -> int | None:
        if self.bound == 0:
            return None
        return self._index

    def set_index(self, index: int):
        self._index = max(0, min(index, self.bound - 1))

    def set_bound(self, bound: int):
        self.bound = max(0, bound)
        if self._index is not None:
            self.set_index(self._index)

    def select_next(self):
        if self.index is not None:
            self.set_index(self.index + 1)

    def select_previous(self):
        if self.index is not None:
            self.set_index(self.index - 1)

    def select_first(self):
        if self.index is not None:
            self.set_index(0)

    def select_last(self):
        if self.index is not None:
            self.set_index(self.bound - 1)

    def is_selected(self, i: int) -> bool:
        return self.index is not None and self.index == i

    def __repr__(self):
        return f"SelectionDimension(index={self.index!r}, bound={self.bound})"


class SelectionType(Enum):
    ROW = "row"
    COLUMN = "column"
    CELL = "cell"
    NONE = "none"


class Selection:
    def __init__(self, row: SelectionDimension, column: SelectionDimension):
        self.row = row
        self.column = column

    @classmethod
    def default(cls, row_bound: int) -> "Selection":
        # column focus only appears once the view knows how wide a row is
        return cls(
            row=SelectionDimension(index=0, bound=row_bound),
            column=SelectionDimension(index=None, bound=0),
        )

    def selection_type(self) -> SelectionType:
        has_row = self.row.index is not None
        has_col = self.column.index is not None
        if has_row and has_col:
            return SelectionType.CELL
        if has_row:
            return SelectionType.ROW
        if has_col:
            return SelectionType.COLUMN
        return SelectionType.NONE

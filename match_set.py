import numpy as np
import pandas as pd


class MatchSet:
    """Finder over row positions already produced by a search.

    Positions are absolute 0-based data rows, kept sorted and unique so a
    window into the match set maps to a window of rows in file order.
    """

    def __init__(self, positions=None):
        if positions is None:
            positions = []
        arr = np.asarray(positions, dtype=np.int64).ravel()
        if arr.size and arr.min() < 0:
            raise ValueError("Row positions must be non-negative")
        self._positions = np.unique(arr)

    @classmethod
    def from_mask(cls, mask) -> "MatchSet":
        if isinstance(mask, pd.Series):
            mask = mask.to_numpy(dtype=bool, na_value=False)
        else:
            mask = np.asarray(mask, dtype=bool)
        return cls(np.flatnonzero(mask))

    def count(self) -> int:
        return int(self._positions.size)

    def get_subset_found(self, start: int, count: int) -> list[int]:
        start = max(0, start)
        end = start + max(0, count)
        return self._positions[start:end].tolist()

    def __len__(self):
        return self.count()

    def __repr__(self):
        return f"MatchSet(count={self.count()})"

from dataclasses import dataclass, field
from typing import List, Sequence


@dataclass
class Row:
    record_num: int
    fields: List[str] = field(default_factory=list)

    def subset(self, indices: Sequence[int]) -> "Row":
        """Keep only the fields at ``indices``, in that order.

        Indices past the end of a short (ragged) row are skipped.
        """
        n = len(self.fields)
        return Row(
            record_num=self.record_num,
            fields=[self.fields[i] for i in indices if 0 <= i < n],
        )


def subset_columns(rows: Sequence[Row], indices: Sequence[int]) -> List[Row]:
    return [row.subset(indices) for row in rows]

"""
Grid index for adjacency lookups.

Groups node ids into per-column lists ordered by row and per-row lists
ordered by column. The index is rebuilt from scratch whenever the node set
changes and is passed explicitly to the route planner.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from .models import Node


@dataclass
class GridIndex:
    """
    Ordered column and row buckets of node ids.

    Attributes:
        columns: Column index -> node ids sorted by ascending row.
        rows: Row index -> node ids sorted by ascending column.
    """

    columns: Dict[int, List[str]] = field(default_factory=dict)
    rows: Dict[int, List[str]] = field(default_factory=dict)

    @classmethod
    def build(cls, nodes: Iterable[Node]) -> "GridIndex":
        """
        Build the index from a node collection.

        Sorting is stable, so nodes sharing a row (or column) keep their
        input order.
        """
        nodes = list(nodes)
        columns: Dict[int, List[Node]] = {}
        rows: Dict[int, List[Node]] = {}

        for node in nodes:
            columns.setdefault(node.col, []).append(node)
            rows.setdefault(node.row, []).append(node)

        return cls(
            columns={
                col: [n.id for n in sorted(bucket, key=lambda n: n.row)]
                for col, bucket in columns.items()
            },
            rows={
                row: [n.id for n in sorted(bucket, key=lambda n: n.col)]
                for row, bucket in rows.items()
            },
        )

    def column_adjacent(self, source: Node, target: Node) -> bool:
        """True if target immediately precedes or follows source in its column."""
        return _adjacent(self.columns.get(source.col, []), source.id, target.id)

    def row_adjacent(self, source: Node, target: Node) -> bool:
        """True if target immediately precedes or follows source in its row."""
        return _adjacent(self.rows.get(source.row, []), source.id, target.id)


def _adjacent(bucket: List[str], source_id: str, target_id: str) -> bool:
    if source_id not in bucket:
        return False
    position = bucket.index(source_id)
    neighbours = bucket[max(position - 1, 0) : position] + bucket[
        position + 1 : position + 2
    ]
    return target_id in neighbours

"""
Graph Store: adjacency-list directed multigraph over dense integer node ids.
Built once (see build_graph_store), then frozen and shared read-only by every analysis.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Sequence


@dataclass
class GraphStore:
    """
    Directed multigraph with nodes 0..node_count-1.
    Duplicate edges are kept; successor order is insertion order.
    freeze() turns each successor list into a tuple, so neighbor sequences
    handed out by a frozen store cannot change it.
    """

    _successors: list[Sequence[int]] = field(default_factory=list)
    _edge_count: int = 0
    _frozen: bool = False

    def add_node(self) -> int:
        """Append a node and return its id."""
        self._check_mutable()
        self._successors.append([])
        return len(self._successors) - 1

    def add_edge(self, source: int, target: int) -> None:
        self._check_mutable()
        self._check_node(source)
        self._check_node(target)
        self._successors[source].append(target)
        self._edge_count += 1

    def node_count(self) -> int:
        return len(self._successors)

    def edge_count(self) -> int:
        return self._edge_count

    def out_neighbors(self, node: int) -> Sequence[int]:
        """Targets of edges from node, duplicates included (insertion order)."""
        self._check_node(node)
        return self._successors[node]

    def out_degree(self, node: int) -> int:
        self._check_node(node)
        return len(self._successors[node])

    def nodes(self) -> Iterator[tuple[int, int]]:
        """(enumeration_index, node_id) pairs in creation order."""
        return enumerate(range(len(self._successors)))

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> GraphStore:
        """Disallow further mutation; returns self."""
        if not self._frozen:
            self._successors = [tuple(succ) for succ in self._successors]
        self._frozen = True
        return self

    def _check_mutable(self) -> None:
        if self._frozen:
            raise RuntimeError("GraphStore is frozen; it cannot be modified after construction")

    def _check_node(self, node: int) -> None:
        # bool is an int subclass but never a valid node id
        if isinstance(node, bool) or not 0 <= node < len(self._successors):
            raise IndexError(f"node {node!r} out of range [0, {len(self._successors)})")


def build_graph_store(
    edges: Iterable[tuple[int, int]],
    node_count: int | None = None,
) -> GraphStore:
    """
    Two-phase construction: size the node set from the largest endpoint seen,
    allocate every node, then insert edges in input order. The result is frozen.

    Every id below the maximum exists even if it never appears in an edge.
    node_count, when given and larger than max endpoint + 1, pads with isolated nodes.
    """
    edge_list = list(edges)
    highest = -1
    for source, target in edge_list:
        if source < 0 or target < 0:
            raise ValueError(f"negative node id in edge ({source}, {target})")
        highest = max(highest, source, target)

    total = highest + 1
    if node_count is not None:
        if node_count < 0:
            raise ValueError(f"node_count must be non-negative, got {node_count}")
        total = max(total, node_count)

    store = GraphStore(_successors=[[] for _ in range(total)])
    for source, target in edge_list:
        store.add_edge(source, target)
    return store.freeze()

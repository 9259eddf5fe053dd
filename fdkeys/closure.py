"""
Attribute closure X+ under a collection of functional dependencies.

Two strategies give identical results:

direct
    Repeated passes over the dependency list, adding the right side of every
    dependency whose left side is already contained, until a pass changes
    nothing.

graph
    Breadth-first propagation over a directed graph built once per
    collection. A dependency with a composite left side becomes a gate
    vertex that fires only after all of its left-side attributes have been
    reached, so hypergraph reachability reduces to ordinary BFS with
    per-vertex thresholds. Each query is linear in the total size of the
    dependencies, which pays off when the same collection is queried many
    times (as candidate key enumeration does).
"""

from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from .attributes import AttributeSet, letter
from .dependencies import FD, FDCollection
from .errors import ConfigError
from .log import get_logger

logger = get_logger(__name__)

STRATEGIES = ('graph', 'direct')
DEFAULT_STRATEGY = 'graph'


def closure_direct(X: AttributeSet, F: FDCollection) -> AttributeSet:
    """ Compute X+ with respect to F by fixpoint iteration over the dependency list. """
    n = F.attribute_count
    result = X
    changed = True
    while changed and not result.is_full(n):
        changed = False
        for fd in F:
            if result.contains(fd.lhs) and not result.contains(fd.rhs):
                result = result | fd.rhs
                changed = True
                if result.is_full(n):
                    break
    return result


class VertexKind(Enum):
    ATTRIBUTE = 'attribute'
    GATE = 'gate'


@dataclass
class Vertex:
    """ A vertex of the closure graph.

    An attribute vertex stands for one attribute and is reached by a single
    incoming edge. A gate vertex stands for a dependency with a composite
    left side and is reached once all `threshold` of its incoming edges
    have fired. """
    kind: VertexKind
    threshold: int
    fd: Optional[FD] = None
    targets: List[int] = field(default_factory=list)


class ClosureGraph:
    """ Threshold-gated reachability graph for one FDCollection.

    Vertices 0..n-1 are the attributes, gate vertices follow in dependency
    order. The graph is never modified by queries: visit counters live in
    each query's own frame. """

    def __init__(self, F: FDCollection):
        self.fds = F
        self.attribute_count = F.attribute_count
        self.vertices = [Vertex(VertexKind.ATTRIBUTE, 1) for _ in range(F.attribute_count)]
        self.n_edges = 0
        for fd in F:
            if fd.lhs.size > 1:
                gate = len(self.vertices)
                self.vertices.append(Vertex(VertexKind.GATE, fd.lhs.size, fd=fd))
                for a in fd.lhs:
                    self._add_edge(a, gate)
                for b in fd.rhs:
                    self._add_edge(gate, b)
            else:
                a = next(iter(fd.lhs))
                for b in fd.rhs:
                    self._add_edge(a, b)
        logger.debug('Built closure graph: %d vertices (%d gates), %d edges',
                     len(self.vertices), len(self.gates), self.n_edges)

    def _add_edge(self, i: int, j: int):
        self.vertices[i].targets.append(j)
        self.n_edges += 1

    @property
    def gates(self) -> List[Vertex]:
        return [v for v in self.vertices if v.kind is VertexKind.GATE]

    def closure(self, X: AttributeSet) -> AttributeSet:
        """ Compute X+ by threshold-gated breadth-first search. """
        n = self.attribute_count
        if X.is_full(n):
            return X
        vertices = self.vertices
        counters = [0] * len(vertices)
        queue = deque()
        mask = X.mask
        for a in X:
            counters[a] = 1
            queue.append(a)
        full = (1 << n) - 1
        while queue:
            current = queue.popleft()
            for neighbor in vertices[current].targets:
                thresh = vertices[neighbor].threshold
                if counters[neighbor] == thresh:
                    continue
                counters[neighbor] += 1
                if counters[neighbor] == thresh:
                    if neighbor < n:
                        mask |= 1 << neighbor
                        if mask == full:
                            return AttributeSet(mask)
                    queue.append(neighbor)
        return AttributeSet(mask)

    def _label(self, i: int) -> str:
        return letter(i) if i < self.attribute_count else str(i)

    def describe(self) -> str:
        """ Thresholds and adjacency lists, one vertex per line:
        'A (1) > B C' for attributes, '3 AB->C (2) > C' for gates. """
        lines = []
        for i, v in enumerate(self.vertices):
            line = self._label(i)
            if v.kind is VertexKind.GATE:
                line += ' ' + repr(v.fd)
            line += ' (' + str(v.threshold) + ') >'
            if v.targets:
                line += ' ' + ' '.join(self._label(j) for j in v.targets)
            lines.append(line)
        return '\n'.join(lines)


def check_strategy(strategy: str) -> str:
    if strategy not in STRATEGIES:
        raise ConfigError('Unknown closure strategy ' + repr(strategy) +
                          ', expected one of: ' + ', '.join(STRATEGIES))
    return strategy


class ClosureEngine:
    """ Answers closure and superkey queries against one FDCollection. """

    def __init__(self, F: FDCollection, strategy: str = DEFAULT_STRATEGY):
        self.fds = F
        self.attribute_count = F.attribute_count
        self.strategy = check_strategy(strategy)
        self.graph = ClosureGraph(F) if strategy == 'graph' else None

    def closure(self, X: AttributeSet) -> AttributeSet:
        if self.graph is not None:
            return self.graph.closure(X)
        return closure_direct(X, self.fds)

    def is_superkey(self, X: AttributeSet) -> bool:
        return self.closure(X).is_full(self.attribute_count)

    def query(self, X: AttributeSet) -> Tuple[AttributeSet, bool]:
        """ Return (X+, whether X is a superkey). """
        result = self.closure(X)
        return result, result.is_full(self.attribute_count)


def closure(X: AttributeSet, F: FDCollection, strategy: str = DEFAULT_STRATEGY) -> AttributeSet:
    """ Compute X+ with respect to F.
    i.e. Return the set of all attributes A such that X->A follows from F. """
    return ClosureEngine(F, strategy).closure(X)


def is_superkey(X: AttributeSet, F: FDCollection, strategy: str = DEFAULT_STRATEGY) -> bool:
    """ Return True iff X+ is the whole schema. """
    return ClosureEngine(F, strategy).is_superkey(X)

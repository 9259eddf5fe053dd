"""Reference implementations and schema generators for the fdkeys tests."""

import random
from itertools import combinations

from fdkeys import FD, AttributeSet, FDCollection


def all_subsets(n):
    """Every AttributeSet over n attributes."""
    return [AttributeSet(mask) for mask in range(1 << n)]


def reference_closure(X, F):
    """Textbook closure on Python sets, independent of the bitset code."""
    prev, curr = set(), set(X)
    while prev != curr:
        prev = set(curr)
        for fd in F:
            if set(fd.lhs) <= curr:
                curr |= set(fd.rhs)
    return AttributeSet.from_indices(curr)


def brute_force_keys(F):
    """All minimal superkeys, by checking every subset of the schema."""
    n = F.attribute_count
    full = F.full_set
    superkeys = {s for s in all_subsets(n) if reference_closure(s, F) == full}
    return {s for s in superkeys if not any(s.remove(a) in superkeys for a in s)}


def random_fds(rng, n, count):
    fds = []
    for _ in range(count):
        lhs = rng.sample(range(n), rng.randint(1, min(3, n)))
        rhs = rng.sample(range(n), rng.randint(1, min(2, n)))
        fds.append(FD(lhs, rhs))
    return FDCollection(n, fds)


def random_schemas(count=40, seed=1978):
    rng = random.Random(seed)
    return [random_fds(rng, rng.randint(1, 7), rng.randint(0, 7)) for _ in range(count)]


def pairs_of_subsets(n):
    """(S, T) pairs with S a proper subset of T."""
    subsets = all_subsets(n)
    return [(s, t) for s, t in combinations(subsets, 2) if t.contains(s)]

"""
Normal form tests and minimal covers built on closure and candidate keys.
"""

from typing import List

from .attributes import letter
from .closure import DEFAULT_STRATEGY, ClosureEngine, closure_direct
from .dependencies import FD, FDCollection
from .keys import prime_attributes
from .log import get_logger

logger = get_logger(__name__)


def minimal_cover(F: FDCollection) -> FDCollection:
    """ Return an equivalent collection of FD's which is minimal:
        1. Every right side of dependency is a single attribute.
        2. For no X->A and proper subset Z of X is F-{X->A}|{Z->A} equivalent to F.
        3. For no X->A in F is the set F-{X->A} equivalent to F.
    """
    n = F.attribute_count

    # Step 1: Every right side of dependency is a single attribute.
    G: List[FD] = []
    for fd in F:
        for A in fd.rhs:
            single = FD(fd.lhs, [A])
            if not single.is_trivial() and single not in G:
                G.append(single)

    # Step 2: Drop extraneous attributes from the left sides.
    for i, fd in enumerate(G):
        lhs = fd.lhs
        for B in fd.lhs:
            if lhs.size > 1 and closure_direct(lhs.remove(B), FDCollection(n, G)).contains(fd.rhs):
                lhs = lhs.remove(B)
        G[i] = FD(lhs, fd.rhs)
    G = list(dict.fromkeys(G))

    # Step 3: Drop dependencies implied by the others.
    cover = FDCollection(n, G)
    for fd in G:
        rest = cover.without(fd)
        if closure_direct(fd.lhs, rest).contains(fd.rhs):
            cover = rest

    return cover


def is_bcnf(F: FDCollection, strategy: str = DEFAULT_STRATEGY) -> bool:
    """ Return True iff the schema is in BCNF w.r.t. F. """
    engine = ClosureEngine(F, strategy)
    for fd in F:
        if not (fd.is_trivial() or engine.is_superkey(fd.lhs)):
            logger.debug('%r violates BCNF for %r', fd, F)
            return False
    return True


def is_3nf(F: FDCollection, strategy: str = DEFAULT_STRATEGY) -> bool:
    """ Return True iff the schema is in 3NF w.r.t. F. """
    engine = ClosureEngine(F, strategy)
    primes = prime_attributes(engine)
    for fd in F:
        if not engine.is_superkey(fd.lhs):
            for A in fd.rhs - fd.lhs:
                if A not in primes:
                    logger.debug('%r violates 3NF for %r: %s is not prime', fd, F, letter(A))
                    return False
    return True

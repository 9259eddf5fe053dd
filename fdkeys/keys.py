"""
Candidate keys of a schema.

All keys are enumerated with the algorithm of Lucchesi and Osborn,
"Candidate keys for relations", J. Comput. Syst. Sci. 17 (1978):
starting from one key K, every dependency X->Y yields the superkey
X | (K - Y); each such superkey that does not already contain a known key is
minimized into a new key. The search ends when no known key produces a new
one, and then every key of the schema has been found.
"""

from queue import Queue
from typing import Iterator, List, Union

from .attributes import AttributeSet
from .closure import DEFAULT_STRATEGY, ClosureEngine
from .dependencies import FDCollection
from .errors import PreconditionError
from .log import get_logger

logger = get_logger(__name__)

EngineOrFDs = Union[ClosureEngine, FDCollection]


def _engine(F: EngineOrFDs, strategy: str = DEFAULT_STRATEGY) -> ClosureEngine:
    if isinstance(F, ClosureEngine):
        return F
    return ClosureEngine(F, strategy)


def minimize(X: AttributeSet, F: EngineOrFDs, strategy: str = DEFAULT_STRATEGY) -> AttributeSet:
    """ Return a candidate key Z <= X, given that X is a superkey.

    Attributes are dropped greedily in ascending order whenever the rest is
    still a superkey. Since every superset of a superkey is a superkey, the
    result is minimal: no single attribute can be removed from it. When X
    contains several keys, the ascending order decides which one is returned.
    """
    engine = _engine(F, strategy)
    if not engine.is_superkey(X):
        raise PreconditionError('Cannot minimize ' + repr(X) + ': not a superkey')
    Z = X
    for A in X:
        reduced = Z.remove(A)
        if engine.is_superkey(reduced):
            Z = reduced
    return Z


def find_key(F: EngineOrFDs, strategy: str = DEFAULT_STRATEGY) -> AttributeSet:
    """ Return a single candidate key for the schema of F. """
    engine = _engine(F, strategy)
    return minimize(engine.fds.full_set, engine)


def iter_candidate_keys(F: EngineOrFDs, strategy: str = DEFAULT_STRATEGY) -> Iterator[AttributeSet]:
    """ Yield every candidate key of the schema of F exactly once, in discovery order.

    The generator always yields at least one key, since the full attribute
    set is a superkey. The number of keys can be exponential in the number of
    attributes; bound the iteration (itertools.islice) when that matters. """
    engine = _engine(F, strategy)
    initial_key = find_key(engine)
    keys = [initial_key]
    queue = Queue()
    queue.put(initial_key)
    logger.debug('Candidate key %s', initial_key)
    yield initial_key
    while not queue.empty():
        key = queue.get()
        for fd in engine.fds:
            skey = fd.lhs | (key - fd.rhs)  # skey is a super key
            if not any(skey.contains(k) for k in keys):
                skey_minimized = minimize(skey, engine)
                # skey contains no known key, hence neither does its minimization
                keys.append(skey_minimized)
                queue.put(skey_minimized)
                logger.debug('Candidate key %s (from %s via %r)', skey_minimized, key, fd)
                yield skey_minimized
    logger.debug('Found %d candidate keys', len(keys))


def find_all_keys(F: EngineOrFDs, strategy: str = DEFAULT_STRATEGY) -> List[AttributeSet]:
    """ Return all candidate keys for the schema of F, in discovery order. """
    return list(iter_candidate_keys(F, strategy))


def prime_attributes(F: EngineOrFDs, strategy: str = DEFAULT_STRATEGY) -> AttributeSet:
    """ Return the attributes that belong to at least one candidate key. """
    result = AttributeSet.empty()
    for key in iter_candidate_keys(F, strategy):
        result = result | key
    return result

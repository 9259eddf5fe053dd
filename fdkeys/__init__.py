"""
Closures and candidate keys of relational schemas under functional dependencies.
"""

from .attributes import MAX_ATTRIBUTES, AttributeSet, check_attribute_count
from .closure import ClosureEngine, ClosureGraph, VertexKind, closure, closure_direct, is_superkey
from .dependencies import FD, FDCollection, make_fds
from .errors import CapacityError, ConfigError, FDKeysError, ParseError, PreconditionError
from .keys import find_all_keys, find_key, iter_candidate_keys, minimize, prime_attributes
from .normal_forms import is_3nf, is_bcnf, minimal_cover
from .parser import load_dependencies, parse_dependencies

__version__ = '0.1.0'

__all__ = [
    'MAX_ATTRIBUTES', 'AttributeSet', 'check_attribute_count',
    'FD', 'FDCollection', 'make_fds',
    'ClosureEngine', 'ClosureGraph', 'VertexKind', 'closure', 'closure_direct', 'is_superkey',
    'minimize', 'find_key', 'iter_candidate_keys', 'find_all_keys', 'prime_attributes',
    'minimal_cover', 'is_bcnf', 'is_3nf',
    'parse_dependencies', 'load_dependencies',
    'FDKeysError', 'PreconditionError', 'CapacityError', 'ParseError', 'ConfigError',
]

"""
Attribute sets as bit masks.

An attribute is a small integer index; attribute i is displayed as the i-th
letter of the alphabet. A set of attributes is a single int mask with one bit
per attribute, which makes union, intersection, difference and the subset
test single bitwise operations.
"""

from typing import Iterable, Iterator

from .errors import CapacityError, PreconditionError

MAX_ATTRIBUTES = 26  # one bit per letter A-Z
_USED_MASK = (1 << MAX_ATTRIBUTES) - 1


def check_attribute_count(n: int) -> int:
    """ Raise CapacityError unless 1 <= n <= MAX_ATTRIBUTES. """
    if not isinstance(n, int) or isinstance(n, bool) or not 1 <= n <= MAX_ATTRIBUTES:
        raise CapacityError('Invalid attribute count ' + repr(n) +
                            ': Must be between 1 and ' + str(MAX_ATTRIBUTES))
    return n


def letter(i: int) -> str:
    return chr(ord('A') + i)


def index_of(c: str) -> int:
    """ 'A' -> 0, 'B' -> 1, ... """
    if len(c) != 1 or not 'A' <= c <= 'Z':
        raise PreconditionError('Not an attribute letter: ' + repr(c))
    return ord(c) - ord('A')


def _check_index(i: int):
    if not isinstance(i, int) or not 0 <= i < MAX_ATTRIBUTES:
        raise PreconditionError('Invalid attribute index ' + repr(i))


class AttributeSet:
    """ An immutable set of attribute indices in [0, MAX_ATTRIBUTES).

    Every operation returns a new set. Iterating yields the indices in
    ascending order and can be repeated any number of times. """

    __slots__ = ('mask', 'size')

    def __init__(self, mask: int = 0):
        if mask & ~_USED_MASK:
            raise PreconditionError('Mask uses bits beyond attribute ' + letter(MAX_ATTRIBUTES - 1))
        object.__setattr__(self, 'mask', mask)
        object.__setattr__(self, 'size', bin(mask).count('1'))

    def __setattr__(self, name, value):
        raise AttributeError('AttributeSet is immutable')

    # Constructors

    @classmethod
    def of(cls, *indices: int) -> 'AttributeSet':
        return cls.from_indices(indices)

    @classmethod
    def from_indices(cls, indices: Iterable[int]) -> 'AttributeSet':
        mask = 0
        for i in indices:
            _check_index(i)
            mask |= 1 << i
        return cls(mask)

    @classmethod
    def from_letters(cls, letters: Iterable[str]) -> 'AttributeSet':
        """ AttributeSet.from_letters('ABD') --> {0, 1, 3} """
        return cls.from_indices(index_of(c) for c in letters)

    @classmethod
    def full(cls, n: int) -> 'AttributeSet':
        """ The set {0, ..., n-1} of all attributes of an n-attribute schema. """
        if not 0 <= n <= MAX_ATTRIBUTES:
            raise PreconditionError('Cannot build a full set of ' + str(n) + ' attributes')
        return cls((1 << n) - 1)

    @classmethod
    def empty(cls) -> 'AttributeSet':
        return cls(0)

    def copy(self) -> 'AttributeSet':
        return AttributeSet(self.mask)

    # Set algebra

    def union(self, other: 'AttributeSet') -> 'AttributeSet':
        return AttributeSet(self.mask | other.mask)

    def intersection(self, other: 'AttributeSet') -> 'AttributeSet':
        return AttributeSet(self.mask & other.mask)

    def difference(self, other: 'AttributeSet') -> 'AttributeSet':
        return AttributeSet(self.mask & ~other.mask)

    def contains(self, other: 'AttributeSet') -> bool:
        """ True iff other is a subset of self. """
        return self.mask & other.mask == other.mask

    def is_full(self, n: int) -> bool:
        return self.size == n

    def insert(self, i: int) -> 'AttributeSet':
        _check_index(i)
        return AttributeSet(self.mask | (1 << i))

    def remove(self, i: int) -> 'AttributeSet':
        _check_index(i)
        if not self.mask & (1 << i):
            raise PreconditionError('Tried to remove attribute ' + letter(i) + ' that is not contained')
        return AttributeSet(self.mask ^ (1 << i))

    __or__ = union
    __and__ = intersection
    __sub__ = difference

    def __le__(self, other: 'AttributeSet') -> bool:
        return other.contains(self)

    def __lt__(self, other: 'AttributeSet') -> bool:
        return self.mask != other.mask and other.contains(self)

    def __ge__(self, other: 'AttributeSet') -> bool:
        return self.contains(other)

    def __gt__(self, other: 'AttributeSet') -> bool:
        return self.mask != other.mask and self.contains(other)

    # Container protocol

    def __contains__(self, i: int) -> bool:
        return isinstance(i, int) and 0 <= i < MAX_ATTRIBUTES and bool(self.mask & (1 << i))

    def __iter__(self) -> Iterator[int]:
        mask = self.mask
        i = 0
        while mask:
            if mask & 1:
                yield i
            mask >>= 1
            i += 1

    def __len__(self) -> int:
        return self.size

    def __bool__(self) -> bool:
        return self.mask != 0

    def __eq__(self, other) -> bool:
        if not isinstance(other, AttributeSet):
            return NotImplemented
        return self.mask == other.mask

    def __hash__(self) -> int:
        return hash(self.mask)

    def to_letters(self) -> str:
        return ''.join(letter(i) for i in self)

    def __str__(self):
        return self.to_letters()

    def __repr__(self):
        return 'AttributeSet(' + repr(self.to_letters()) + ')'

"""
Functional dependencies and ordered collections of them.
"""

from collections.abc import Sequence
from typing import Iterable, Iterator, Union

from .attributes import AttributeSet, check_attribute_count, letter
from .errors import PreconditionError

Attributes = Union[AttributeSet, str, Iterable[int]]


def as_attribute_set(attrs: Attributes) -> AttributeSet:
    """ Accept an AttributeSet, a string of letters or an iterable of indices. """
    if isinstance(attrs, AttributeSet):
        return attrs
    if isinstance(attrs, str):
        return AttributeSet.from_letters(c for c in attrs if not c.isspace() and c != ',')
    return AttributeSet.from_indices(attrs)


class FD:
    """ Represent a Functional Dependency X->Y where X and Y are non-empty sets of attributes. """
    __slots__ = ('lhs', 'rhs')

    def __init__(self, lhs: Attributes, rhs: Attributes):
        self.lhs = as_attribute_set(lhs)
        self.rhs = as_attribute_set(rhs)
        if not self.lhs or not self.rhs:
            raise PreconditionError('Functional dependency ' + repr(self) + ' has an empty side')

    def __repr__(self):
        return self.lhs.to_letters() + '->' + self.rhs.to_letters()

    def __eq__(self, other):
        if not isinstance(other, FD):
            return NotImplemented
        return self.lhs == other.lhs and self.rhs == other.rhs

    def __hash__(self):
        return hash((self.lhs, self.rhs))

    def is_trivial(self) -> bool:
        return self.lhs.contains(self.rhs)

    @staticmethod
    def parse(fd: str) -> 'FD':
        """ FD.parse('AB->C') """
        result = fd.split('->')
        if len(result) != 2:
            raise ValueError('Cannot parse ' + fd + ' into a correct FD.')
        return FD(result[0], result[1])


class FDCollection(Sequence):
    """ Ordered, read-only sequence of FDs over a schema of attribute_count attributes.

    Order is the insertion order. It only decides the order in which
    candidate keys are discovered, never which keys exist. """

    def __init__(self, attribute_count: int, fds: Iterable[FD] = ()):
        self.attribute_count = check_attribute_count(attribute_count)
        self.full_set = AttributeSet.full(attribute_count)
        self._fds = tuple(fds)
        for fd in self._fds:
            if not isinstance(fd, FD):
                raise TypeError('expected FD, got ' + type(fd).__name__)
            if not self.full_set.contains(fd.lhs | fd.rhs):
                raise PreconditionError('Dependency ' + repr(fd) + ' uses attributes outside A..' +
                                        letter(attribute_count - 1))

    def __getitem__(self, i):
        return self._fds[i]

    def __len__(self) -> int:
        return len(self._fds)

    def __iter__(self) -> Iterator[FD]:
        return iter(self._fds)

    def __eq__(self, other):
        if not isinstance(other, FDCollection):
            return NotImplemented
        return self.attribute_count == other.attribute_count and self._fds == other._fds

    def __hash__(self):
        return hash((self.attribute_count, self._fds))

    def __repr__(self):
        return 'FDCollection(' + str(self.attribute_count) + ', [' + ', '.join(map(repr, self._fds)) + '])'

    def without(self, fd: FD) -> 'FDCollection':
        """ A new collection with every occurrence of fd removed. """
        return FDCollection(self.attribute_count, (g for g in self._fds if g != fd))


def make_fds(attribute_count: int, *args) -> FDCollection:
    """ A convinient function that returns a collection of functional dependencies.
    Argument can be FD or a string (in this case, it is parsed). """
    result = []
    for arg in args:
        if type(arg) is str:
            result.append(FD.parse(arg))
        elif type(arg) is FD:
            result.append(arg)
        else:
            raise TypeError('argument ' + repr(arg) + ' must be of type str or FD.')
    return FDCollection(attribute_count, result)

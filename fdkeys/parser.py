"""
Reader for dependency files.

The first line holds the number of attributes n (1 <= n <= 26). Every
following non-blank line is one dependency, its sides separated by '->' and
the attributes on each side by commas:

    4
    A,B->C
    C->D
    D->A

Within a comma separated token the first letter A-Z is the attribute and
anything else is ignored, so ' A ' and 'A' are the same attribute.
"""

from pathlib import Path
from typing import List, Union

from .attributes import MAX_ATTRIBUTES, AttributeSet, letter
from .dependencies import FD, FDCollection
from .errors import ParseError
from .log import get_logger

logger = get_logger(__name__)

DELIM = ','
SEP = '->'


def parse_attribute_list(text: str, n_attribs: int, line: int) -> AttributeSet:
    """ Parse 'A, B,C' into an AttributeSet; duplicates and empty tokens collapse. """
    indices: List[int] = []
    for token in text.split(DELIM):
        if not token:
            continue
        index = next((ord(c) - ord('A') for c in token if 'A' <= c <= 'Z'), None)
        if index is None:
            raise ParseError('Missing valid attribute <A-Z>', line)
        if index >= n_attribs:
            raise ParseError('Invalid attribute ' + letter(index) + ': Expected attributes from A to ' +
                             letter(n_attribs - 1), line)
        indices.append(index)
    if not indices:
        raise ParseError('Missing valid attribute <A-Z>', line)
    return AttributeSet.from_indices(indices)


def parse_attribute_count(text: str) -> int:
    try:
        n_attribs = int(text.strip())
    except ValueError:
        raise ParseError('Invalid attribute count ' + repr(text.strip()), 1) from None
    if not 1 <= n_attribs <= MAX_ATTRIBUTES:
        raise ParseError('Invalid attribute count: Must be between 1 and ' + str(MAX_ATTRIBUTES), 1)
    return n_attribs


def parse_dependency(text: str, n_attribs: int, line: int) -> FD:
    if SEP not in text:
        raise ParseError("Missing '->'", line)
    left, right = text.split(SEP, 1)
    if not left.strip():
        raise ParseError('Left-hand side empty', line)
    if not right.strip():
        raise ParseError('Right-hand side empty', line)
    return FD(parse_attribute_list(left, n_attribs, line), parse_attribute_list(right, n_attribs, line))


def parse_dependencies(text: str) -> FDCollection:
    """ Parse the contents of a dependency file. """
    lines = text.splitlines()
    if not lines or not lines[0].strip():
        raise ParseError('File is empty!', 1)
    n_attribs = parse_attribute_count(lines[0])
    fds = []
    for line_num, line in enumerate(lines[1:], start=2):
        if not line.strip():
            continue
        fds.append(parse_dependency(line, n_attribs, line_num))
    logger.debug('Parsed %d dependencies over %d attributes', len(fds), n_attribs)
    return FDCollection(n_attribs, fds)


def load_dependencies(path: Union[str, Path]) -> FDCollection:
    """ Read and parse a dependency file. """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            text = f.read()
    except UnicodeDecodeError:
        raise ParseError('File is not valid UTF-8') from None
    return parse_dependencies(text)

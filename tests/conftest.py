"""Pytest fixtures shared by the fdkeys tests."""

import logging

import pytest

from fdkeys import make_fds
from helpers import random_schemas

RANDOM_SCHEMAS = random_schemas()

NAMED_SCHEMAS = {
    "cycle": (3, ["A->B", "B->C", "C->A"]),
    "trivial": (1, []),
    "composite": (3, ["AB->C"]),
    "disjoint": (2, ["A->B", "B->A"]),
    "textbook": (6, ["AB->C", "C->D", "D->A", "BE->F", "F->E"]),
    "chain": (5, ["A->B", "B->C", "C->D", "D->E"]),
    "no_fds": (4, []),
}


@pytest.fixture
def cycle():
    return make_fds(3, "A->B", "B->C", "C->A")


@pytest.fixture
def composite():
    return make_fds(3, "AB->C")


@pytest.fixture
def disjoint():
    return make_fds(2, "A->B", "B->A")


@pytest.fixture
def textbook():
    """R(A..F) with AB->C, C->D, D->A, BE->F, F->E: keys ABE, ABF, BCE, BCF, BDE, BDF."""
    return make_fds(6, "AB->C", "C->D", "D->A", "BE->F", "F->E")


@pytest.fixture(params=sorted(NAMED_SCHEMAS))
def named_schema(request):
    n, fds = NAMED_SCHEMAS[request.param]
    return make_fds(n, *fds)


@pytest.fixture(params=range(len(RANDOM_SCHEMAS)))
def random_schema(request):
    return RANDOM_SCHEMAS[request.param]


@pytest.fixture(autouse=True)
def reset_logging():
    """The CLI installs handlers on the fdkeys logger; drop them after each test."""
    yield
    package_logger = logging.getLogger("fdkeys")
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)

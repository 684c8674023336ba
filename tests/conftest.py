import pytest

from pqgram.tree import node, tree


@pytest.fixture
def t1():
    return tree(node("a", node("a", node("e"), node("b")), node("b"), node("c")))


@pytest.fixture
def t2():
    return tree(node("a", node("a", node("e"), node("b")), node("b"), node("x")))


@pytest.fixture
def t3():
    return tree(node("a", node("b", node("c")), node("b")))


@pytest.fixture
def t4():
    return tree(node("a", node("b"), node("b", node("c"))))

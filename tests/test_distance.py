"""Tests for pqgram.distance"""

from unittest import mock

import pytest

from pqgram.distance import PQOptions, PQWindowedOptions, pq_distance, pq_distance_windowed
from pqgram.profile import PQGramProfile
from pqgram.tree import NodeTree, node, tree
from pqgram.validation import InvalidArgumentError


class TestPQDistance:
    def test_zero_against_itself(self, t1, t2, t3):
        assert pq_distance(t1, t1) == 0
        assert pq_distance(t2, t2) == 0
        assert pq_distance(t3, t3) == 0

    def test_can_be_zero_for_different_trees(self, t3, t4):
        assert pq_distance(t3, t4) == 0

    def test_symmetric(self, t1, t2, t3, t4):
        assert pq_distance(t1, t2) == pq_distance(t2, t1)
        assert pq_distance(t3, t4) == pq_distance(t4, t3)

    def test_example_trees(self, t1, t2):
        assert pq_distance(t1, t2) == pytest.approx(1 - 2 * 9 / 26)
        assert pq_distance(t1, t2) == pytest.approx(0.3076923076923077)

    def test_sibling_order_matters(self):
        a = tree(node("a", node("b"), node("c"), node("d")))
        b = tree(node("a", node("d"), node("c"), node("b")))
        assert pq_distance(a, b) > 0

    def test_disjoint_labels(self):
        assert pq_distance(tree(node("a")), tree(node("b"))) == 1

    def test_in_unit_interval(self, t1, t3):
        assert 0 <= pq_distance(t1, t3) <= 1

    def test_empty_trees(self):
        assert pq_distance(NodeTree(None), NodeTree(None)) == 0.0

    def test_accepts_tree_nodes(self, t1, t2):
        assert pq_distance(t1.root, t2.root) == pq_distance(t1, t2)

    @pytest.mark.parametrize("value", [0, -1, 1.1234])
    def test_invalid_p(self, t1, t2, value):
        with pytest.raises(InvalidArgumentError):
            pq_distance(t1, t2, p=value)

    @pytest.mark.parametrize("value", [0, -1, 1.1234])
    def test_invalid_q(self, t1, t2, value):
        with pytest.raises(InvalidArgumentError):
            pq_distance(t1, t2, q=value)

    def test_validates_before_traversal(self, t1, t2):
        with mock.patch.object(PQGramProfile, "of") as of:
            with pytest.raises(InvalidArgumentError):
                pq_distance(t1, t2, PQOptions(p=0))
        of.assert_not_called()


class TestPQDistanceParameters:
    def test_given_values(self, t1, t2):
        with mock.patch.object(PQGramProfile, "of", wraps=PQGramProfile.of) as of:
            pq_distance(t1, t2, p=3, q=4)
        assert of.call_count == 2
        of.assert_called_with(mock.ANY, 3, 4)

    def test_defaults(self, t1, t2):
        with mock.patch.object(PQGramProfile, "of", wraps=PQGramProfile.of) as of:
            pq_distance(t1, t2)
        assert of.call_count == 2
        of.assert_called_with(mock.ANY, 2, 3)

    def test_partial_override(self, t1, t2):
        with mock.patch.object(PQGramProfile, "of", wraps=PQGramProfile.of) as of:
            pq_distance(t1, t2, PQOptions(p=3, q=4), q=2)
        of.assert_called_with(mock.ANY, 3, 2)


class TestWindowedDistance:
    def test_zero_against_itself(self, t1, t2, t3):
        assert pq_distance_windowed(t1, t1) == 0
        assert pq_distance_windowed(t2, t2) == 0
        assert pq_distance_windowed(t3, t3) == 0

    def test_zero_for_permuted_siblings(self):
        t5 = tree(node("a", node("b"), node("c"), node("d")))
        t6 = tree(node("a", node("d"), node("c"), node("b")))
        assert pq_distance_windowed(t5, t6) == 0

    def test_zero_for_permutations_at_several_levels(self):
        a = tree(node("r", node("x", node("1"), node("2"), node("3")), node("y", node("4")), node("z")))
        b = tree(node("r", node("z"), node("y", node("4")), node("x", node("3"), node("1"), node("2"))))
        assert pq_distance_windowed(a, b) == 0
        assert pq_distance(a, b) > 0

    def test_nonzero_for_different_siblings(self):
        a = tree(node("a", node("b"), node("c")))
        b = tree(node("a", node("b"), node("b")))
        assert pq_distance_windowed(a, b) > 0

    def test_symmetric(self, t1, t2, t3, t4):
        assert pq_distance_windowed(t1, t2) == pq_distance_windowed(t2, t1)
        assert pq_distance_windowed(t3, t4) == pq_distance_windowed(t4, t3)

    def test_example_trees(self, t1, t2):
        assert pq_distance_windowed(t1, t2) == 0.3125

    @pytest.mark.parametrize("value", [0, -1, 1.1234])
    def test_invalid_p(self, t1, t2, value):
        with pytest.raises(InvalidArgumentError):
            pq_distance_windowed(t1, t2, p=value)

    @pytest.mark.parametrize("value", [0, -1, 1, 1.1234])
    def test_invalid_w(self, t1, t2, value):
        with pytest.raises(InvalidArgumentError):
            pq_distance_windowed(t1, t2, w=value)

    def test_given_values(self, t1, t2):
        with mock.patch.object(PQGramProfile, "windowed", wraps=PQGramProfile.windowed) as windowed:
            pq_distance_windowed(t1, t2, PQWindowedOptions(p=3, w=4))
        assert windowed.call_count == 2
        windowed.assert_called_with(mock.ANY, 3, 4)

    def test_defaults(self, t1, t2):
        with mock.patch.object(PQGramProfile, "windowed", wraps=PQGramProfile.windowed) as windowed:
            pq_distance_windowed(t1, t2)
        assert windowed.call_count == 2
        windowed.assert_called_with(mock.ANY, 2, 3)

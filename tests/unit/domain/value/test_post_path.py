"""Unit tests for PostPath."""

import pytest
from pydantic import ValidationError

from forum.domain.value import PostPath


class TestPostPathConstruction:
    """Tests for building paths."""

    def test_root_path_holds_only_the_post(self):
        path = PostPath.for_root(7)

        assert path.root == (7,)
        assert path.root_id == 7
        assert path.post_id == 7
        assert path.depth == 0

    def test_child_extends_parent_path(self):
        parent = PostPath.for_root(1).child(4)

        child = parent.child(9)

        assert child.root == (1, 4, 9)
        assert child.root_id == 1
        assert child.post_id == 9
        assert child.depth == 2
        # The parent is unchanged
        assert parent.root == (1, 4)

    def test_empty_path_rejected(self):
        with pytest.raises(ValidationError):
            PostPath(root=())


class TestPostPathOrdering:
    """Element-wise comparison gives depth-first preorder."""

    def test_parent_sorts_before_child(self):
        parent = PostPath(root=(1, 2))
        child = parent.child(5)

        assert parent < child
        assert child > parent

    def test_subtree_sorts_before_next_sibling(self):
        # 1 -> 2 -> 10 must come before 1 -> 3 even though 10 > 3
        deep = PostPath(root=(1, 2, 10))
        sibling = PostPath(root=(1, 3))

        assert deep < sibling

    def test_sorting_yields_preorder(self):
        paths = [
            PostPath(root=(4,)),
            PostPath(root=(1, 3)),
            PostPath(root=(1,)),
            PostPath(root=(1, 2, 5)),
            PostPath(root=(1, 2)),
        ]

        ordered = [p.root for p in sorted(paths)]

        assert ordered == [(1,), (1, 2), (1, 2, 5), (1, 3), (4,)]


class TestPostPathAncestry:
    """Tests for is_ancestor_of."""

    def test_prefix_is_ancestor(self):
        assert PostPath(root=(1,)).is_ancestor_of(PostPath(root=(1, 2, 3)))

    def test_path_is_not_its_own_ancestor(self):
        path = PostPath(root=(1, 2))

        assert not path.is_ancestor_of(path)

    def test_sibling_is_not_ancestor(self):
        assert not PostPath(root=(1, 2)).is_ancestor_of(PostPath(root=(1, 3, 4)))

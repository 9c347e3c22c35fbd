# -*- coding: utf-8 -*-
#
# This file is part of `devafmt`, a parser and formatter for the Devalang `.deva` format
#
# Copyright © 2025 by the devafmt authors
#
# This module is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This module is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.


"""
Test the node module.
"""

### find devafmt
import sys
sys.path.insert(0, '.')

import io

from devafmt.node import Node


class Block(Node):
    pass


class Leaf(Node):
    pass


def make_tree():
    return \
    Block(
        Leaf(),
        Block(
            Leaf(),
            Leaf(),
        ),
        Leaf(),
    )


def check_parents():
    tree = make_tree()
    assert tree.parent is None
    assert all(n.parent is tree for n in tree)
    assert tree[1][0].parent is tree[1]

    node = Leaf()
    tree[1].append(node)
    assert node.parent is tree[1]
    assert node.is_last()
    assert not tree[1][0].is_last()

    node.parent = None
    assert node.parent is None


def check_equals():
    tree, tree2 = make_tree(), make_tree()
    assert tree.equals(tree2)
    assert tree != tree2        # identity compare
    assert tree.index(tree[2]) == 2
    assert bool(Block())

    tree2[1].append(Leaf())
    assert not tree.equals(tree2)
    assert not Block().equals(Leaf())


def check_dump():
    """Test the graphical representation."""
    f = io.StringIO()
    Block(Leaf(), Block(Leaf())).dump(f, "ascii")
    assert f.getvalue() == (
        "<Block (2 children)>\n"
        " |-<Leaf (0 children)>\n"
        " `-<Block (1 child)>\n"
        "    `-<Leaf (0 children)>\n")


def test_main():
    check_parents()
    check_equals()
    check_dump()


if __name__ == "__main__" and 'test_main' in globals():
    test_main()

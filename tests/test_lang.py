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
Test the Devalang tokenizer and the splitting functions that use it.
"""

### find devafmt
import sys
sys.path.insert(0, '.')

from devafmt.lang.devalang import Piece, tokenize
from devafmt.dom.read import (
    is_group, open_brackets, split_arguments, split_call_arguments,
    split_chain, split_property)


def check_tokenize():
    """Test the pieces and open delimiters."""
    t = tokenize('.kick {a: "x, y"}, 1/4')
    assert [p.kind for p in t.pieces] == ['text', 'space', 'text', 'comma', 'space', 'text']
    assert t.pieces[2] == Piece('text', '{a: "x, y"}')
    assert t.opens == ()

    assert tokenize('') == ((), ())
    assert tokenize('a -> b').pieces[2] == Piece('arrow', '->')
    assert tokenize('a: b').pieces[1] == Piece('colon', ':')

    assert tokenize('{a: foo(1, ').opens == ('{', '(')
    assert tokenize('[1, 2').opens == ('[',)
    assert tokenize('"abc').opens == ('"',)
    assert tokenize('{a} {b').opens == ('{',)

    # escapes in strings
    t = tokenize(r'"a\"b"')
    assert len(t.pieces) == 1 and t.opens == ()
    t = tokenize(r'"a\\" b')
    assert [p.text for p in t.pieces] == [r'"a\\"', ' ', 'b']


def check_split():
    """Test splitting on separators outside strings and brackets."""
    assert split_arguments('.kick 1/4, {a: 1}') == ['.kick', '1/4', '{a: 1}']
    assert split_arguments('  a   b  ') == ['a', 'b']
    assert split_arguments('"a b" {c d}') == ['"a b"', '{c d}']
    assert split_arguments('') == []

    assert split_call_arguments('a, "b, c", f(1, 2)') == ['a', '"b, c"', 'f(1, 2)']
    assert split_call_arguments(' kick , snare ') == ['kick', 'snare']
    assert split_call_arguments('a b, c') == ['a b', 'c']

    assert split_chain('synth -> attack(10) -> release(200)') == ['synth', 'attack(10)', 'release(200)']
    assert split_chain('a -> "x->y"') == ['a', '"x->y"']
    assert split_chain('a -> f(b -> c)') == ['a', 'f(b -> c)']
    assert split_chain('a -> -> b') == ['a', '', 'b']
    assert split_chain('a') == ['a']

    assert split_property('a: "x: y"') == ('a', '"x: y"')
    assert split_property('a: {b: 1}') == ('a', '{b: 1}')
    assert split_property(' solo ') == ('solo', None)

    assert open_brackets('{a: 1') == ('{',)
    assert open_brackets('f(1)') == ()

    assert is_group('{a: 1}')
    assert is_group('"s"')
    assert not is_group('{a} {b}')
    assert not is_group('{a')


def test_main():
    check_tokenize()
    check_split()


if __name__ == "__main__" and 'test_main' in globals():
    test_main()

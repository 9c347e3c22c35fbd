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
Devalang language and transform definition.

Devalang is read line by line by the :mod:`~devafmt.parser`, but the text
after a statement keyword (the arguments of a trigger, the value of a ``let``
declaration, the calls of an arrow chain) can contain strings, objects and
parenthesized argument lists that may even continue on the next lines. This
module defines a small *parce* language that tokenizes such text, so that it
can be split on the separators that are not inside a string or brackets.

The :class:`DevalangTransform` transforms the *parce* tree into a flat
:class:`Tokens` tuple of :class:`Piece` items, where every string or bracketed
group has become one single "text" piece. Use :func:`tokenize` to get it::

    >>> from devafmt.lang.devalang import tokenize
    >>> tokenize('.kick {a: "x, y"}, 1/4').pieces
    (Piece(kind='text', text='.kick'), Piece(kind='space', text=' '),
    Piece(kind='text', text='{a: "x, y"}'), Piece(kind='comma', text=','),
    Piece(kind='space', text=' '), Piece(kind='text', text='1/4'))

The ``opens`` attribute of the result lists the delimiters that are still
open at the end of the text, the outermost first::

    >>> tokenize('{a: foo(1, ').opens
    ('{', '(')

Backslash escapes in strings are read as one token, so ``"a\\"b"`` is one
string, while in ``"a\\\\"`` the last quote ends the string.

"""

import collections

from parce import Language, lexicon, default_action
from parce.action import Bracket, Operator, Separator, String, Text
from parce.transform import Transform, transform_text


# Standard actions defined/used here:
Space = Separator.Space
Comma = Separator.Comma
Colon = Separator.Colon
Arrow = Operator.Arrow


#: A piece of text, with its kind: "space", "comma", "colon", "arrow" or "text".
Piece = collections.namedtuple("Piece", "kind text")

#: The result of :func:`tokenize`: the pieces and the delimiters left open.
Tokens = collections.namedtuple("Tokens", "pieces opens")

#: A string or bracketed group, with the delimiters left open inside it.
Group = collections.namedtuple("Group", "text opens")


class Devalang(Language):
    """Tokenizes the arguments and values in Devalang statements."""

    @lexicon
    def root(cls):
        yield r'\s+', Space
        yield r',', Comma
        yield r'->', Arrow
        yield r':', Colon
        yield from cls.common()
        yield default_action, Text

    @classmethod
    def common(cls):
        """Find strings and bracketed groups."""
        yield r'"', String, cls.string
        yield r'\{', Bracket.Start, cls.brace
        yield r'\(', Bracket.Start, cls.paren
        yield r'\[', Bracket.Start, cls.bracket

    @lexicon(consume=True)
    def string(cls):
        """A double-quoted string."""
        yield r'\\.', String.Escape
        yield r'"', String, -1
        yield default_action, String

    @lexicon(consume=True)
    def brace(cls):
        """An object, ``{`` ... ``}``."""
        yield r'\}', Bracket.End, -1
        yield from cls.common()
        yield default_action, Text

    @lexicon(consume=True)
    def paren(cls):
        """An argument list, ``(`` ... ``)``."""
        yield r'\)', Bracket.End, -1
        yield from cls.common()
        yield default_action, Text

    @lexicon(consume=True)
    def bracket(cls):
        """A list, ``[`` ... ``]``."""
        yield r'\]', Bracket.End, -1
        yield from cls.common()
        yield default_action, Text


class DevalangTransform(Transform):
    """Transform Devalang arguments to a :class:`Tokens` tuple."""

    _kinds = {
        Space: "space",
        Comma: "comma",
        Colon: "colon",
        Arrow: "arrow",
    }

    def root(self, items):
        """Return a Tokens tuple; groups become one text piece."""
        pieces = []
        opens = ()
        for i in items:
            if i.is_token:
                pieces.append(Piece(self._kinds.get(i.action, "text"), i.text))
            else:
                pieces.append(Piece("text", i.obj.text))
                opens = i.obj.opens
        return Tokens(tuple(pieces), opens)

    def string(self, items):
        """A string Group."""
        closed = len(items) > 1 and items[-1] == '"'
        return self.group('"', closed, items)

    def brace(self, items):
        """A ``{`` ... ``}`` Group."""
        return self.group('{', items[-1] == '}', items)

    def paren(self, items):
        """A ``(`` ... ``)`` Group."""
        return self.group('(', items[-1] == ')', items)

    def bracket(self, items):
        """A ``[`` ... ``]`` Group."""
        return self.group('[', items[-1] == ']', items)

    def group(self, delimiter, closed, items):
        """Create a Group of the items.

        If the group is not ``closed``, the ``delimiter`` is put in front of
        the delimiters left open by the last nested group.

        """
        text = ''.join(i.text if i.is_token else i.obj.text for i in items)
        if closed:
            return Group(text, ())
        opens = ()
        for i in items:
            if not i.is_token:
                opens = i.obj.opens
        return Group(text, (delimiter,) + opens)


def tokenize(text):
    """Return a :class:`Tokens` tuple for the text."""
    if not text:
        return Tokens((), ())
    return transform_text(Devalang.root, text)

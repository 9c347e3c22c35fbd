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
Simple helper functions to read values and argument lists from text.

These functions are used by the :mod:`~devafmt.parser` to read the parts of a
statement, but they are also handy to build DOM elements by hand::

    >>> from devafmt.dom import read
    >>> read.parse_value('{velocity: 0.8, mode: "soft"}').dump()
    <expr.ObjectLiteral (2 children)>
     ├╴<expr.ObjectProperty 'velocity' (1 child)>
     │  ╰╴<expr.NumberLiteral '0.8'>
     ╰╴<expr.ObjectProperty 'mode' (1 child)>
        ╰╴<expr.StringLiteral 'soft'>
    >>> read.split_arguments('.kick 1/4, {a: 1}')
    ['.kick', '1/4', '{a: 1}']

Splitting is done on the tokens of the :mod:`~devafmt.lang.devalang`
language: separators inside strings or brackets never split.

"""

import re

from ..duration import is_number
from ..lang.devalang import tokenize
from . import expr


_STRING_RE = re.compile(r'".*"', re.DOTALL)
_SYNTH_RE = re.compile(r'synth\s+(\S+)')
_OBJECT_RE = re.compile(r'\{(.*)\}', re.DOTALL)


def parse_value(text):
    """Return an :class:`~.expr.Expression` element for the text.

    The text is read as (in this order): nothing (an empty object), a boolean,
    ``auto``, a number, a double-quoted string, a synth reference, an object
    literal. Anything else becomes an Identifier, so this never fails.

    """
    text = text.strip()
    if not text:
        return expr.ObjectLiteral()
    elif text in ("true", "false"):
        return expr.BooleanLiteral(text == "true")
    elif text == "auto":
        return expr.Identifier("auto")
    elif is_number(text):
        return expr.NumberLiteral(text)
    elif _STRING_RE.fullmatch(text):
        return expr.StringLiteral(text[1:-1])
    m = _SYNTH_RE.fullmatch(text)
    if m:
        return expr.SynthReference(m.group(1))
    m = _OBJECT_RE.fullmatch(text)
    if m and is_group(text):
        return parse_object(m.group(1))
    return expr.Identifier(text)


def parse_object(text):
    """Return an :class:`~.expr.ObjectLiteral` for the text between the braces.

    The text is split in ``key: value`` pairs on the commas that are not
    inside a string or brackets. Empty pairs are skipped.

    """
    obj = expr.ObjectLiteral()
    for pair in split_call_arguments(text):
        key, value = split_property(pair)
        prop = expr.ObjectProperty(key)
        if value is not None:
            prop.append(parse_value(value))
        obj.append(prop)
    return obj


def split_property(text):
    """Split ``key: value`` text on the first colon outside strings and brackets.

    Returns a tuple (key, value). The value is None if there is no colon.

    """
    pieces = tokenize(text).pieces
    for index, (kind, t) in enumerate(pieces):
        if kind == "colon":
            key = ''.join(p.text for p in pieces[:index])
            value = ''.join(p.text for p in pieces[index+1:])
            return key.strip(), value.strip()
    return text.strip(), None


def split_arguments(text):
    """Split text on spaces and commas outside strings and brackets.

    Returns a list of non-empty argument strings.

    """
    return _split(text, ("space", "comma"))


def split_call_arguments(text):
    """Split text on commas outside strings and brackets.

    This is used for the arguments between the parentheses of a call, which
    may contain spaces. Returns a list of non-empty, stripped argument
    strings.

    """
    return _split(text, ("comma",))


def split_chain(text):
    """Split text on the ``->`` arrows outside strings and brackets.

    Returns the list of stripped segments, including empty ones, so that the
    caller can see that e.g. ``a -> -> b`` is malformed.

    """
    segments = [[]]
    for kind, t in tokenize(text).pieces:
        if kind == "arrow":
            segments.append([])
        else:
            segments[-1].append(t)
    return [''.join(s).strip() for s in segments]


def open_brackets(text):
    """Return a tuple of the delimiters that are still open at the end of text.

    The outermost delimiter is first, e.g. ``('{', '(')`` for ``{a: f(``.
    An open string is reported as ``'"'``.

    """
    return tokenize(text).opens


def _split(text, separators):
    """Split text on the pieces of a kind in ``separators``."""
    result = []
    current = []
    for kind, t in tokenize(text).pieces:
        if kind in separators:
            arg = ''.join(current).strip()
            if arg:
                result.append(arg)
            current.clear()
        else:
            current.append(t)
    arg = ''.join(current).strip()
    if arg:
        result.append(arg)
    return result


def is_group(text):
    """Return True if text is one closed string or bracketed group, like ``{a: 1}``."""
    tokens = tokenize(text)
    return len(tokens.pieces) == 1 and not tokens.opens

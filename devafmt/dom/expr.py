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
Elements for the values (expressions) in Devalang statements.

Values are found e.g. on the right hand side of a ``let`` declaration, after
``sleep``, and in the arguments of a trigger. They are created by
:func:`~devafmt.dom.read.parse_value`::

    >>> from devafmt.dom.read import parse_value
    >>> v = parse_value('{a: 1, b: "s"}')
    >>> v.dump()
    <expr.ObjectLiteral (2 children)>
     ├╴<expr.ObjectProperty 'a' (1 child)>
     │  ╰╴<expr.NumberLiteral '1'>
     ╰╴<expr.ObjectProperty 'b' (1 child)>
        ╰╴<expr.StringLiteral 's'>
    >>> v.write()
    '{a: 1, b: "s"}'

"""

from ..duration import format_number, is_number, to_number
from . import element


class Expression(element.Element):
    """Base class for all value elements."""
    __slots__ = ()


class Identifier(element.TextElement, Expression):
    """A name, like ``kick`` or ``auto``.

    Text that can't be read as any other value also ends up in an Identifier.

    """
    __slots__ = ()
    type = "Identifier"

    @property
    def name(self):
        return self.head


class NumberLiteral(element.TextElement, Expression):
    """An integer or decimal number.

    The head value is the text of the number as it was written, so it is
    written back unaltered. An int or float is also accepted.

    """
    __slots__ = ()
    type = "NumberLiteral"

    @classmethod
    def check_head(cls, head):
        if isinstance(head, str):
            return is_number(head)
        return isinstance(head, (int, float)) and not isinstance(head, bool)

    @property
    def value(self):
        """The number as an int or float."""
        return to_number(self.head) if isinstance(self.head, str) else self.head

    def write_head(self):
        return format_number(self.head)


class StringLiteral(element.TextElement, Expression):
    """A double-quoted string.

    The head value is the text between the quotes, as it was written; it is
    written back unaltered.

    """
    __slots__ = ()
    type = "StringLiteral"

    def write_head(self):
        return '"{}"'.format(self.head)


class BooleanLiteral(element.TextElement, Expression):
    """``true`` or ``false``; the head value is a bool."""
    __slots__ = ()
    type = "BooleanLiteral"

    @classmethod
    def check_head(cls, head):
        return isinstance(head, bool)

    def write_head(self):
        return "true" if self.head else "false"


class RawLiteral(element.TextElement, Expression):
    """Verbatim text, e.g. a value that was spread over more lines."""
    __slots__ = ()
    type = "RawLiteral"


class SynthReference(element.TextElement, Expression):
    """A reference to a synth, like ``synth lead``; the head is the name."""
    __slots__ = ()
    type = "SynthReference"

    def write_head(self):
        return "synth {}".format(self.head)


class ObjectProperty(element.TextElement, Expression):
    """A ``key: value`` pair in an object literal.

    The head is the key; the value is the single child element. A key without
    value (like ``{solo}``) has no child and is written as the bare key.

    """
    __slots__ = ()
    type = "ObjectProperty"

    @property
    def key(self):
        return self.head

    @property
    def value(self):
        """The value element, or None."""
        for n in self:
            return n

    def write_head(self):
        if len(self):
            return "{}: {}".format(self.head, self[0].write())
        return self.head


class ObjectLiteral(Expression):
    """An object literal ``{key: value, ...}``.

    The children are :class:`ObjectProperty` elements, in source order. Keys
    are not checked for uniqueness.

    """
    __slots__ = ()
    type = "ObjectLiteral"

    @property
    def properties(self):
        return list(self)

    def get(self, key, default=None):
        """Return the value element of the first property with ``key``."""
        for p in self:
            if p.key == key:
                return p.value
        return default

    def write_head(self):
        return write_properties(self)


def write_properties(properties):
    """Return the text of an object literal containing the properties."""
    return "{{{}}}".format(", ".join(p.write() for p in properties))

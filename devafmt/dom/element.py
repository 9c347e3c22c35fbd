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
This module defines the :class:`Element` class.

An Element describes a statement or an expression of a Devalang document, and
can have child elements. Every element class has a ``type`` tag, the name of
the construct it represents (e.g. ``"Loop"`` or ``"Trigger"``).

An Element displays a ``head``: the text of its own (first) line, returned by
:meth:`~Element.write_head`. A :class:`BlockElement`, like a loop or a group,
has the statements of its body as children; they are printed below the head,
indented. Some block elements also display a ``tail``, e.g. the closing brace
of a ``param`` block.

When the parser creates an element, it records where it was found in the
source: the :attr:`~Element.line` index, the width of the :attr:`~Element.indent`
and the :attr:`~Element.leading` whitespace itself. Elements constructed
manually have None for those values.

:class:`Element` inherits from  :class:`~devafmt.node.Node`, and thus from
:class:`list`, to build a reliable and easy to navigate tree structure.

"""

import reprlib

from ..node import Node


class Element(Node):
    """Base class for all element types.

    Child elements can be specified directly as arguments to the constructor.
    The class attribute ``fields`` names the attributes that, besides the
    children, make up the element; they are compared by :meth:`body_equals`
    and shown by :meth:`repr`.

    """
    __slots__ = ('indent', 'leading', 'line', 'end_line')

    type = None         #: the tag naming the construct
    fields = ()         #: names of the attributes that describe the element
    is_block = False    #: whether the children are a body of statements

    def __init__(self, *children):
        super().__init__(*children)
        self.indent = None      #: the width of the leading whitespace in the source
        self.leading = None     #: the leading whitespace in the source
        self.line = None        #: the index of the first source line
        self.end_line = None    #: the index of the last source line

    def __repr__(self):
        def result():
            # class name with last part module prepended
            cls = self.__class__
            mod = cls.__module__.split('.')[-1]
            yield "{}.{}".format(mod, cls.__name__)
            head = self.repr_head()
            if head is not None:
                yield head
            # child count
            if len(self):
                yield "({} child{})".format(len(self), '' if len(self) == 1 else 'ren')
            # position
            if self.line is not None:
                yield '[{}]'.format(self.line)
        return "<{}>".format(" ".join(result()))

    def repr_head(self):
        """Return a representation for the fields, or None if there are none."""
        if self.fields:
            return " ".join(reprlib.repr(getattr(self, name)) for name in self.fields)

    def body_equals(self, other):
        """Compare the fields, called by :meth:`Node.equals() <devafmt.node.Node.equals>`."""
        for name in self.fields:
            a, b = getattr(self, name), getattr(other, name)
            if isinstance(a, Element):
                if not a.equals(b):
                    return False
            elif isinstance(a, list):
                if len(a) != len(b) or not all(
                        x.equals(y) if isinstance(x, Element) else x == y
                        for x, y in zip(a, b)):
                    return False
            elif a != b:
                return False
        return True

    def set_origin(self, line, leading, end_line=None):
        """Record the position of this element in the source.

        ``line`` is the index of the first line, ``leading`` the whitespace
        that line starts with. ``end_line`` defaults to ``line``. Returns
        self, so the call can be chained.

        """
        self.line = line
        self.leading = leading
        self.indent = len(leading)
        self.end_line = line if end_line is None else end_line
        return self

    def is_multiline(self):
        """Return True if this element was read from more than one source line."""
        return self.line is not None and self.end_line != self.line

    @property
    def body(self):
        """The children of this element (the element itself)."""
        return self

    def branches(self):
        """Yield the elements that continue this element at the same level.

        For example the ``else`` part of an ``if`` statement. By default,
        nothing is yielded.

        """
        return
        yield

    def walk(self):
        """Yield this element and all elements below it, in document order.

        Besides the children, this also visits the :meth:`branches` of
        elements.

        """
        yield self
        for n in self:
            yield from n.walk()
        for n in self.branches():
            yield from n.walk()

    def write_head(self):
        """Return the textual output that represents our ``head`` value.

        Must be implemented by element types.

        """
        raise NotImplementedError

    def write_tail(self):
        """Return the textual output after the children, or None.

        The default implementation returns None.

        """
        return None

    def write(self):
        """Return the text of this element.

        For elements without body, this is the head text. To get the output
        of a block element including its children, use the
        :func:`~devafmt.printer.print_node` function.

        """
        return self.write_head()


class HeadElement(Element):
    """Element that has a fixed head value, e.g. an empty line."""
    __slots__ = ()

    head = None

    def write_head(self):
        """Return the fixed head text."""
        return self.head


class TextElement(Element):
    """Element that has a variable/writable head value.

    This value must be given to the constructor, and can be modified later.

    If you want to, you can implement the :meth:`check_head` method, which by
    default returns True, to perform some checking on the ``head`` value of
    this element. This prevents forgetting to set the ``head`` value on manual
    construction, which can lead to unexpected and difficult to debug bugs.

    """
    __slots__ = ('head',)
    fields = ('head',)

    def __init__(self, head, *children):
        if not self.check_head(head):
            raise TypeError("invalid head value for {}: {}".format(type(self).__name__, repr(head)))
        super().__init__(*children)
        self.head = head

    @classmethod
    def check_head(cls, head):
        """Returns whether the proposed head value is valid."""
        ### Raise error when forgetting the head value, and abusively using the first child
        return not isinstance(head, Element)

    def write_head(self):
        """Return the head value, assuming it is text."""
        return self.head


class BlockElement(Element):
    """Element whose children are a body of statements.

    The children are printed on lines below the head, indented one level.

    """
    __slots__ = ()
    is_block = True

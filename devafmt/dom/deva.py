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
Elements for the statements of a Devalang document.

Every statement class writes its own line with :meth:`write_head`; the block
statements (:class:`Loop`, :class:`Group`, :class:`If` etc.) have the
statements of their body as children. For example::

    >>> from devafmt.parser import parse
    >>> doc = parse("bpm 120\\nloop 4:\\n  .kick 1/4\\n")
    >>> doc.dump()
    <deva.Program (2 children)>
     ├╴<deva.BpmDeclaration '120' [0]>
     ╰╴<deva.Loop <expr.NumberLiteral '4'> (1 child) [1]>
        ╰╴<deva.Trigger '.kick' BeatDuration('1/4') [] [2]>
    >>> doc[1].write_head()
    'loop 4:'

"""

import collections

from .. import duration
from . import element, expr


class Statement(element.Element):
    """Base class for all statement elements."""
    __slots__ = ()


class Program(element.BlockElement, Statement):
    """The root element of a Devalang document.

    The ``session`` attribute, if not None, is the
    :class:`~devafmt.parser.Session` of the parse run that created this
    document; it holds the source text the printer uses to keep unmodified
    lines as they were.

    """
    __slots__ = ('session',)
    type = "Program"

    def __init__(self, *children, session=None):
        super().__init__(*children)
        self.session = session

    def write_head(self):
        """A Program has no head text."""
        return None


## simple declarations

class BpmDeclaration(Statement):
    """``bpm <identifier>``"""
    __slots__ = ('identifier',)
    type = "BpmDeclaration"
    fields = ('identifier',)

    def __init__(self, identifier):
        super().__init__()
        self.identifier = identifier

    def write_head(self):
        return "bpm {}".format(self.identifier)


class BankDeclaration(Statement):
    """``bank <identifier> [as <alias>]``"""
    __slots__ = ('identifier', 'alias')
    type = "BankDeclaration"
    fields = ('identifier', 'alias')

    def __init__(self, identifier, alias=None):
        super().__init__()
        self.identifier = identifier
        self.alias = alias

    def write_head(self):
        return with_alias("bank {}".format(self.identifier), self.alias)


class UsePlugin(Statement):
    """``@use <name> [as <alias>]``"""
    __slots__ = ('name', 'alias')
    type = "UsePlugin"
    fields = ('name', 'alias')

    def __init__(self, name, alias=None):
        super().__init__()
        self.name = name
        self.alias = alias

    def write_head(self):
        return with_alias("@use {}".format(self.name), self.alias)


class LetDeclaration(Statement):
    """``let <name> = <value>``; the value is an :class:`~.expr.Expression`."""
    __slots__ = ('name', 'value')
    type = "LetDeclaration"
    fields = ('name', 'value')

    def __init__(self, name, value):
        super().__init__()
        self.name = name
        self.value = value

    def write_head(self):
        return "let {} = {}".format(self.name, self.value.write())


class Emit(Statement):
    """``emit <name> [payload]``; the payload is kept as text."""
    __slots__ = ('name', 'payload')
    type = "Emit"
    fields = ('name', 'payload')

    def __init__(self, name, payload=None):
        super().__init__()
        self.name = name
        self.payload = payload

    def write_head(self):
        if self.payload:
            return "emit {} {}".format(self.name, self.payload)
        return "emit {}".format(self.name)


class Print(Statement):
    """``print <expression>``; the expression is kept as text."""
    __slots__ = ('expression',)
    type = "Print"
    fields = ('expression',)

    def __init__(self, expression):
        super().__init__()
        self.expression = expression

    def write_head(self):
        return "print {}".format(self.expression)


class ImportStatement(Statement):
    """``@import { a, b } from "path"``"""
    __slots__ = ('identifiers', 'source')
    type = "ImportStatement"
    fields = ('identifiers', 'source')

    def __init__(self, identifiers, source):
        super().__init__()
        self.identifiers = list(identifiers)
        self.source = source

    def write_head(self):
        return '@import {} from "{}"'.format(write_names(self.identifiers), self.source)


class ExportStatement(Statement):
    """``@export { a, b }``"""
    __slots__ = ('identifiers',)
    type = "ExportStatement"
    fields = ('identifiers',)

    def __init__(self, identifiers):
        super().__init__()
        self.identifiers = list(identifiers)

    def write_head(self):
        return '@export {}'.format(write_names(self.identifiers))


class LoadSample(Statement):
    """``@load "path" as alias``"""
    __slots__ = ('path', 'alias')
    type = "LoadSample"
    fields = ('path', 'alias')

    def __init__(self, path, alias):
        super().__init__()
        self.path = path
        self.alias = alias

    def write_head(self):
        return '@load "{}" as {}'.format(self.path, self.alias)


class Call(element.TextElement, Statement):
    """``call <identifier>``"""
    __slots__ = ()
    type = "Call"

    @property
    def identifier(self):
        return self.head

    def write_head(self):
        return "call {}".format(self.head)


class Spawn(element.TextElement, Statement):
    """``spawn <identifier>``"""
    __slots__ = ()
    type = "Spawn"

    @property
    def identifier(self):
        return self.head

    def write_head(self):
        return "spawn {}".format(self.head)


class Sleep(Statement):
    """``sleep <value>``; the value is an :class:`~.expr.Expression`."""
    __slots__ = ('value',)
    type = "Sleep"
    fields = ('value',)

    def __init__(self, value):
        super().__init__()
        self.value = value

    def write_head(self):
        return "sleep {}".format(self.value.write())


class Pattern(Statement):
    """``pattern <name> with <instrument> = "<pattern>"``"""
    __slots__ = ('name', 'instrument', 'pattern')
    type = "Pattern"
    fields = ('name', 'instrument', 'pattern')

    def __init__(self, name, instrument, pattern):
        super().__init__()
        self.name = name
        self.instrument = instrument
        self.pattern = pattern

    def write_head(self):
        return 'pattern {} with {} = "{}"'.format(self.name, self.instrument, self.pattern)


class Keyframe(Statement):
    """``<N>% = <value>`` or ``<N>%: <value>`` in an ``automate`` block.

    The ``separator`` (``"="`` or ``":"``) is kept as written.

    """
    __slots__ = ('position', 'value', 'separator')
    type = "Keyframe"
    fields = ('position', 'value', 'separator')

    def __init__(self, position, value, separator="="):
        super().__init__()
        self.position = position
        self.value = value
        self.separator = separator

    def write_head(self):
        if self.separator == ":":
            return "{}: {}".format(self.position, self.value)
        return "{} = {}".format(self.position, self.value)


## triggers and calls

class Trigger(Statement):
    """A trigger like ``.kick 1/4 {velocity: 0.8}``.

    The ``name`` includes the leading dot. The ``duration`` is a
    :class:`~devafmt.duration.DurationValue` or None, and ``args`` is a list
    of :class:`~.expr.Expression` elements. Properties of an object argument
    are stored as separate :class:`~.expr.ObjectProperty` arguments; when
    written, adjacent properties are combined in one object again.

    """
    __slots__ = ('name', 'duration', 'args')
    type = "Trigger"
    fields = ('name', 'duration', 'args')

    def __init__(self, name, duration=None, args=()):
        super().__init__()
        self.name = name
        self.duration = duration
        self.args = list(args)

    def write_head(self):
        parts = [self.name]
        if self.duration is not None:
            parts.append(duration.to_string(self.duration))
        args = self.write_args()
        if args:
            parts.append(args)
        return " ".join(parts)

    def write_args(self):
        """Return the text of the arguments, or an empty string if there are none."""
        pieces = []
        properties = []
        for arg in self.args:
            if isinstance(arg, expr.ObjectProperty):
                properties.append(arg)
                continue
            if properties:
                pieces.append(expr.write_properties(properties))
                properties = []
            pieces.append(arg.write())
        if properties:
            pieces.append(expr.write_properties(properties))
        return ", ".join(pieces)


#: One call in an arrow chain: the method name and the list of argument texts.
ChainCall = collections.namedtuple("ChainCall", "method args")


class ArrowCall(Statement):
    """An arrow call like ``synth -> attack(10)``.

    The ``target`` and the argument texts in ``args`` are kept as written. If
    more calls are chained (``synth -> attack(10) -> release(200)``), the
    ``chain`` attribute is a list of :class:`ChainCall` tuples, one for every
    call (including the first, which also is in ``method`` and ``args``).
    Otherwise ``chain`` is None.

    A chain is written with every call after the first on a new line::

        synth -> attack(10)
            -> release(200)

    """
    __slots__ = ('target', 'method', 'args', 'chain')
    type = "ArrowCall"
    fields = ('target', 'method', 'args', 'chain')

    def __init__(self, target, method, args=(), chain=None):
        super().__init__()
        self.target = target
        self.method = method
        self.args = list(args)
        self.chain = None if chain is None else [ChainCall(*c) for c in chain]

    def write_head(self):
        if not self.chain:
            return "{} -> {}".format(self.target, write_call(self.method, self.args))
        first, *rest = self.chain
        lines = ["{} -> {}".format(self.target, write_call(*first))]
        lines.extend("    -> {}".format(write_call(*c)) for c in rest)
        return "\n".join(lines)


## simple lines

class Comment(element.TextElement, Statement):
    """A comment line, including the ``#``."""
    __slots__ = ()
    type = "Comment"

    @property
    def value(self):
        return self.head


class BlankLine(element.HeadElement, Statement):
    """An empty line."""
    __slots__ = ()
    type = "BlankLine"
    head = ""


class Unknown(element.TextElement, Statement):
    """A line that could not be read; it is written back unaltered."""
    __slots__ = ()
    type = "Unknown"

    @property
    def value(self):
        return self.head


## blocks

class Block(element.BlockElement, Statement):
    """Base class for the statements that have a body."""
    __slots__ = ()


class Loop(Block):
    """``loop <iterator>:``; the iterator is a NumberLiteral or Identifier."""
    __slots__ = ('iterator',)
    type = "Loop"
    fields = ('iterator',)

    def __init__(self, iterator, *children):
        super().__init__(*children)
        self.iterator = iterator

    def write_head(self):
        return "loop {}:".format(self.iterator.write())


class Group(Block):
    """``group <name>:``"""
    __slots__ = ('name',)
    type = "Group"
    fields = ('name',)

    def __init__(self, name, *children):
        super().__init__(*children)
        self.name = name

    def write_head(self):
        return "group {}:".format(self.name)


class On(Block):
    """``on <event>:``"""
    __slots__ = ('event',)
    type = "On"
    fields = ('event',)

    def __init__(self, event, *children):
        super().__init__(*children)
        self.event = event

    def write_head(self):
        return "on {}:".format(self.event)


class Fn(Block):
    """``fn <name>(<params>):``; ``params`` is a list of parameter names."""
    __slots__ = ('name', 'params')
    type = "Fn"
    fields = ('name', 'params')

    def __init__(self, name, params=(), *children):
        super().__init__(*children)
        self.name = name
        self.params = list(params)

    def write_head(self):
        return "fn {}({}):".format(self.name, ", ".join(self.params))


class For(Block):
    """``for <variable> in <iterator>:``"""
    __slots__ = ('variable', 'iterator')
    type = "For"
    fields = ('variable', 'iterator')

    def __init__(self, variable, iterator, *children):
        super().__init__(*children)
        self.variable = variable
        self.iterator = iterator

    def write_head(self):
        return "for {} in {}:".format(self.variable, self.iterator)


class Automate(Block):
    """``automate <target>:``, usually containing ``param`` blocks."""
    __slots__ = ('target',)
    type = "Automate"
    fields = ('target',)

    def __init__(self, target, *children):
        super().__init__(*children)
        self.target = target

    def write_head(self):
        return "automate {}:".format(self.target)


class Param(Block):
    """``param <name> {`` ... ``}``, usually containing keyframes."""
    __slots__ = ('name',)
    type = "Param"
    fields = ('name',)

    def __init__(self, name, *children):
        super().__init__(*children)
        self.name = name

    def write_head(self):
        return "param {} {{".format(self.name)

    def write_tail(self):
        return "}"


class If(Block):
    """``if <condition>:``

    The children are the body of the ``if`` branch. The ``else if`` branches
    are in the ``else_ifs`` list (of :class:`ElseIf` elements), and the
    ``else`` branch, if any, is the ``alternate`` :class:`Else` element.

    """
    __slots__ = ('condition', 'else_ifs', 'alternate')
    type = "If"
    fields = ('condition', 'else_ifs', 'alternate')

    def __init__(self, condition, *children):
        super().__init__(*children)
        self.condition = condition
        self.else_ifs = []
        self.alternate = None

    def write_head(self):
        return "if {}:".format(self.condition)

    def add_else_if(self, node):
        """Append an ElseIf branch."""
        node.parent = self
        self.else_ifs.append(node)

    def set_alternate(self, node):
        """Set the Else branch."""
        node.parent = self
        self.alternate = node

    def branches(self):
        """Yield the ElseIf branches and the Else branch."""
        yield from self.else_ifs
        if self.alternate is not None:
            yield self.alternate


class ElseIf(Block):
    """``else if <condition>:``"""
    __slots__ = ('condition',)
    type = "ElseIf"
    fields = ('condition',)

    def __init__(self, condition, *children):
        super().__init__(*children)
        self.condition = condition

    def write_head(self):
        return "else if {}:".format(self.condition)


class Else(Block):
    """``else:``"""
    __slots__ = ()
    type = "Else"

    def write_head(self):
        return "else:"


def with_alias(text, alias):
    """Return text with `` as <alias>`` appended if alias is set."""
    if alias:
        return "{} as {}".format(text, alias)
    return text


def write_names(names):
    """Return the text of a list of names in braces, e.g. ``{ a, b }``, or ``{}``."""
    if names:
        return "{{ {} }}".format(", ".join(names))
    return "{}"


def write_call(method, args):
    """Return the text of a call, e.g. ``attack(10)``."""
    return "{}({})".format(method, ", ".join(args))

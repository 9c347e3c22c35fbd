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
The parser, reading Devalang source text into a tree of elements.

Devalang is read line by line. Every statement is on its own line, except
that a value between braces (or the arguments between the parentheses of an
arrow call) may continue on the following lines. Block statements like
``loop 4:`` contain the lines below them that are indented further; the
indent of the first line of the body determines which lines belong to the
block.

Use the :func:`parse` function::

    >>> from devafmt.parser import parse
    >>> doc = parse('loop 4:\\n  .kick 1/4\\n  .snap\\n')
    >>> loop = doc[0]
    >>> loop.iterator.value
    4
    >>> [t.name for t in loop]
    ['.kick', '.snap']
    >>> loop[0].duration
    BeatDuration('1/4')

The parser never raises an exception: a line that can't be read becomes an
:class:`~devafmt.dom.deva.Unknown` element, that is printed back unaltered.

"""

import logging
import re

from . import duration
from .dom import deva, expr, read, util


logger = logging.getLogger(__name__)


_HEADER_RE = re.compile(r'(if|else|group|loop|on|fn|for|automate|pattern)\b')
_ELSE_IF_RE = re.compile(r'else\s+if\s+(.+?)\s*:')
_ELSE_RE = re.compile(r'else\s*:')

_BPM_RE = re.compile(r'bpm\s+(\S+)')
_BANK_RE = re.compile(r'bank\s+(\S+)(?:\s+as\s+(\S+))?')
_USE_RE = re.compile(r'@use\s+(\S+)(?:\s+as\s+(\S+))?')
_LET_RE = re.compile(r'let\s+([^\s=]+)\s*=\s*(.*)')
_ON_RE = re.compile(r'on\s+(.+?)\s*:')
_FN_RE = re.compile(r'fn\s+([^\s(]+)\s*\((.*)\)\s*:')
_EMIT_RE = re.compile(r'emit\s+(\S+)(?:\s+(.*))?')
_PRINT_RE = re.compile(r'print\s+(.+)')
_IF_RE = re.compile(r'if\s+(.+?)\s*:')
_LOOP_RE = re.compile(r'loop\s+(\d+(?:\.\d+)?|[A-Za-z_]\w*)\s*:')
_TRIGGER_RE = re.compile(r'(\.[^\s{(,]+)\s*(.*)')
_IMPORT_RE = re.compile(r'@import\s*\{([^}]*)\}\s*from\s*"([^"]*)"')
_EXPORT_RE = re.compile(r'@export\s*\{([^}]*)\}')
_LOAD_RE = re.compile(r'@load\s+"([^"]*)"\s+as\s+(\S+)')
_GROUP_RE = re.compile(r'group\s+([^\s:]+)\s*:')
_CALL_RE = re.compile(r'call\s+(\S+)')
_SPAWN_RE = re.compile(r'spawn\s+(\S+)')
_SLEEP_RE = re.compile(r'sleep\s+(.+)')
_PATTERN_RE = re.compile(r'pattern\s+(\S+)\s+with\s+(\S+)\s*=\s*"(.*)"')
_FOR_RE = re.compile(r'for\s+(\S+)\s+in\s+(.+?)\s*:')
_AUTOMATE_RE = re.compile(r'automate\s+(.+?)\s*:')
_PARAM_RE = re.compile(r'param\s+(\S+)\s*\{')
_KEYFRAME_RE = re.compile(r'(\d+(?:\.\d+)?%)\s*([=:])\s*(.+)')
_METHOD_RE = re.compile(r'([\w.]+)\s*\((.*)\)', re.DOTALL)


class Session:
    """The source text of one parse run.

    The :class:`~devafmt.dom.deva.Program` returned by :func:`parse` keeps a
    reference to its Session, so the printer can reuse the original lines.

    ``text`` is the full text, ``lines`` the list of lines, without newlines.
    A newline at the end of the text does not start another line.

    """
    __slots__ = ('text', 'lines')

    def __init__(self, text):
        self.text = text
        lines = text.split('\n')
        if lines[-1] == '':
            del lines[-1]
        self.lines = lines

    def __repr__(self):
        return '<{} ({} lines)>'.format(type(self).__name__, len(self.lines))


class BlockContext:
    """An open block statement while parsing.

    ``kind`` is the type of the block, ``indent`` the indent of its header
    line and ``node`` the element that receives the body statements.
    ``body_indent`` is None until the first non-blank line of the body is
    read, and then is set to its indent. For ``If`` and ``ElseIf`` blocks,
    ``if_node`` is the :class:`~devafmt.dom.deva.If` element the ``else``
    branches are added to.

    """
    __slots__ = ('kind', 'indent', 'node', 'body_indent', 'if_node')

    def __init__(self, kind, indent, node, if_node=None):
        self.kind = kind
        self.indent = indent
        self.node = node
        self.body_indent = None
        self.if_node = if_node

    def __repr__(self):
        return '<{} {} indent={} body_indent={}>'.format(
            type(self).__name__, self.kind, self.indent, self.body_indent)

    def is_flat(self):
        """Return True if the body is not indented further than the header."""
        return self.body_indent == self.indent

    def contains(self, indent):
        """Return True if a line with the indent still belongs to this block."""
        if self.body_indent is None:
            return indent >= self.indent
        return indent >= self.body_indent


class Parser:
    """Reads Devalang text and builds a :class:`~devafmt.dom.deva.Program`.

    Call :meth:`parse` with the text. The statement readers are tried in the
    order of the :attr:`readers` tuple; the first one that returns an element
    wins. A reader gets the stripped text of the line and may read
    continuation lines, by setting :attr:`end` to the index of the last line
    it used.

    """
    readers = (
        'comment',
        'bpm',
        'bank',
        'use',
        'let',
        'on',
        'fn',
        'emit',
        'print',
        'if',
        'loop',
        'trigger',
        'import',
        'export',
        'load',
        'group',
        'call',
        'spawn',
        'sleep',
        'pattern',
        'for',
        'automate',
        'param',
        'keyframe',
        'arrow_call',
    )

    def __init__(self):
        self.lines = []
        self.root = None
        self.stack = []
        self.index = 0      #: the index of the current line
        self.end = 0        #: the index of the last line used by the current statement
        self.indent = 0     #: the indent of the current line

    def parse(self, text):
        """Parse the text and return a Program element."""
        session = Session(text)
        self.lines = session.lines
        self.root = deva.Program(session=session)
        self.stack = []
        self.index = 0
        while self.index < len(self.lines):
            self.parse_line()
            self.index = self.end + 1
        self.stack = []
        return self.root

    def parse_line(self):
        """Read the statement at the current line."""
        line = self.lines[self.index]
        leading = util.leading_whitespace(line.rstrip('\r'))
        content = line.strip()
        self.indent = indent = len(leading)
        self.end = self.index

        if not content:
            if self.stack and self.stack[-1].is_flat():
                self.stack.pop()
            node = deva.BlankLine()
            if self.stack:
                self.stack[-1].node.append(node)
            else:
                self.root.append(node)
            node.set_origin(self.index, leading)
            return

        if _HEADER_RE.match(content) and not content.startswith('else'):
            while self.stack and self.stack[-1].is_flat() and self.stack[-1].indent == indent:
                self.stack.pop()

        if content.startswith('else'):
            node = self.read_else(content)
            if node is not None:
                node.set_origin(self.index, leading)
                return
        elif content == '}':
            if self.close_param():
                return
            logger.debug("line %d: no param block to close", self.index + 1)
            node = deva.Unknown(content)
            self.push_to_body_or_block(node)
            node.set_origin(self.index, leading)
            return

        while self.stack and not self.stack[-1].contains(indent):
            self.stack.pop()

        node = self.read_statement(content)
        self.push_to_body_or_block(node)
        node.set_origin(self.index, leading, self.end)
        if node.is_block:
            self.stack.append(BlockContext(node.type, indent, node,
                                           node if isinstance(node, deva.If) else None))

    def read_statement(self, content):
        """Return the element for the statement, an Unknown if not recognized."""
        for name in self.readers:
            node = getattr(self, 'read_' + name)(content)
            if node is not None:
                return node
        logger.debug("line %d: unknown statement: %r", self.index + 1, content)
        return deva.Unknown(content)

    def push_to_body_or_block(self, node):
        """Add the node to the innermost block that contains the current line.

        If the innermost block has no body indent yet, it is set to the
        current indent. If no open block contains the line, the node is
        appended to the root.

        """
        for context in reversed(self.stack):
            if context.body_indent is None:
                context.body_indent = self.indent
                context.node.append(node)
                return
            elif context.body_indent <= self.indent:
                context.node.append(node)
                return
        self.root.append(node)

    def read_else(self, content):
        """Handle ``else if <cond>:`` and ``else:`` lines.

        The branch is added to the innermost open ``if`` (or ``else if``)
        block with the same indent, and its block is opened. Returns the
        branch element, or None if the line is not such a branch or if there
        is no ``if`` to continue; in that case the line is read as a normal
        statement (and will become Unknown).

        """
        m = _ELSE_IF_RE.fullmatch(content)
        if m:
            node = deva.ElseIf(m.group(1))
        elif _ELSE_RE.fullmatch(content):
            node = deva.Else()
        else:
            return
        for index in range(len(self.stack) - 1, -1, -1):
            context = self.stack[index]
            if context.if_node is not None and context.indent == self.indent:
                break
        else:
            logger.debug("line %d: %r without if", self.index + 1, content)
            return
        if_node = context.if_node
        if isinstance(node, deva.Else):
            if if_node.alternate is not None:
                logger.debug("line %d: second else for the same if", self.index + 1)
                return
            if_node.set_alternate(node)
            del self.stack[index:]
            self.stack.append(BlockContext(node.type, self.indent, node))
        else:
            if_node.add_else_if(node)
            del self.stack[index:]
            self.stack.append(BlockContext(node.type, self.indent, node, if_node))
        return node

    def close_param(self):
        """Close the innermost open param block; return False if there is none."""
        for index in range(len(self.stack) - 1, -1, -1):
            context = self.stack[index]
            if isinstance(context.node, deva.Param):
                context.node.end_line = self.index
                del self.stack[index:]
                return True
        return False

    def continue_lines(self, text, bracket, end):
        """Add lines to text while ``bracket`` is open in it.

        ``end`` is the index of the last line that is in the text. The added
        lines lose the current line's indent. Returns the tuple (text, end).

        """
        while bracket in read.open_brackets(text) and end + 1 < len(self.lines):
            end += 1
            text += '\n' + util.dedent(self.lines[end], self.indent)
        return text, end

    ## the statement readers, in order of priority

    def read_comment(self, content):
        if content.startswith('#'):
            return deva.Comment(content)

    def read_bpm(self, content):
        m = _BPM_RE.fullmatch(content)
        if m:
            return deva.BpmDeclaration(m.group(1))

    def read_bank(self, content):
        m = _BANK_RE.fullmatch(content)
        if m:
            return deva.BankDeclaration(m.group(1), m.group(2))

    def read_use(self, content):
        m = _USE_RE.fullmatch(content)
        if m:
            return deva.UsePlugin(m.group(1), m.group(2))

    def read_let(self, content):
        """Read a let declaration; a value with braces may continue on the next lines."""
        m = _LET_RE.fullmatch(content)
        if m:
            name, value = m.groups()
            value, self.end = self.continue_lines(value, '{', self.end)
            if '\n' in value:
                return deva.LetDeclaration(name, expr.RawLiteral(value))
            return deva.LetDeclaration(name, read.parse_value(value))

    def read_on(self, content):
        m = _ON_RE.fullmatch(content)
        if m:
            return deva.On(m.group(1))

    def read_fn(self, content):
        m = _FN_RE.fullmatch(content)
        if m:
            return deva.Fn(m.group(1), read.split_call_arguments(m.group(2)))

    def read_emit(self, content):
        m = _EMIT_RE.fullmatch(content)
        if m:
            return deva.Emit(m.group(1), m.group(2))

    def read_print(self, content):
        m = _PRINT_RE.fullmatch(content)
        if m:
            return deva.Print(m.group(1))

    def read_if(self, content):
        m = _IF_RE.fullmatch(content)
        if m:
            return deva.If(m.group(1))

    def read_loop(self, content):
        m = _LOOP_RE.fullmatch(content)
        if m:
            return deva.Loop(read.parse_value(m.group(1)))

    def read_trigger(self, content):
        """Read a trigger; an object argument may continue on the next lines."""
        m = _TRIGGER_RE.fullmatch(content)
        if m:
            name, args = m.groups()
            args, self.end = self.continue_lines(args, '{', self.end)
            dur, args = read_trigger_arguments(args)
            return deva.Trigger(name, dur, args)

    def read_import(self, content):
        m = _IMPORT_RE.fullmatch(content)
        if m:
            return deva.ImportStatement(read.split_call_arguments(m.group(1)), m.group(2))

    def read_export(self, content):
        m = _EXPORT_RE.fullmatch(content)
        if m:
            return deva.ExportStatement(read.split_call_arguments(m.group(1)))

    def read_load(self, content):
        m = _LOAD_RE.fullmatch(content)
        if m:
            return deva.LoadSample(m.group(1), m.group(2))

    def read_group(self, content):
        m = _GROUP_RE.fullmatch(content)
        if m:
            return deva.Group(m.group(1))

    def read_call(self, content):
        m = _CALL_RE.fullmatch(content)
        if m:
            return deva.Call(m.group(1))

    def read_spawn(self, content):
        m = _SPAWN_RE.fullmatch(content)
        if m:
            return deva.Spawn(m.group(1))

    def read_sleep(self, content):
        m = _SLEEP_RE.fullmatch(content)
        if m:
            return deva.Sleep(read.parse_value(m.group(1)))

    def read_pattern(self, content):
        m = _PATTERN_RE.fullmatch(content)
        if m:
            return deva.Pattern(*m.groups())

    def read_for(self, content):
        m = _FOR_RE.fullmatch(content)
        if m:
            return deva.For(m.group(1), m.group(2))

    def read_automate(self, content):
        m = _AUTOMATE_RE.fullmatch(content)
        if m:
            return deva.Automate(m.group(1))

    def read_param(self, content):
        m = _PARAM_RE.fullmatch(content)
        if m:
            return deva.Param(m.group(1))

    def read_keyframe(self, content):
        m = _KEYFRAME_RE.fullmatch(content)
        if m:
            position, separator, value = m.groups()
            return deva.Keyframe(position, value, separator)

    def read_arrow_call(self, content):
        """Read an arrow call or a chain of arrow calls.

        The arguments may continue on the next lines while a parenthesis is
        open, and following lines that start with ``->`` continue the chain.

        """
        if '->' not in content:
            return
        text, end = self.continue_lines(content, '(', self.end)
        while end + 1 < len(self.lines) and self.lines[end + 1].lstrip().startswith('->'):
            end += 1
            text += '\n' + util.dedent(self.lines[end], self.indent)
            text, end = self.continue_lines(text, '(', end)
        target, *segments = read.split_chain(text)
        if not target or not segments:
            return
        calls = []
        for segment in segments:
            m = _METHOD_RE.fullmatch(segment)
            if not m:
                return
            calls.append(deva.ChainCall(m.group(1), read.split_call_arguments(m.group(2))))
        self.end = end
        method, args = calls[0]
        return deva.ArrowCall(target, method, args, calls if len(calls) > 1 else None)


def read_trigger_arguments(text):
    """Read the arguments text of a trigger.

    Returns a tuple (duration, args). The duration is the first argument that
    looks like a duration (``1/4``, ``200`` or ``auto``), or the value of the
    first ``duration`` key in an object argument; it is None if there is no
    such argument. The args are a list of expression elements; the properties
    of object arguments are listed separately, as ObjectProperty elements.

    """
    dur = None
    args = []
    for token in read.split_arguments(text):
        if dur is None:
            dur = duration.from_string(token)
            if dur is not None:
                continue
        value = read.parse_value(token)
        if isinstance(value, expr.ObjectLiteral) and len(value):
            for prop in list(value):
                if dur is None and prop.key == "duration" and prop.value is not None:
                    dur = duration_from_expression(prop.value)
                    if dur is not None:
                        continue
                args.append(prop)
        else:
            args.append(value)
    return dur, args


def duration_from_expression(node):
    """Return a duration value for a NumberLiteral, Identifier or StringLiteral element.

    Returns None if the element does not describe a duration.

    """
    if isinstance(node, expr.NumberLiteral):
        return duration.Milliseconds(node.head)
    elif isinstance(node, (expr.Identifier, expr.StringLiteral)):
        return duration.from_string(node.head)


def parse(text):
    """Parse Devalang text and return a :class:`~devafmt.dom.deva.Program`.

    The Program's ``session`` attribute holds the source text and lines.

    """
    return Parser().parse(text)

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
The printer, writing a tree of elements back to Devalang text.

Use :func:`print_node` to get the text of any element. When a
:class:`~devafmt.dom.deva.Program` that was created by the parser is
printed, its original source lines are reused: only the lines of the
statements that can be written on one line are replaced, and only if the
new line does not exceed the print width. All other lines, like comments,
blank lines, block headers and statements that span more lines, are kept
as they were. This makes formatting a document twice give the same result
as formatting it once::

    >>> from devafmt.parser import parse
    >>> from devafmt.printer import print_node
    >>> print_node(parse('bpm   120\\n.kick  1/4  {velocity: 0.8}\\n'))
    'bpm 120\\n.kick 1/4 {velocity: 0.8}\\n'

A Program that was built by hand (without session) is written entirely from
the tree.

"""

import logging

from .datatypes import PrintOptions
from .dom import deva, element, util


logger = logging.getLogger(__name__)


def print_node(node, options=None, recurse=None):
    """Return the text of the node.

    ``options`` is a :class:`~devafmt.datatypes.PrintOptions` instance, a
    dictionary (camelCase keys like ``printWidth`` are accepted) or None.

    ``recurse``, if given, is called with a child element and must return its
    text; it is used for the statements in the body of a block element. By
    default, the children are printed with this function.

    A printed Program always ends with a newline (unless it is empty). Other
    elements are returned without trailing newline. Raises TypeError if the
    node is not an element.

    """
    if not isinstance(node, element.Element):
        raise TypeError("can't print {}".format(repr(node)))
    options = PrintOptions.coerce(options)
    if recurse is None:
        recurse = lambda n: print_node(n, options)
    if isinstance(node, deva.Program):
        if node.session is not None:
            return print_program(node, options, recurse)
        text = print_block(node, options, recurse)
        return text + '\n' if len(node) else ''
    elif node.is_block:
        return print_block_element(node, options, recurse)
    return node.write()


def print_block(nodes, options=None, recurse=None):
    """Return the text of the nodes, joined with newlines.

    A :class:`~devafmt.dom.deva.BlankLine` becomes an empty line.

    """
    if recurse is None:
        options = PrintOptions.coerce(options)
        recurse = lambda n: print_node(n, options)
    return '\n'.join(recurse(n) for n in nodes)


def print_block_element(node, options, recurse):
    """Return the text of a block element.

    This is the head, the indented body, the branches (the ``else``
    parts of an ``if``) and the tail, if any.

    """
    lines = [node.write_head()]
    if len(node):
        lines.append(util.indent_text(print_block(node, options, recurse), options.tab_width))
    lines.extend(recurse(n) for n in node.branches())
    tail = node.write_tail()
    if tail is not None:
        lines.append(tail)
    return '\n'.join(lines)


def replaceable(node):
    """Return True if the source line of the node may be replaced by its text.

    This is the case for statements that were read from one line, except for
    block statements and chained arrow calls.

    """
    if node.line is None or node.is_block or node.is_multiline():
        return False
    elif isinstance(node, deva.ArrowCall) and node.chain:
        return False
    return True


def print_program(program, options, recurse):
    """Return the text of a Program, reusing the lines of its session."""
    lines = list(program.session.lines)
    for node in program.walk():
        if node is program or not replaceable(node):
            continue
        text = recurse(node)
        if '\n' in text:
            continue
        new = node.leading + text
        if len(new) > options.print_width:
            logger.debug("line %d: keeping line, formatted line exceeds %d characters",
                         node.line + 1, options.print_width)
            continue
        if lines[node.line].endswith('\r'):
            new += '\r'
        lines[node.line] = new
    if not lines:
        return ''
    return '\n'.join(lines) + '\n'

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
Utility functions for whitespace and indentation.
"""

import re


_LEADING_RE = re.compile(r'\s*')


def leading_whitespace(line):
    """Return the whitespace the line starts with."""
    return _LEADING_RE.match(line).group()


def dedent(line, width):
    """Remove at most ``width`` leading whitespace characters from the line.

    Used for the continuation lines of a statement, so they become relative to
    the statement's own indent::

        >>> dedent('      a: 1', 4)
        '  a: 1'
        >>> dedent(' }', 4)
        '}'

    """
    return line[min(width, len(leading_whitespace(line))):]


def indent_text(text, width):
    """Indent every non-empty line of the text with ``width`` spaces.

    Empty lines stay empty::

        >>> indent_text('a\\n\\nb', 2)
        '  a\\n\\n  b'

    """
    indent = ' ' * width
    return '\n'.join(indent + line if line else line for line in text.split('\n'))

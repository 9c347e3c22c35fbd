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
The devafmt module.

Reads Devalang (``.deva``) source text into a tree of elements and writes it
back, formatted::

    >>> import devafmt
    >>> devafmt.format_text('bpm   120\\n')
    'bpm 120\\n'

"""

from .pkginfo import version, version_string
from .parser import parse
from .printer import print_node


__all__ = ('parse', 'print_node', 'format_text', 'version', 'version_string')


def format_text(text, options=None):
    """Convenience function to parse ``text`` and return it formatted.

    ``options`` is the same as for :func:`~devafmt.printer.print_node`.

    """
    return print_node(parse(text), options)

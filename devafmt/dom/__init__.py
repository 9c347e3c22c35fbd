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
This module defines a DOM (Document Object Model) for Devalang source files.

The Devalang DOM is a simple tree structure where every statement is
represented by an element; block statements like ``loop`` or ``group`` have
the statements of their body as child elements.

This DOM is used in two ways:

1. It is built by the :mod:`~devafmt.parser` from an existing Devalang
   source document. Every element remembers the source line it was read
   from, so the :mod:`~devafmt.printer` can reformat a document while leaving
   untouched lines alone.

2. Building a Devalang document from scratch. The elements can be printed
   using :func:`~devafmt.printer.print_node`.

"""

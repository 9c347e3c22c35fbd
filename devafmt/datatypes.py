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
Some generic datatypes used by devafmt.

The :class:`PrintOptions` class holds the preferences of the printer.

"""

import re


class Properties:
    """A dictionary-like object that accesses keys as attributes.

    Example::

        >>> from devafmt.datatypes import Properties
        >>> p = Properties(print_width=100)
        >>> p
        <Properties print_width=100>
        >>> p.print_width
        100
        >>> p.tab_width is None
        True

    Accessing a non-existent property name returns None. Use :func:`vars` to
    get a dictionary view on the properties. An empty Properties object
    evaluates to False.

    """
    def __init__(self, **kwargs):
        self.__dict__.update(kwargs)

    def __bool__(self):
        return bool(vars(self))

    def __repr__(self):
        def fields():
            yield type(self).__name__
            yield " ".join(("{}={}".format(
                name, repr(value)) for name, value in vars(self).items()))
        return "<{}>".format(" ".join(f for f in fields() if f))

    def __getattr__(self, name):
        return None

    def __eq__(self, other):
        if isinstance(other, Properties):
            return vars(self) == vars(other)
        return NotImplemented


class PrintOptions(Properties):
    """The preferences used when printing a Devalang document.

    Properties that are not set fall back to the values in :attr:`defaults`:

    ``print_width``
        the maximum line length a reformatted line may have (default 80).
        Lines that would become longer are kept as they were in the source.

    ``tab_width``
        the number of spaces used to indent the body of a block statement,
        when a block is printed from the tree (default 2).

    Example::

        >>> from devafmt.datatypes import PrintOptions
        >>> PrintOptions.coerce({'printWidth': 100}).print_width
        100
        >>> PrintOptions().tab_width
        2

    """
    defaults = {
        'print_width': 80,
        'tab_width': 2,
    }

    def __getattr__(self, name):
        return self.defaults.get(name)

    @classmethod
    def coerce(cls, options=None):
        """Return a PrintOptions instance for ``options``.

        ``options`` may be None, a PrintOptions or other :class:`Properties`
        instance, or a dictionary. Dictionary keys may be written in
        camelCase, such as ``printWidth``, like formatting hosts pass them.
        Keys that are not known in :attr:`defaults` are kept but not used.

        """
        if isinstance(options, cls):
            return options
        if options is None:
            return cls()
        if isinstance(options, Properties):
            options = vars(options)
        return cls(**{snake_case(key): value for key, value in options.items()})


def snake_case(name):
    """Return the camelCase ``name`` in snake_case, e.g. ``printWidth`` -> ``print_width``."""
    return re.sub(r'(?<=[a-z0-9])([A-Z])', r'_\1', name).lower()

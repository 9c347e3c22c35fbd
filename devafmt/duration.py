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


r"""
Functions and types to deal with the durations of Devalang triggers.

A trigger like ``.kick 1/4`` can have one duration, which is one of three
kinds:

* a :class:`BeatDuration`, a fraction of a beat, written like ``1/4``,
* :class:`Milliseconds`, a bare number like ``200`` or ``62.5``,
* :class:`AutoDuration`, the literal ``auto``.

The duration value keeps the text as written, so it can be written back
unaltered. Example::

    >>> from devafmt.duration import from_string, to_string
    >>> from_string('1/4')
    BeatDuration('1/4')
    >>> from_string('1/4').fraction
    Fraction(1, 4)
    >>> from_string('200')
    Milliseconds('200')
    >>> to_string(from_string('auto'))
    'auto'
    >>> from_string('kick') is None
    True

"""

import decimal
import fractions
import re


_BEAT_RE = re.compile(r'\d+/\d+')
_NUMBER_RE = re.compile(r'\d+(?:\.\d+)?')


class DurationValue:
    """Base class for the duration values."""
    __slots__ = ()

    type = None     #: the name of the duration kind, e.g. ``"BeatDuration"``
    value = None

    def __repr__(self):
        return '{}({})'.format(type(self).__name__, repr(self.value))

    def __eq__(self, other):
        if isinstance(other, DurationValue):
            return type(self) is type(other) and self.value == other.value
        return NotImplemented

    def __hash__(self):
        return hash((type(self), self.value))


class BeatDuration(DurationValue):
    """A fraction of a beat, e.g. ``BeatDuration("1/4")``.

    The value is the text as written. Raises a TypeError if the text does not
    look like a fraction.

    """
    __slots__ = ('value',)
    type = "BeatDuration"

    def __init__(self, value):
        if not isinstance(value, str) or not _BEAT_RE.fullmatch(value):
            raise TypeError("invalid beat duration: {}".format(repr(value)))
        self.value = value

    @property
    def fraction(self):
        """The value as a :class:`~fractions.Fraction`.

        Raises ZeroDivisionError for a zero denominator, like ``1/0``.

        """
        return fractions.Fraction(self.value)


class Milliseconds(DurationValue):
    """A duration in milliseconds.

    The value is the text of the number as it was written, like ``'62.5'``,
    or an int or float for a duration created by hand. Two Milliseconds
    compare equal when they are written the same.

    """
    __slots__ = ('value',)
    type = "Milliseconds"

    def __init__(self, value):
        if isinstance(value, str):
            if not is_number(value):
                raise TypeError("invalid milliseconds value: {}".format(repr(value)))
        elif isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError("invalid milliseconds value: {}".format(repr(value)))
        self.value = value

    def __eq__(self, other):
        if isinstance(other, Milliseconds):
            return to_string(self) == to_string(other)
        return super().__eq__(other)

    def __hash__(self):
        return hash((Milliseconds, to_string(self)))

    @property
    def number(self):
        """The value as an int or float.

        Raises ValueError for an integer that has too many digits to convert.

        """
        return to_number(self.value) if isinstance(self.value, str) else self.value


class AutoDuration(DurationValue):
    """The ``auto`` duration."""
    __slots__ = ()
    type = "AutoDuration"
    value = "auto"

    def __repr__(self):
        return 'AutoDuration()'


def is_number(text):
    """Return True if the text is a decimal number like ``'4'`` or ``'1.5'``."""
    return bool(_NUMBER_RE.fullmatch(text))


def to_number(text):
    """Return an int or float for a decimal number text like ``'4'`` or ``'1.5'``."""
    return float(text) if '.' in text else int(text)


def format_number(value):
    """Return the text for a number.

    A text (the number as it was written) is returned unaltered. Floats that
    happen to be integral are written without fraction, and other floats are
    written without exponent::

        >>> format_number('1.50')
        '1.50'
        >>> format_number(2.0)
        '2'
        >>> format_number(0.00001)
        '0.00001'

    """
    if isinstance(value, str):
        return value
    elif isinstance(value, float):
        if value.is_integer():
            return repr(int(value))
        return format(decimal.Decimal(repr(value)), 'f')
    return repr(value)


def from_string(text):
    """Return a duration value for the text, or None if it is no duration.

    A fraction like ``1/4`` is a beat duration, a bare number is a duration in
    milliseconds and ``auto`` is the automatic duration. Surrounding
    whitespace is ignored.

    """
    text = text.strip()
    if _BEAT_RE.fullmatch(text):
        return BeatDuration(text)
    elif _NUMBER_RE.fullmatch(text):
        return Milliseconds(text)
    elif text == "auto":
        return AutoDuration()


def to_string(value):
    """Return the textual representation of a duration value.

    This is the inverse of :func:`from_string`::

        >>> to_string(Milliseconds(62.5))
        '62.5'

    """
    if isinstance(value, Milliseconds):
        return format_number(value.value)
    return value.value

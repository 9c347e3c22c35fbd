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
Test devafmt.duration.
"""

from fractions import Fraction

### find devafmt
import sys
sys.path.insert(0, '.')

import pytest

from devafmt.duration import *


def test_main():

    assert from_string("1/4") == BeatDuration("1/4")
    assert from_string(" 3/8 ").fraction == Fraction(3, 8)
    assert from_string("200") == Milliseconds(200)
    assert from_string("62.5") == Milliseconds(62.5)
    assert from_string("auto") == AutoDuration()
    assert from_string("kick") is None
    assert from_string("1/") is None
    assert from_string("") is None

    assert from_string("1/4").type == "BeatDuration"
    assert from_string("200").type == "Milliseconds"
    assert from_string("auto").type == "AutoDuration"

    assert BeatDuration("1/4") != BeatDuration("2/8")
    assert BeatDuration("1/4").fraction == BeatDuration("2/8").fraction
    assert Milliseconds(200) == Milliseconds(200.0)
    assert Milliseconds(200) != BeatDuration("1/4")
    assert len({AutoDuration(), AutoDuration()}) == 1

    assert to_string(BeatDuration("3/8")) == "3/8"
    assert to_string(Milliseconds(200)) == "200"
    assert to_string(Milliseconds(2.0)) == "2"
    assert to_string(Milliseconds(62.5)) == "62.5"
    assert to_string(AutoDuration()) == "auto"

    assert repr(BeatDuration("1/4")) == "BeatDuration('1/4')"
    assert repr(AutoDuration()) == "AutoDuration()"

    big = "9" * 5000
    assert to_string(from_string(big)) == big
    assert from_string("62.50") != Milliseconds(62.5)
    assert from_string("62.5").number == 62.5
    assert from_string("200").number == 200
    assert to_string(Milliseconds(0.00001)) == "0.00001"

    assert format_number(0.5) == "0.5"
    assert format_number("1.50") == "1.50"
    assert format_number(1e-07) == "0.0000001"
    assert format_number(4) == "4"
    assert isinstance(to_number("4"), int)
    assert to_number("1.5") == 1.5

    with pytest.raises(TypeError):
        BeatDuration("quarter")
    with pytest.raises(TypeError):
        Milliseconds("fast")
    with pytest.raises(TypeError):
        Milliseconds(True)


if __name__ == "__main__" and 'test_main' in globals():
    test_main()

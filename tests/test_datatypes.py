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
Test devafmt.datatypes.
"""

### find devafmt
import sys
sys.path.insert(0, '.')

from devafmt.datatypes import Properties, PrintOptions, snake_case


def check_properties():
    p = Properties(print_width=100)
    assert p.print_width == 100
    assert p.tab_width is None
    assert repr(p) == "<Properties print_width=100>"
    assert vars(p) == {'print_width': 100}
    assert p == Properties(print_width=100)
    assert p != Properties(print_width=80)
    assert not Properties()
    assert repr(Properties()) == "<Properties>"


def check_print_options():
    o = PrintOptions()
    assert o.print_width == 80
    assert o.tab_width == 2
    assert o.unknown is None

    o = PrintOptions.coerce({'printWidth': 100, 'tabWidth': 4})
    assert o.print_width == 100
    assert o.tab_width == 4
    assert PrintOptions.coerce(o) is o
    assert PrintOptions.coerce(None).print_width == 80
    assert PrintOptions.coerce({'print_width': 60}).print_width == 60
    assert PrintOptions.coerce(Properties(tab_width=8)).tab_width == 8
    assert PrintOptions.coerce({'useTabs': True}).use_tabs is True

    assert snake_case('printWidth') == 'print_width'
    assert snake_case('tab_width') == 'tab_width'


def test_main():
    check_properties()
    check_print_options()


if __name__ == "__main__" and 'test_main' in globals():
    test_main()

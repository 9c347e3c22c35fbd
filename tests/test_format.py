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
Test formatting documents: parsing and printing with reuse of the source lines.
"""

### find devafmt
import sys
sys.path.insert(0, '.')

import devafmt
from devafmt import format_text, parse, print_node


DOCUMENT = r'''# drums
bpm   120
bank 808 as drums
@use devaloop.reverb as rv
@import {kick,snare} from "./kit.deva"
@load "./clap.wav" as clap

let cfg = {
  gain: 0.8,
  mode: "soft"
}
let   speed = 2

group main:
  loop 4:
    .drums.kick   1/4 {velocity: 0.9}
    .drums.snare auto
  if speed > 1:
    .clap 1/8
  else if speed > 0:
    sleep   250
  else:
    print "slow"

on beat:
    emit tick {n:1}

fn play(a,b):
  call main
  spawn main

for i in [1, 2, 3]:
  .hat 1/16

automate synth:
  param volume {
    0% = 0.0
    100%:   1.0
  }

pattern p with drums.kick = "x--x"
synth -> attack(10) -> release(200)
lead -> cutoff(
  800
)
   ???not a thing???
'''


FORMATTED = r'''# drums
bpm 120
bank 808 as drums
@use devaloop.reverb as rv
@import { kick, snare } from "./kit.deva"
@load "./clap.wav" as clap

let cfg = {
  gain: 0.8,
  mode: "soft"
}
let speed = 2

group main:
  loop 4:
    .drums.kick 1/4 {velocity: 0.9}
    .drums.snare auto
  if speed > 1:
    .clap 1/8
  else if speed > 0:
    sleep 250
  else:
    print "slow"

on beat:
    emit tick {n:1}

fn play(a,b):
  call main
  spawn main

for i in [1, 2, 3]:
  .hat 1/16

automate synth:
  param volume {
    0% = 0.0
    100%: 1.0
  }

pattern p with drums.kick = "x--x"
synth -> attack(10) -> release(200)
lead -> cutoff(
  800
)
   ???not a thing???
'''


def check_idempotent(text, options=None):
    """Return True if formatting the formatted text does not change it."""
    once = format_text(text, options)
    return format_text(once, options) == once


def check_document():
    assert format_text(DOCUMENT) == FORMATTED
    assert format_text(FORMATTED) == FORMATTED
    assert check_idempotent(DOCUMENT)
    assert len(FORMATTED.splitlines()) == len(DOCUMENT.splitlines())


def check_properties():
    # nesting is kept as it was
    text = "loop 4:\n  .kick\n  .snap\n"
    assert format_text(text) == text

    # a final newline is always present
    assert format_text("bpm 120") == "bpm 120\n"
    assert format_text("bpm 120\n") == "bpm 120\n"
    assert format_text("bpm 120\n\n") == "bpm 120\n\n"
    assert format_text("") == ""

    # object literals
    text = 'let x = {a: 1, b: "s"}\n'
    assert format_text(text) == text
    assert format_text('let  x = {a:1,b:"s"}\n') == text

    # triggers with a duration key
    assert format_text(".kick {duration: 200}\n") == ".kick 200\n"

    # empty name lists
    assert format_text('@import {  } from "x"\n') == '@import {} from "x"\n'
    assert format_text('@export { }\n') == '@export {}\n'

    # unknown lines pass through
    text = "  ???not a thing???\n"
    assert format_text(text) == text

    # indent of statements is kept
    assert format_text("group g:\n    .kick   1/4\n") == "group g:\n    .kick 1/4\n"

    # chains keep their source lines, but print on more lines by themselves
    text = "synth -> attack(10) -> release(200)\n"
    assert format_text(text) == text
    assert print_node(parse(text)[0]) == "synth -> attack(10)\n    -> release(200)"
    text = "synth -> attack(10)\n    -> release(200)\n"
    assert format_text(text) == text


def check_numbers():
    """Numbers keep the text they were written with."""
    for text in (
        'let n = 0.00001\n',
        'let n = ' + '9' * 5000 + '\n',
        'let n = ' + '1' * 400 + '.5\n',
        'sleep 1.50\n',
        '.kick 0.00001\n',
    ):
        assert format_text(text) == text
    assert parse('let n = 0.00001\n')[0].value.type == "NumberLiteral"
    assert format_text('.kick   {duration: 0.00001}\n') == '.kick 0.00001\n'


def check_sessions():
    """Every parsed document is printed with its own source."""
    a = parse('bpm   120\n')
    b = parse('.kick   1/4\n')
    assert print_node(a) == 'bpm 120\n'
    assert print_node(b) == '.kick 1/4\n'
    assert a.session is not b.session


def check_line_endings():
    """Lines ending with a carriage return keep it."""
    text = 'loop 4:\r\n  .kick   1/4\r\n\r\n  \r\nbpm  90\r\n'
    assert format_text(text) == 'loop 4:\r\n  .kick 1/4\r\n\r\n  \r\nbpm 90\r\n'
    assert check_idempotent(text)


def check_options():
    text = "bpm    120\n.kick   {velocity: 0.8}\n"
    assert format_text(text, {'printWidth': 10}) == "bpm 120\n.kick   {velocity: 0.8}\n"
    assert format_text(text, {'print_width': 80}) == "bpm 120\n.kick {velocity: 0.8}\n"
    assert check_idempotent(text, {'printWidth': 10})


def check_without_session():
    """A Program without session is printed from the tree."""
    for text in (
        "loop 4:\n  .kick\n  .snap\n",
        "bpm 120\n\ngroup main:\n  .kick 1/4\n",
        "if a:\n  .x\nelse:\n  .y\n",
    ):
        doc = parse(text)
        doc.session = None
        assert print_node(doc) == text


def test_main():
    assert devafmt.version_string == "{}.{}.{}".format(*devafmt.version)
    check_document()
    check_properties()
    check_numbers()
    check_sessions()
    check_line_endings()
    check_options()
    check_without_session()


if __name__ == "__main__" and 'test_main' in globals():
    test_main()

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
Meta-information about the devafmt package.

This information is used by the install script, and also for the
command ``import devafmt; devafmt.version_string``.

"""

#: name of the package
name = "devafmt"

#: short description
description = "Parser and idempotent pretty-printer for the Devalang language"

#: version of the package
version = (0, 1, 0)

#: version as a string
version_string = "{}.{}.{}".format(*version)

#: license
license = "GPL v3"

# Copyright (C) 2012-2026 by the mailbounce developers.
#
# This file is part of mailbounce.
#
# mailbounce is free software: you can redistribute it and/or modify it under
# the terms of the GNU General Public License as published by the Free
# Software Foundation, either version 3 of the License, or (at your option)
# any later version.
#
# mailbounce is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or
# FITNESS FOR A PARTICULAR PURPOSE.  See the GNU General Public License for
# more details.
#
# You should have received a copy of the GNU General Public License along with
# mailbounce.  If not, see <http://www.gnu.org/licenses/>.

"""mailbounce version strings."""

VERSION = '1.0.0'
CODENAME = 'Return To Sender'

ALPHA = 0xa
BETA  = 0xb
GAMMA = 0xc
RC    = GAMMA
FINAL = 0xf

MAJOR_REV = 1
MINOR_REV = 0
MICRO_REV = 0
REL_LEVEL = FINAL
REL_SERIAL = 0

HEX_VERSION = ((MAJOR_REV << 24) | (MINOR_REV << 16) | (MICRO_REV << 8) |
               (REL_LEVEL << 4)  | (REL_SERIAL << 0))


MAILBOUNCE_VERSION = 'mailbounce ' + VERSION
MAILBOUNCE_VERSION_FULL = MAILBOUNCE_VERSION + ' (' + CODENAME + ')'

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

"""The `mailbounce` package."""

__all__ = [
    ]

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

"""String utilities."""

__all__ = [
    'squeeze',
    'sweep',
    ]


import re


EMPTYSTRING = ''
SPACE = ' '

# A decorative tail such as ` --------=_Part_1234` which some MTAs leave at
# the end of a diagnostic message.
_DECORATION_CRE = re.compile(r' -{2,}[^ \t].*\Z')
_DANGLING_DASHES_CRE = re.compile(r'[ \t]+-+\Z')
_QUOTES = '\'"'



def squeeze(text):
    """Collapse every run of whitespace into a single space.

    :param text: The text to squeeze.
    :type text: string
    :return: The squeezed text, stripped at both ends.
    :rtype: string
    """
    return SPACE.join(text.split())


def sweep(text):
    """Clean up a diagnostic message.

    Whitespace is squeezed, a trailing decorative run of dashes (and whatever
    follows it) is removed, and a dangling quote character left over from a
    quoted reply which was cut short is dropped.

    :param text: The diagnostic text; None is treated as an empty string.
    :type text: string
    :return: The cleaned text.
    :rtype: string
    """
    if not text:
        return EMPTYSTRING
    text = squeeze(text)
    text = _DECORATION_CRE.sub(EMPTYSTRING, text)
    text = _DANGLING_DASHES_CRE.sub(EMPTYSTRING, text)
    while text and text[-1] in _QUOTES and text.count(text[-1]) % 2 == 1:
        text = text[:-1].rstrip()
    return text

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

"""Email address helpers."""

__all__ = [
    'extract_address',
    'split_email',
    ]


import re

from email.utils import parseaddr


# user@example.com, possibly buried in free text.
_ADDRESS_CRE = re.compile(r'[^\s<>()"\'\[\]:;,]+@[^\s<>()"\'\[\]:;,]+')



def split_email(address):
    """Split an email address into a user name and domain.

    :param address: An email address.
    :type address: string
    :return: The user name and domain split on dots.
    :rtype: 2-tuple where the first item is the local part and the second item
        is a sequence of domain parts.
    """
    local_part, at, domain = address.partition('@')
    if len(at) == 0:
        # There was no at-sign in the email address.
        return local_part, None
    return local_part, domain.split('.')


def extract_address(raw):
    """Return the bare address from a `Name <addr>` style field.

    Anything that does not look like an address at all is returned as the
    empty string.  Trailing dots and angle brackets left over from quoting
    are stripped.

    :param raw: The raw field value.
    :type raw: string
    :return: The address, or the empty string.
    :rtype: string
    """
    if not raw:
        return ''
    name, address = parseaddr(raw)
    if '@' not in address:
        # parseaddr() gives up on some of the more creative formats, such as
        # `addr... User unknown`; fall back to scanning for the address.
        mo = _ADDRESS_CRE.search(raw)
        if mo is None:
            return ''
        address = mo.group(0)
    return address.strip('<>.').strip()

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

"""The raw message handed to the bounce classifier.

This is deliberately much thinner than `email.message.Message`.  Bounce
grammars work on the body as plain text, MIME boundaries included, so the
body is never decoded or split into parts here.
"""

__all__ = [
    'RawMessage',
    ]


import email

from collections.abc import Mapping


NL = '\n'



class RawMessage:
    """An immutable header map plus the raw body text.

    Header names are case-insensitive and every header may occur more than
    once; values are kept in the order they appeared.
    """

    def __init__(self, headers, body):
        """Create the raw message.

        :param headers: The header fields, either as a mapping of names to a
            value or a list of values, or as a sequence of (name, value)
            pairs.
        :type headers: mapping or sequence of 2-tuples
        :param body: The body text.
        :type body: string
        """
        self._headers = {}
        if headers is None:
            headers = ()
        if isinstance(headers, Mapping):
            items = []
            for key, value in headers.items():
                if isinstance(value, (list, tuple)):
                    items.extend((key, item) for item in value)
                else:
                    items.append((key, value))
        else:
            items = headers
        for key, value in items:
            values = self._headers.setdefault(key.lower(), [])
            values.append('' if value is None else str(value).strip())
        self._body = ('' if body is None else body)

    @classmethod
    def from_string(cls, text):
        """Build a raw message from the text of a complete message.

        The headers are parsed (and unfolded) by the standard email package;
        the body is everything after the first blank line, untouched.
        """
        text = text.replace('\r\n', NL)
        header_text, separator, body = text.partition('\n\n')
        if not separator:
            # There is no header/body separator, so it's all headers.
            body = ''
        msg = email.message_from_string(header_text + '\n\n')
        headers = [(key, ' '.join(str(value).split()))
                   for key, value in msg.items()]
        return cls(headers, body)

    @classmethod
    def from_file(cls, fp):
        """Build a raw message from an open text file."""
        return cls.from_string(fp.read())

    @property
    def body(self):
        """The raw body text."""
        return self._body

    @property
    def body_lines(self):
        """The body split into lines, without line endings."""
        return self._body.splitlines()

    def __contains__(self, name):
        return name.lower() in self._headers

    def __len__(self):
        return len(self._headers)

    def __iter__(self):
        return iter(self._headers)

    def get(self, name, default=''):
        """Return the first value of the named header."""
        values = self._headers.get(name.lower())
        if not values:
            return default
        return values[0]

    def get_all(self, name):
        """Return every value of the named header, in arrival order."""
        return list(self._headers.get(name.lower(), []))

    def keys(self):
        return list(self._headers)

    def __repr__(self):
        return '<RawMessage {0!r} ({1} headers) at {2:#x}>'.format(
            self.get('subject'), len(self._headers), id(self))

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

"""Test the original message header weeding."""

__all__ = [
    'TestHeaderWeeder',
    'TestReceived',
    ]


import unittest

from mailbounce.email.rfc5322 import HeaderWeeder, received, weedout



class TestHeaderWeeder(unittest.TestCase):
    """Test the original message header weeding."""

    def test_only_canonical_fields_are_kept(self):
        lines = weedout([
            'Received: from a by b',
            'From: anne@example.com',
            'X-Mailer: Nyaan 1.0',
            'Subject: Hello',
            'Message-ID: <hello@example.com>',
            'MIME-Version: 1.0',
            ])
        self.assertEqual(lines, [
            'From: anne@example.com',
            'Subject: Hello',
            'Message-ID: <hello@example.com>',
            ])

    def test_folded_long_field(self):
        lines = weedout([
            'To: anne@example.com,',
            '\tbart@example.com',
            'Subject: Hello',
            ])
        self.assertEqual(lines, [
            'To: anne@example.com,',
            '\tbart@example.com',
            'Subject: Hello',
            ])

    def test_folded_short_field_is_truncated(self):
        # Return-Path is kept but its continuation lines are not.
        lines = weedout([
            'Return-Path:',
            '\t<anne@example.com>',
            ])
        self.assertEqual(lines, ['Return-Path:'])

    def test_continuations_of_dropped_fields(self):
        lines = weedout([
            'Received: from a',
            '\tby b',
            'From: anne@example.com',
            ])
        self.assertEqual(lines, ['From: anne@example.com'])

    def test_blank_line_ends_folding(self):
        weeder = HeaderWeeder()
        for line in ('Subject: Hello', '', '\tnot a continuation'):
            weeder.feed(line)
        self.assertEqual(weeder.lines, ['Subject: Hello'])

    def test_field_names_are_case_insensitive(self):
        self.assertEqual(weedout(['message-id: <a@example.com>']),
                         ['message-id: <a@example.com>'])


class TestReceived(unittest.TestCase):
    """Test the Received header parsing."""

    def test_from_and_by(self):
        self.assertEqual(
            received('from mx.Example.COM (mx.example.com [192.0.2.1]) '
                     'by mail.example.org (Postfix) with ESMTP id 1234'),
            ('mx.example.com', 'mail.example.org'))

    def test_by_only(self):
        self.assertEqual(received('by mail.example.org with SMTP id 1234'),
                         ('', 'mail.example.org'))

    def test_empty(self):
        self.assertEqual(received(''), ('', ''))

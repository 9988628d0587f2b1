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

"""Test the normalization of delivery status records."""

__all__ = [
    'TestNormalize',
    ]


import unittest

from mailbounce.app.normalize import normalize
from mailbounce.bouncers.dsn import DSN
from mailbounce.email.message import RawMessage
from mailbounce.testing.helpers import make_record


class _Recorder(DSN):
    """Remember what the record looked like when it was refined."""

    def refine(self, record, msg):
        self.refined = record.copy()



class TestNormalize(unittest.TestCase):
    """Test the normalization of delivery status records."""

    def setUp(self):
        self._detector = DSN()
        self._msg = RawMessage([
            ('Received', 'from mx.example.org (mx.example.org [192.0.2.60]) '
                         'by mx.example.com (Postfix) with ESMTP id 1'),
            ('Received', 'from relay.example.org (relay.example.org '
                         '[192.0.2.61]) by mx.example.org (Postfix)'),
            ('Received', 'from origin.example.net (origin.example.net '
                         '[192.0.2.62]) by relay.example.org (Postfix)'),
            ], 'body\n')

    def test_hosts_from_received_headers(self):
        record = make_record()
        normalize(record, self._detector, self._msg)
        # The newest Received header was added by the local host, the oldest
        # one names where the message came from.
        self.assertEqual(record.lhost, 'mx.example.com')
        self.assertEqual(record.rhost, 'origin.example.net')

    def test_reported_hosts_are_kept(self):
        record = make_record(lhost='reporter.example.com',
                             rhost='target.example.org')
        normalize(record, self._detector, self._msg)
        self.assertEqual(record.lhost, 'reporter.example.com')
        self.assertEqual(record.rhost, 'target.example.org')

    def test_no_received_headers(self):
        record = make_record()
        normalize(record, self._detector, RawMessage([], 'body\n'))
        self.assertEqual(record.lhost, '')
        self.assertEqual(record.rhost, '')

    def test_sweep(self):
        record = make_record(
            diagnosis='550  5.1.1   User unknown\\nPlease check '
                      'the address  ------=_Part_1234')
        normalize(record, self._detector, self._msg)
        self.assertEqual(record.diagnosis,
                         '550 5.1.1 User unknown Please check the address')

    def test_status_from_diagnosis(self):
        record = make_record(diagnosis='550 5.2.2 Mailbox full')
        normalize(record, self._detector, self._msg)
        self.assertEqual(record.status, '5.2.2')
        self.assertEqual(record.action, 'failed')

    def test_placeholder_recovered(self):
        record = make_record(status='5.0.0',
                             diagnosis='550 5.1.1 User unknown')
        normalize(record, self._detector, self._msg)
        self.assertEqual(record.status, '5.1.1')

    def test_quoted_status_preferred(self):
        record = make_record(
            status='5.0.0',
            diagnosis="Remote said: '5.2.2 Mailbox full' after 4.4.1 retries")
        normalize(record, self._detector, self._msg)
        self.assertEqual(record.status, '5.2.2')

    def test_placeholder_kept(self):
        record = make_record(status='5.0.0',
                             diagnosis='550 Requested action not taken')
        normalize(record, self._detector, self._msg)
        self.assertEqual(record.status, '5.0.0')

    def test_specific_status_not_replaced(self):
        record = make_record(status='5.1.1',
                             diagnosis='552 5.2.2 Mailbox full')
        normalize(record, self._detector, self._msg)
        self.assertEqual(record.status, '5.1.1')

    def test_action(self):
        record = make_record(action='Failed')
        normalize(record, self._detector, self._msg)
        self.assertEqual(record.action, 'failed')
        record = make_record(status='4.2.2')
        normalize(record, self._detector, self._msg)
        self.assertEqual(record.action, 'delayed')
        record = make_record()
        normalize(record, self._detector, self._msg)
        self.assertEqual(record.action, '')

    def test_command(self):
        record = make_record(command='rcpt')
        normalize(record, self._detector, self._msg)
        self.assertEqual(record.command, 'RCPT')

    def test_refine_comes_last(self):
        detector = _Recorder()
        record = make_record(status='5.0.0', action='FAILED',
                             diagnosis='550 5.1.1  User unknown')
        normalize(record, detector, self._msg)
        self.assertEqual(detector.refined.status, '5.1.1')
        self.assertEqual(detector.refined.action, 'failed')
        self.assertEqual(detector.refined.diagnosis, '550 5.1.1 User unknown')
        self.assertEqual(detector.refined.lhost, 'mx.example.com')

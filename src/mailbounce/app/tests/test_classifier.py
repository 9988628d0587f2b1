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

"""Test the bounce classifier."""

__all__ = [
    'TestBounceClassifier',
    'TestClassifierConfiguration',
    ]


import io
import unittest

from zope.interface.verify import verifyObject

from mailbounce.app.classifier import BounceClassifier
from mailbounce.app.registry import DetectorRegistry
from mailbounce.bouncers.amazonses import AmazonSES
from mailbounce.bouncers.dsn import DSN
from mailbounce.config import config
from mailbounce.core.errors import InvalidInputError
from mailbounce.email.message import RawMessage
from mailbounce.interfaces.bounce import IParseResult, NotMatched
from mailbounce.model.bounce import DeliveryStatus
from mailbounce.reasons import builtin_rules
from mailbounce.reasons.engine import ReasonEngine
from mailbounce.testing.helpers import (
    configuration, sample_message, sample_text)


NOT_A_BOUNCE = """\
From: anne@example.com
To: bart@example.com
Subject: Lunch?

Are we still on for lunch?
"""



class TestBounceClassifier(unittest.TestCase):
    """Test classifying bounce messages."""

    def setUp(self):
        self._classifier = BounceClassifier()

    def test_result(self):
        result = self._classifier.classify(sample_message('dsn_01.txt'))
        verifyObject(IParseResult, result)
        self.assertEqual(result.detector, 'dsn')
        self.assertEqual(len(result.records), 2)
        for record in result.records:
            self.assertEqual(record.agent, 'dsn')
            self.assertTrue(record.reason)
        self.assertTrue(result.original.endswith('\n'))

    def test_deterministic(self):
        text = sample_text('dsn_01.txt')
        first = self._classifier.classify_string(text)
        second = self._classifier.classify_string(text)
        self.assertEqual(first, second)
        self.assertIsNot(first.records[0], second.records[0])

    def test_classify_file(self):
        fp = io.StringIO(sample_text('sendgrid_01.txt'))
        result = self._classifier.classify_file(fp)
        self.assertEqual(result.detector, 'sendgrid')

    def test_crlf(self):
        text = sample_text('opensmtpd_01.txt').replace('\n', '\r\n')
        result = self._classifier.classify_string(text)
        self.assertEqual(result.detector, 'opensmtpd')
        self.assertEqual(len(result.records), 2)

    def test_not_matched(self):
        self.assertIs(self._classifier.classify_string(NOT_A_BOUNCE),
                      NotMatched)

    def test_no_message(self):
        self.assertRaises(InvalidInputError, self._classifier.classify, None)

    def test_no_headers(self):
        msg = RawMessage([], 'Final-Recipient: rfc822; anne@example.com\n')
        with self.assertRaises(InvalidInputError) as cm:
            self._classifier.classify(msg)
        self.assertEqual(cm.exception.reason, 'The message has no headers')

    def test_no_body(self):
        msg = RawMessage([('From', 'MAILER-DAEMON@example.com')], '\n  \n')
        self.assertRaises(InvalidInputError, self._classifier.classify, msg)
        self.assertRaises(InvalidInputError,
                          self._classifier.classify_all, msg)

    def test_missing_body(self):
        msg = RawMessage([('From', 'MAILER-DAEMON@example.com')], None)
        with self.assertRaises(InvalidInputError) as cm:
            self._classifier.classify(msg)
        self.assertEqual(cm.exception.reason, 'The message has no body')

    def test_missing_headers(self):
        msg = RawMessage(None, 'Final-Recipient: rfc822; anne@example.com\n')
        self.assertEqual(len(msg), 0)
        with self.assertRaises(InvalidInputError) as cm:
            self._classifier.classify(msg)
        self.assertEqual(cm.exception.reason, 'The message has no headers')

    def test_classify_all(self):
        # The SES text bounce is also a perfectly good DSN.
        results = self._classifier.classify_all(
            sample_message('amazonses_01.txt'))
        self.assertEqual([result.detector for result in results],
                         ['amazonses', 'dsn'])
        self.assertEqual(results[0].records[0].recipient,
                         results[1].records[0].recipient)

    def test_classify_all_not_matched(self):
        msg = RawMessage.from_string(NOT_A_BOUNCE)
        self.assertEqual(self._classifier.classify_all(msg), [])

    def test_multiple_recipients(self):
        result = self._classifier.classify(sample_message('opensmtpd_01.txt'))
        self.assertEqual(
            [(record.recipient, record.reason) for record in result.records],
            [('kijitora@example.co.jp', 'userunknown'),
             ('shironeko@example.org', 'hostunknown')])

    def test_build_drops_unrecipiented(self):
        detector = DSN()
        records = [DeliveryStatus(status='5.1.1'),
                   DeliveryStatus(recipient='anne@example.com',
                                  status='5.1.1')]
        msg = RawMessage([('From', 'MAILER-DAEMON@example.com')], 'body\n')
        result = self._classifier.build(detector, records, [], msg)
        self.assertEqual([record.recipient for record in result.records],
                         ['anne@example.com'])
        self.assertEqual(result.original, '')
        classifier = BounceClassifier(drop_unrecipiented=False)
        records = [DeliveryStatus(status='5.1.1')]
        result = classifier.build(detector, records, ['Subject: Hi'], msg)
        self.assertEqual(len(result.records), 1)
        self.assertEqual(result.records[0].reason, 'userunknown')
        self.assertEqual(result.original, 'Subject: Hi\n')

    def test_custom_registry_and_engine(self):
        classifier = BounceClassifier(
            DetectorRegistry([AmazonSES()]),
            ReasonEngine(builtin_rules(), default='systemerror'))
        self.assertIs(classifier.classify(sample_message('dsn_01.txt')),
                      NotMatched)
        result = classifier.classify(sample_message('amazonses_01.txt'))
        self.assertEqual(result.detector, 'amazonses')


class TestClassifierConfiguration(unittest.TestCase):
    """Test building a classifier from the configuration."""

    def test_from_config(self):
        with configuration('bounces', detectors='verizon dsn'):
            classifier = BounceClassifier.from_config(config)
        self.assertEqual(classifier.registry.names, ['verizon', 'dsn'])
        self.assertTrue(classifier.drop_unrecipiented)
        self.assertEqual(classifier.engine.default, 'unknown')

    def test_keep_unrecipiented(self):
        with configuration('bounces', drop_unrecipiented='no'):
            classifier = BounceClassifier.from_config(config)
        self.assertFalse(classifier.drop_unrecipiented)

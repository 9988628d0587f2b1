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

"""Test the command line subcommands."""

__all__ = [
    'TestClassify',
    'TestDetectors',
    'TestMain',
    ]


import io
import os
import shutil
import tempfile
import unittest

from argparse import Namespace
from contextlib import redirect_stderr, redirect_stdout

from mailbounce.bin.mailbounce import main
from mailbounce.commands.cli_classify import Classify
from mailbounce.commands.cli_detectors import Detectors
from mailbounce.core.initialize import INHIBIT_CONFIG_FILE, initialize
from mailbounce.testing.helpers import (
    configuration, load_configuration, sample_text)


def classify_args(*files, **kws):
    args = dict(all=False, detector=None, original=False, files=list(files))
    args.update(kws)
    return Namespace(**args)



class TestClassify(unittest.TestCase):
    """Test the `classify` subcommand."""

    def setUp(self):
        load_configuration()
        self._command = Classify()
        self._tempdir = tempfile.mkdtemp()
        self.addCleanup(shutil.rmtree, self._tempdir)

    def _sample(self, filename, text=None):
        path = os.path.join(self._tempdir, filename)
        with open(path, 'w') as fp:
            fp.write(sample_text(filename) if text is None else text)
        return path

    def _run(self, args):
        stdout = io.StringIO()
        stderr = io.StringIO()
        with redirect_stdout(stdout), redirect_stderr(stderr):
            self._command.process(args)
        return stdout.getvalue().splitlines(), stderr.getvalue()

    def test_classify(self):
        path = self._sample('dsn_01.txt')
        lines, errors = self._run(classify_args(path))
        self.assertEqual(lines[0], '{0}: dsn'.format(path))
        self.assertIn('- recipient: mikeneko@example.org', lines)
        self.assertIn('  reason:    mailboxfull', lines)
        self.assertIn('- recipient: sabineko@example.org', lines)
        # Empty fields are not shown.
        self.assertFalse(any(line.strip().startswith('command:')
                             for line in lines))
        self.assertNotIn('  original:', lines)
        self.assertEqual(errors, '')

    def test_original(self):
        path = self._sample('sendgrid_01.txt')
        lines, errors = self._run(classify_args(path, original=True))
        self.assertEqual(lines[0], '{0}: sendgrid'.format(path))
        index = lines.index('  original:')
        self.assertEqual(lines[index + 1:], [
            '    Return-Path: <neko@example.jp>',
            '    From: Neko <neko@example.jp>',
            '    To: kijitora@example.jp',
            '    Subject: Nyaan',
            '    Message-ID: <sendgrid-01@example.jp>',
            ])

    def test_all(self):
        path = self._sample('amazonses_01.txt')
        lines, errors = self._run(classify_args(path, all=True))
        self.assertEqual(
            [line for line in lines if line.startswith(path)],
            ['{0}: amazonses'.format(path), '{0}: dsn'.format(path)])

    def test_one_detector(self):
        path = self._sample('amazonses_01.txt')
        lines, errors = self._run(classify_args(path, detector='dsn'))
        self.assertEqual(lines[0], '{0}: dsn'.format(path))

    def test_not_matched(self):
        path = self._sample('lunch.txt', """\
From: anne@example.com
Subject: Lunch?

Are we still on for lunch?
""")
        lines, errors = self._run(classify_args(path))
        self.assertEqual(lines, ['{0}: no detector matched'.format(path)])

    def test_invalid_input(self):
        path = self._sample('empty.txt', """\
From: MAILER-DAEMON@example.com
Subject: Nothing here

""")
        good = self._sample('opensmtpd_01.txt')
        with self.assertLogs('mailbounce.error', 'ERROR') as cm:
            lines, errors = self._run(classify_args(path, good))
        self.assertEqual(errors, '{0}: The message has no body\n'.format(path))
        self.assertEqual(cm.records[0].getMessage(),
                         '{0}: The message has no body'.format(path))
        # The remaining files are still classified.
        self.assertEqual(lines[0], '{0}: opensmtpd'.format(good))

    def test_unreadable_file(self):
        missing = os.path.join(self._tempdir, 'missing.txt')
        good = self._sample('dsn_01.txt')
        with self.assertLogs('mailbounce.error', 'ERROR') as cm:
            lines, errors = self._run(classify_args(missing, good))
        self.assertTrue(errors.startswith('{0}: '.format(missing)))
        self.assertIn('No such file or directory', errors)
        self.assertEqual(len(errors.splitlines()), 1)
        self.assertEqual(len(cm.records), 1)
        # The remaining files are still classified.
        self.assertEqual(lines[0], '{0}: dsn'.format(good))

    def test_configured_detectors(self):
        path = self._sample('dsn_01.txt')
        with configuration('bounces', detectors='sendgrid'):
            lines, errors = self._run(classify_args(path))
        self.assertEqual(lines, ['{0}: no detector matched'.format(path)])


class TestDetectors(unittest.TestCase):
    """Test the `detectors` subcommand."""

    def setUp(self):
        load_configuration()

    def _run(self, quiet):
        stdout = io.StringIO()
        with redirect_stdout(stdout):
            Detectors().process(Namespace(quiet=quiet))
        return stdout.getvalue().splitlines()

    def test_quiet(self):
        self.assertEqual(self._run(True), [
            'amazonses', 'sendgrid', 'opensmtpd', 'verizon', 'dsn'])

    def test_descriptions(self):
        lines = self._run(False)
        self.assertEqual(len(lines), 5)
        self.assertEqual(
            lines[-1],
            'dsn        Generic RFC 3464 delivery status notifications.')

    def test_order_follows_configuration(self):
        with configuration('bounces', detectors='dsn verizon'):
            self.assertEqual(self._run(True), ['dsn', 'verizon'])



class TestMain(unittest.TestCase):
    """Test the command dispatcher."""

    def setUp(self):
        self._tempdir = tempfile.mkdtemp()
        self.addCleanup(shutil.rmtree, self._tempdir)
        self._config_file = os.path.join(self._tempdir, 'mailbounce.cfg')
        with open(self._config_file, 'w') as fp:
            print('[bounces]', file=fp)
            print('detectors: opensmtpd dsn', file=fp)

    def tearDown(self):
        initialize(INHIBIT_CONFIG_FILE)

    def test_classify(self):
        path = os.path.join(self._tempdir, 'bounce.txt')
        with open(path, 'w') as fp:
            fp.write(sample_text('opensmtpd_01.txt'))
        stdout = io.StringIO()
        with redirect_stdout(stdout):
            main(['-C', self._config_file, 'classify', path])
        self.assertEqual(stdout.getvalue().splitlines()[0],
                         '{0}: opensmtpd'.format(path))

    def test_detectors(self):
        stdout = io.StringIO()
        with redirect_stdout(stdout):
            main(['-C', self._config_file, 'detectors', '--quiet'])
        self.assertEqual(stdout.getvalue().splitlines(), ['opensmtpd', 'dsn'])

    def test_unknown_detector(self):
        path = os.path.join(self._tempdir, 'bounce.txt')
        with open(path, 'w') as fp:
            fp.write(sample_text('opensmtpd_01.txt'))
        stderr = io.StringIO()
        with redirect_stderr(stderr):
            with self.assertRaises(SystemExit) as cm:
                main(['-C', self._config_file,
                      'classify', '--detector', 'sendgrid', path])
        self.assertEqual(cm.exception.code, 2)
        self.assertIn('No such detector: sendgrid', stderr.getvalue())

    def test_no_subcommand(self):
        stdout = io.StringIO()
        with redirect_stdout(stdout):
            with self.assertRaises(SystemExit) as cm:
                main([])
        self.assertEqual(cm.exception.code, 0)
        self.assertIn('classify', stdout.getvalue())
        self.assertIn('detectors', stdout.getvalue())

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

"""Test the system-wide global configuration."""

__all__ = [
    'TestConfiguration',
    ]


import os
import shutil
import tempfile
import unittest

from mailbounce.config.config import Configuration
from mailbounce.core.errors import ConfigurationError



class TestConfiguration(unittest.TestCase):
    """Test the configuration object."""

    def setUp(self):
        self._config = Configuration()
        self._config.load()

    def test_defaults(self):
        self.assertEqual(self._config.mailbounce.layout, 'here')
        self.assertEqual(self._config.mailbounce.default_reason, 'unknown')
        self.assertEqual(self._config.detector_names,
                         ['amazonses', 'sendgrid', 'opensmtpd', 'verizon',
                          'dsn'])
        self.assertTrue(self._config.drop_unrecipiented)

    def test_base_configuration(self):
        # mailbounce.cfg quiets the noisier logs.
        self.assertEqual(self._config.logging.bounce.level, 'warning')
        self.assertEqual(self._config.logging.config.level, 'info')

    def test_logger_configs(self):
        names = sorted(section.name for section in self._config.logger_configs)
        self.assertEqual(names, ['logging.bounce', 'logging.config',
                                 'logging.error', 'logging.root'])

    def test_push_and_pop(self):
        self._config.push('test config', """\
[bounces]
detectors: dsn sendgrid
drop_unrecipiented: no
""")
        self.assertEqual(self._config.detector_names, ['dsn', 'sendgrid'])
        self.assertFalse(self._config.drop_unrecipiented)
        self._config.pop('test config')
        self.assertEqual(self._config.detector_names[-1], 'dsn')
        self.assertTrue(self._config.drop_unrecipiented)

    def test_paths(self):
        var_dir = os.environ.get('MAILBOUNCE_VAR_DIR', 'var')
        self.assertEqual(self._config.VAR_DIR, os.path.abspath(var_dir))
        self.assertEqual(self._config.LOG_DIR,
                         os.path.join(self._config.VAR_DIR, 'logs'))

    def test_fhs_layout(self):
        self._config.push('fhs', """\
[mailbounce]
layout: fhs
""")
        try:
            self.assertEqual(self._config.LOG_DIR, '/var/log/mailbounce')
        finally:
            self._config.pop('fhs')

    def test_missing_layout(self):
        self.assertRaises(ConfigurationError, self._config.push, 'bogus', """\
[mailbounce]
layout: nowhere
""")

    def test_user_file(self):
        tempdir = tempfile.mkdtemp()
        self.addCleanup(shutil.rmtree, tempdir)
        filename = os.path.join(tempdir, 'mailbounce.cfg')
        with open(filename, 'w') as fp:
            print('[bounces]', file=fp)
            print('detectors: verizon', file=fp)
        self._config.load(filename)
        self.assertEqual(self._config.filename, filename)
        self.assertEqual(self._config.detector_names, ['verizon'])

    def test_unloaded(self):
        config = Configuration()
        self.assertRaises(AttributeError, getattr, config, '__deepcopy__')
        self.assertIsNone(config._config)

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

"""Configuration file loading and management."""

__all__ = [
    'Configuration',
    ]


import os

from contextlib import ExitStack
from importlib.resources import as_file, files
from lazr.config import ConfigSchema, as_boolean
from string import Template

from mailbounce.core.errors import ConfigurationError



class Configuration:
    """The global configuration object."""

    def __init__(self):
        self._config = None
        self.filename = None

    def __getattr__(self, name):
        """Delegate to the configuration object."""
        if name.startswith('__') or name == '_config':
            raise AttributeError(name)
        return getattr(self._config, name)

    def load(self, filename=None):
        """Load the configuration from the schema and config files."""
        with ExitStack() as resources:
            package = files('mailbounce.config')
            schema_path = resources.enter_context(
                as_file(package.joinpath('schema.cfg')))
            config_path = resources.enter_context(
                as_file(package.joinpath('mailbounce.cfg')))
            schema = ConfigSchema(str(schema_path))
            # First, load the absolute minimum default configuration, then if
            # a configuration filename was given by the user, push it.
            self._config = schema.load(str(config_path))
        self.filename = filename
        if filename is not None:
            with open(filename) as user_config:
                self._config.push(filename, user_config.read())
        self._post_process()

    def push(self, config_name, config_string):
        """Push a new configuration onto the stack."""
        self._config.push(config_name, config_string)
        self._post_process()

    def pop(self, config_name):
        """Pop a configuration from the stack."""
        self._config.pop(config_name)
        self._post_process()

    def _post_process(self):
        """Perform post-processing after loading the configuration files."""
        self._expand_paths()

    def _expand_paths(self):
        """Expand the configured paths for the selected layout."""
        layout = 'paths.' + self._config.mailbounce.layout
        for category in self._config.getByCategory('paths', []):
            if category.name == layout:
                break
        else:
            raise ConfigurationError(
                'No path configuration found: {0}'.format(layout))
        substitutions = dict(
            var_dir=os.environ.get('MAILBOUNCE_VAR_DIR', category.var_dir),
            log_dir=category.log_dir,
            )
        # $var_dir is the only variable other paths may refer to.
        substitutions['log_dir'] = Template(
            substitutions['log_dir']).safe_substitute(substitutions)
        for key, value in substitutions.items():
            setattr(self, key.upper(), os.path.abspath(value))

    @property
    def logger_configs(self):
        """Return all log config sections."""
        return self._config.getByCategory('logging', [])

    @property
    def detector_names(self):
        """The configured detector names, in order of precedence."""
        return self._config.bounces.detectors.split()

    @property
    def drop_unrecipiented(self):
        """Are records without a recipient dropped?"""
        return as_boolean(self._config.bounces.drop_unrecipiented)

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

"""Various test helpers."""

__all__ = [
    'configuration',
    'load_configuration',
    'make_record',
    'sample_message',
    'sample_text',
    ]


from contextlib import contextmanager
from importlib.resources import files

from mailbounce.config import config
from mailbounce.email.message import RawMessage
from mailbounce.model.bounce import DeliveryStatus


_counter = 0



def sample_text(filename):
    """Return the text of one of the sample bounce messages.

    :param filename: The file name, relative to the
        `mailbounce.bouncers.tests.data` package.
    :type filename: string
    :return: The message text.
    :rtype: string
    """
    resource = files('mailbounce.bouncers.tests.data').joinpath(filename)
    return resource.read_text(encoding='utf-8')


def sample_message(filename):
    """Return one of the sample bounce messages as a `RawMessage`."""
    return RawMessage.from_string(sample_text(filename))


def make_record(**fields):
    """Make a delivery status record with a recipient filled in."""
    fields.setdefault('recipient', 'anne@example.com')
    return DeliveryStatus(**fields)



def load_configuration():
    """Load the built-in configuration, if it has not been loaded yet."""
    if config._config is None:
        config.load()


@contextmanager
def configuration(section, **kws):
    """Temporarily override some configuration values.

    :param section: The configuration section, e.g. `bounces`.
    :type section: string
    :param kws: The option names and their temporary values.
    """
    global _counter
    load_configuration()
    _counter += 1
    name = 'temporary configuration {0}'.format(_counter)
    lines = ['[{0}]'.format(section)]
    for key, value in kws.items():
        lines.append('{0}: {1}'.format(key, value))
    config.push(name, '\n'.join(lines) + '\n')
    try:
        yield
    finally:
        config.pop(name)

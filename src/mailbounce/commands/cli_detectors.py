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

"""List the bounce detectors."""

__all__ = [
    'Detectors',
    ]


from zope.interface import implementer

from mailbounce.app.registry import DetectorRegistry
from mailbounce.config import config
from mailbounce.interfaces.command import ICLISubCommand



@implementer(ICLISubCommand)
class Detectors:
    """List the bounce detectors in order of precedence."""

    name = 'detectors'

    def add(self, parser, command_parser):
        """See `ICLISubCommand`."""
        command_parser.add_argument(
            '-q', '--quiet',
            default=False, action='store_true',
            help="""\
            Print only the detector names.""")

    def process(self, args):
        """See `ICLISubCommand`."""
        registry = DetectorRegistry.from_config(config)
        if len(registry) == 0:
            print('No detectors are configured')
            return
        longest = max(len(name) for name in registry.names)
        for detector in registry:
            if args.quiet:
                print(detector.name)
            else:
                print('{0:{2}}  {1}'.format(
                    detector.name, detector.description, longest))

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

"""The 'mailbounce' command dispatcher."""

__all__ = [
    'main',
    ]


import os
import argparse

from zope.interface.verify import verifyObject

from mailbounce.app.finder import find_components
from mailbounce.core.initialize import initialize
from mailbounce.interfaces.command import ICLISubCommand
from mailbounce.version import MAILBOUNCE_VERSION_FULL



def main(argv=None):
    """bin/mailbounce"""
    # Create the basic parser and add all globally common options.
    parser = argparse.ArgumentParser(
        prog='mailbounce',
        description="""\
        Classify bounce messages into delivery status records.
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument(
        '-v', '--version',
        action='version', version=MAILBOUNCE_VERSION_FULL,
        help='Print this version string and exit')
    parser.add_argument(
        '-C', '--config',
        help="""\
        Configuration file to use.  If not given, the environment variable
        MAILBOUNCE_CONFIG_FILE is consulted and used if set.  If neither are
        given, a default configuration file is loaded.""")
    # Look at all modules in the mailbounce.commands package and if they are
    # prepared to add a subcommand, let them do so.
    subparser = parser.add_subparsers(title='Commands')
    subcommands = []
    for command_class in find_components('mailbounce.commands',
                                         ICLISubCommand):
        command = command_class()
        verifyObject(ICLISubCommand, command)
        subcommands.append(command)
    # --help displays the subcommands in alphabetical order.
    subcommands.sort(key=lambda command: command.name)
    for command in subcommands:
        command_parser = subparser.add_parser(
            command.name, help=command.__doc__)
        command.add(parser, command_parser)
        command_parser.set_defaults(func=command.process)
    args = parser.parse_args(argv)
    if getattr(args, 'func', None) is None:
        # No subcommand was given.
        parser.print_help()
        parser.exit()
    # Before actually performing the subcommand, we need to initialize the
    # system, and in particular, we must read the configuration file.
    config_file = None
    if args.config is not None:
        config_file = os.path.abspath(os.path.expanduser(args.config))
    initialize(config_file)
    # Perform the subcommand option.
    args.func(args)

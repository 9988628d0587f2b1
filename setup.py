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

import re
import sys

from setuptools import setup, find_packages
from string import Template

if sys.hexversion < 0x30600f0:
    print('mailbounce requires at least Python 3.6')
    sys.exit(1)


# Calculate the version number without importing the mailbounce package.
with open('src/mailbounce/version.py') as fp:
    for line in fp:
        mo = re.match("VERSION = '(?P<version>[^']+?)'", line)
        if mo:
            __version__ = mo.group('version')
            break
    else:
        print('No version number found')
        sys.exit(1)



template = Template('$script = mailbounce.bin.$script:main')
scripts = set(
    template.substitute(script=script)
    for script in ('mailbounce',)
    )



setup(
    name            = 'mailbounce',
    version         = __version__,
    description     = 'mailbounce -- classify bounced email',
    long_description= """\
mailbounce turns bounce messages (non-delivery reports) into structured
delivery status records: who the message could not be delivered to, the
status code and diagnostic text reported by the remote mail server, and a
canonical reason for the failure.  It is distributed under the terms of the
GNU General Public License (GPL) version 3 or later.""",
    author          = 'The mailbounce Developers',
    license         = 'GPLv3',
    keywords        = 'email bounce',
    packages        = find_packages('src'),
    package_dir     = {'': 'src'},
    package_data    = {
        'mailbounce.config': ['*.cfg'],
        'mailbounce.bouncers.tests.data': ['*.txt'],
        },
    entry_points    = {
        'console_scripts' : list(scripts),
        },
    install_requires = [
        'flufl.enum',
        'lazr.config',
        'zope.interface',
        ],
    extras_require  = {
        'test': [
            'zope.testrunner',
            ],
        },
    )

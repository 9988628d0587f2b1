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

"""The built-in bounce detectors."""

__all__ = [
    'BUILTIN_DETECTORS',
    'builtin_detectors',
    ]


from mailbounce.bouncers.amazonses import AmazonSES
from mailbounce.bouncers.dsn import DSN
from mailbounce.bouncers.opensmtpd import OpenSMTPD
from mailbounce.bouncers.sendgrid import SendGrid
from mailbounce.bouncers.verizon import Verizon


# In the default order of precedence.  The generic DSN detector must come
# last, since many of the provider formats are also valid DSNs.
BUILTIN_DETECTORS = (
    AmazonSES,
    SendGrid,
    OpenSMTPD,
    Verizon,
    DSN,
    )


def builtin_detectors():
    """Return a name -> detector class mapping of the built-in detectors."""
    return dict((detector.name, detector) for detector in BUILTIN_DETECTORS)

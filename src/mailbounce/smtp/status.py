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

"""Enhanced mail system status codes (RFC 3463).

A status code is a `class.subject.detail` triplet such as `5.1.1`.  Only the
codes whose meaning points at exactly one bounce reason are mapped here; the
catch-all codes (`5.0.0`, `5.7.1`, ...) deliberately map to nothing so that
the reason engine falls back to the diagnostic text.
"""

__all__ = [
    'STATUS_CRE',
    'code',
    'find',
    'is_placeholder',
    'is_status',
    'name',
    ]


import re


# A complete, well-formed status code.
STATUS_CRE = re.compile(r'\A[45]\.\d{1,3}\.\d{1,3}\Z')

# A status code buried in free text.  The look-arounds keep us from picking
# digits out of IP addresses and version numbers.
_EMBEDDED_CRE = re.compile(r'(?<![\d.])([45])\.([0-7])\.(\d{1,3})(?![.]?\d)')

# A class/subject only code such as `5.0.0` or `4.1.0`.
_PLACEHOLDER_CRE = re.compile(r'\A[45]\.[01]\.0\Z')


# subject.detail -> reason.  The same reason applies to both the transient
# (4.x.x) and the permanent (5.x.x) class.
_REASONS = {
    '1.1':  'userunknown',
    '1.2':  'hostunknown',
    '1.3':  'userunknown',
    '1.6':  'hasmoved',
    '1.7':  'rejected',
    '1.8':  'rejected',
    '1.10': 'notaccept',
    '2.1':  'suspend',
    '2.2':  'mailboxfull',
    '2.3':  'exceedlimit',
    '2.4':  'systemerror',
    '3.1':  'systemfull',
    '3.2':  'notaccept',
    '3.4':  'mesgtoobig',
    '3.5':  'systemerror',
    '4.1':  'networkerror',
    '4.2':  'networkerror',
    '4.3':  'systemerror',
    '4.4':  'hostunknown',
    '4.6':  'networkerror',
    '4.7':  'expired',
    '5.1':  'syntaxerror',
    '5.2':  'syntaxerror',
    '5.3':  'syntaxerror',
    '5.4':  'syntaxerror',
    '5.5':  'syntaxerror',
    '6.0':  'contenterror',
    '6.1':  'contenterror',
    '6.2':  'contenterror',
    '6.3':  'contenterror',
    '6.5':  'contenterror',
    '7.5':  'securityerror',
    '7.6':  'securityerror',
    '7.7':  'securityerror',
    '7.8':  'securityerror',
    '7.9':  'securityerror',
    '7.13': 'suspend',
    }

# reason -> the representative subject.detail used for pseudo status codes.
_CODES = {
    'contenterror':  '6.0',
    'exceedlimit':   '2.3',
    'expired':       '4.7',
    'hasmoved':      '1.6',
    'hostunknown':   '1.2',
    'mailboxfull':   '2.2',
    'mesgtoobig':    '3.4',
    'networkerror':  '4.6',
    'notaccept':     '3.2',
    'rejected':      '1.8',
    'securityerror': '7.9',
    'suspend':       '2.1',
    'syntaxerror':   '5.2',
    'systemerror':   '3.5',
    'systemfull':    '3.1',
    'userunknown':   '1.1',
    }



def is_status(value):
    """Is `value` a well-formed enhanced status code?"""
    return bool(value) and STATUS_CRE.match(value) is not None


def is_placeholder(value):
    """Is `value` a coarse code such as `5.0.0` which hides the real cause?"""
    return bool(value) and _PLACEHOLDER_CRE.match(value) is not None


def name(status):
    """Return the reason name for a status code.

    :param status: An enhanced status code, e.g. `5.2.2`.
    :type status: string
    :return: The reason name, or the empty string when the code is unknown,
        malformed or ambiguous.
    :rtype: string
    """
    if not is_status(status):
        return ''
    subject_detail = status.split('.', 1)[1]
    return _REASONS.get(subject_detail, '')


def code(reason, temporary=False):
    """Return a pseudo status code for a reason name.

    :param reason: The reason name, e.g. `mailboxfull`.
    :type reason: string
    :param temporary: Return a transient (4.x.x) code instead of a permanent
        (5.x.x) one.
    :type temporary: bool
    :return: The status code, or the empty string for unmapped reasons.
    :rtype: string
    """
    subject_detail = _CODES.get(reason)
    if subject_detail is None:
        return ''
    return '{0}.{1}'.format(4 if temporary else 5, subject_detail)


def find(text):
    """Extract an enhanced status code from free text.

    The first specific code wins; a placeholder such as `5.0.0` is only
    returned when nothing more specific appears in the text.

    :param text: The diagnostic message.
    :type text: string
    :return: The status code, or the empty string if there is none.
    :rtype: string
    """
    if not text:
        return ''
    fallback = ''
    for mo in _EMBEDDED_CRE.finditer(text):
        status = '.'.join(mo.groups())
        if not is_placeholder(status):
            return status
        if not fallback:
            fallback = status
    return fallback

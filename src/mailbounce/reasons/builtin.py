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

"""The built-in reason rules, in order of precedence.

Each rule is pure data.  Patterns are matched case-insensitively against the
swept diagnostic text, so they are written in lower case with single spaces.
"""

__all__ = [
    'builtin_rules',
    ]


from mailbounce.reasons.rule import ReasonRule


RULES = (
    ReasonRule(
        'blocked',
        'Email rejected due to the client IP address or hostname',
        (r'access denied \(in reply to end of data command\)',
         r'blacklisted by',
         r'client host (?:\[.+\] )?blocked',
         r'client host rejected: (?:abus|cannot find your hostname|'
         r'may not be a mail server|was not authenticated)',
         r'connection (?:refused|reset) by',
         r'dnsbl:',
         r'host .+ refused to talk to me',
         r'ip address (?:.+ )?(?:has been )?(?:blacklisted|blocked)',
         r'is in an? (?:rbl|black ?list)',
         r'listed in (?:the )?(?:rbl|dnsbl|spamhaus|spamcop|sorbs)',
         r'rejected because the sending mta or the sender has not passed '
         r'validation',
         r'your ip (?:address )?(?:has been )?(?:blocked|blacklisted|'
         r'is listed)',
         r'your server requires confirmation',
         )),
    ReasonRule(
        'mailboxfull',
        "Email rejected due to a recipient's mailbox is full",
        (r'account disabled temporarly for exceeding receiving limits',
         r'account is (?:exceeding their quota|over quota|'
         r'temporarily over quota)',
         r'boite du destinataire pleine.+[a-z]{3}.+417',
         r'delivery failed: over quota',
         r'disc quota exceeded',
         r'does not have enough space',
         r'exceeded storage allocation',
         r'exceeding its mailbox quota',
         r'full mailbox',
         r'is over (?:disk quota|quota temporarily)',
         r'mail (?:file size exceeds the maximum size allowed for mail '
         r'delivery|quota exceeded)',
         r'mailbox (?:exceeded the local limit|full|has exceeded its disk '
         r'space limit|is full|over quota|quota usage exceeded|'
         r'size limit exceeded)',
         r'maildir (?:delivery failed: (?:user|domain)disk quota ?.* '
         r'exceeded|over quota)',
         r'mailfolder is full',
         r'not enough storage space in',
         r'over the allowed quota',
         r'quota (?:exceeded|violation for)',
         r'recipient (?:reached disk quota|rejected: mailbox would exceed '
         r'maximum allowed storage)',
         r'the (?:recipient mailbox has exceeded its disk space limit|'
         r"user's space has been used up|user you are trying to reach is "
         r'over quota)',
         r'too much mail data',
         r'user (?:has (?:exceeded quota, bouncing mail|too many messages '
         r'on the server)|is over (?:the )?quota|over quota)',
         r'was automatically rejected: quota exceeded',
         r'would be over the allowed quota',
         )),
    ReasonRule(
        'mesgtoobig',
        'Email rejected due to the message size is too big',
        (r'exceeded maximum inbound message size',
         r'max message size exceeded',
         r'message (?:file too big|length exceeds administrative limit|'
         r'size exceeds (?:fixed limit|fixed maximum message size|'
         r'maximum value)|too big|too large for this .+)',
         r'size limit',
         ),
        excluded_statuses=('5.2.3', 'exceedlimit')),
    ReasonRule(
        'exceedlimit',
        "Email rejected due to the message exceeds the recipient's limit",
        (r'message too large',
         r'exceeds? (?:the )?(?:maximum )?message size limit',
         r'size exceeds the limit for this recipient',
         )),
    ReasonRule(
        'suspend',
        "Email rejected due to the recipient's account is suspended",
        (r'account (?:has been |is )?(?:disabled|suspended|'
         r'temporarily unavailable|deactivated)',
         r'boite du destinataire archivee',
         r'email account that you tried to reach is (?:disabled|inactive)',
         r'mailbox (?:is )?(?:currently )?(?:disabled|suspended)',
         r'recipient suspend the service',
         r'this account has been disabled or discontinued',
         r'user suspended',
         )),
    ReasonRule(
        'hasmoved',
        "Email rejected due to the recipient's mailbox has moved",
        (r' has been replaced by ',
         r'address has (?:been )?moved',
         )),
    ReasonRule(
        'norelaying',
        'Email rejected with the relaying is not permitted',
        (r'insecure mail relay',
         r'mail server requires authentication when attempting to send to '
         r'a non-local e-mail address',
         r'not allowed to relay through this machine',
         r'not an open relay, so get lost',
         r'relay (?:access denied|denied|not permitted|not allowed)',
         r'relaying (?:denied|not (?:allowed|permitted))',
         r'that domain isn.t in my list of allowed rcpthosts',
         r'unable to relay',
         r'we don.t handle mail for',
         )),
    ReasonRule(
        'userunknown',
        'Email rejected due to a recipient address does not exist',
        (r'address (?:does not exist|not present in directory|unknown)',
         r'destination (?:addresses were unknown|server rejected recipients)',
         r'email address (?:does not exist|could not be found)',
         r'invalid (?:mailbox|recipient|address)',
         r'mailbox (?:does not exist|not found|unavailable|'
         r'not available|unknown)',
         r'no (?:such (?:mailbox|user|recipient|address)|mailbox here by '
         r'that name|valid recipients)',
         r'recipient (?:address rejected: (?:access denied|invalid user|'
         r'undeliverable address|unknown user|user unknown)|is not local|'
         r'not found|unknown)',
         r'the email account that you tried to reach does not exist',
         r'unknown (?:address|recipient|user)',
         r'user (?:does not exist|not found|unknown)',
         )),
    ReasonRule(
        'filtered',
        'Email rejected due to a header content after SMTP DATA command',
        (r'because the recipient is not accepting mail with',
         r'due to extended inactivity new mail is not currently being '
         r'accepted for this mailbox',
         r'has restricted sms e-mail',
         r'this account is protected by',
         r'user refuses to receive this mail',
         r'you have been blocked by the recipient',
         )),
    ReasonRule(
        'rejected',
        "Email rejected due to a sender's email address (envelope from)",
        (r'<> invalid sender',
         r'address rejected',
         r'batv (?:failed to verify|validation failure)',
         r'backscatter protection detected an invalid or expired email '
         r'address',
         r'bogus mail from',
         r'closed mailing list',
         r'denied \[bouncedeny\]',
         r'domain of sender address .+ does not exist',
         r'emetteur invalide.+[a-z]{3}.+(?:403|405|415)',
         r'empty envelope senders not allowed',
         r'error: no third-party dsns',
         r'fully qualified email address required',
         r'invalid domain, see <url:.+>',
         r'mail from not owned by user.+[a-z]{3}.+421',
         r'message rejected: email address is not verified',
         r'mx records for .+ violate section .+',
         r'name service error for ',
         r'null sender is not allowed',
         r'recipient not accepted\. \(batv: no tag',
         r'returned mail not accepted here',
         r'rfc 1035 violation: recursive cname records for',
         r'rule imposed mailbox access for',
         r'sender (?:verify failed|not pre-approved|rejected|'
         r'domain is empty)',
         r'syntax error: empty email address',
         r'the message has been rejected by batv defense',
         r'transaction failed unsigned dsn for',
         ),
        exclusion=r'recipient address rejected',
        commands=('MAIL',)),
    ReasonRule(
        'hostunknown',
        'Delivery failed due to a domain part of a recipient address does '
        'not exist',
        (r'domain (?:does not exist|is not reachable|must exist|not found|'
         r'unknown)',
         r'host or domain name not found',
         r'host unknown',
         r'illegal host/domain name found',
         r'name or service not known',
         r'no such domain',
         r'recipient address rejected: unknown domain name',
         r'unrouteable address',
         )),
    ReasonRule(
        'spamdetected',
        'Email rejected by spam filter running on the remote host',
        (r'blocked by spamassassin',
         r'content filter rejection',
         r'identified (?:as )?spam',
         r'message (?:content )?(?:was )?(?:rejected|classified|detected) '
         r'as spam',
         r'spam (?:detected|not accepted|rejected|score)',
         r'this message (?:looks like|is considered) spam',
         r'your message (?:has been )?(?:blocked|rejected|flagged) as spam',
         )),
    ReasonRule(
        'toomanyconn',
        'SMTP connection rejected due to too many concurrent connections',
        (r'all available ips are at maximum connection limit',
         r'connection rate limit exceeded',
         r'exceeds per-domain connection limit for',
         r'too many (?:concurrent )?(?:connections|smtp sessions)',
         r'too many connections from your host',
         )),
    ReasonRule(
        'expired',
        'Delivery time has expired due to a connection failure',
        (r'connection timed out',
         r'could not be delivered for \d+ days',
         r'delivery (?:attempts will continue to be|time) expired',
         r'giving up on',
         r'has been delayed',
         r'message expired',
         r'retry time(?:out)? exceeded',
         r'was not able to deliver the message',
         )),
    ReasonRule(
        'networkerror',
        'SMTP connection failed due to DNS look up failure or other '
        'network problems',
        (r'could not connect and send the mail to',
         r'dns records for the destination computer could not be found',
         r'hop count exceeded - possible mail loop',
         r'host is unreachable',
         r'mail forwarding loop for',
         r'malformed name server reply',
         r'network is unreachable',
         r'no route to host',
         r'too many hops',
         r'unable to resolve route ',
         )),
    ReasonRule(
        'securityerror',
        'Email rejected due to security violation was detected on a '
        'destination host',
        (r'authentication (?:failed|required|turned on in your email client)',
         r'executable files are not allowed in compressed files',
         r'starttls is required',
         r'tls (?:required|session failure)',
         r'unauthenticated email is not accepted',
         r'user not authenticated',
         )),
    ReasonRule(
        'systemerror',
        'Email returned due to system error on the remote host',
        (r'aliasing/forwarding loop broken',
         r'internal (?:server )?error',
         r'local configuration error',
         r'loop was found in the mail exchanger',
         r'queue file write error',
         r'server configuration error',
         r'system config error',
         r'temporary local problem',
         r'timeout waiting for input',
         )),
    ReasonRule(
        'notaccept',
        'Delivery failed due to a destination mail server does not accept '
        'any email',
        (r'does not accept mail',
         r'host does not accept mail',
         r'mail receiving disabled',
         r'name server: .+: host not found',
         r'no mx record found for domain=',
         r'smtp protocol returned a permanent error',
         )),
    )


def builtin_rules():
    """Return the built-in reason rules, highest precedence first."""
    return list(RULES)

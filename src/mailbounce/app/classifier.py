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

"""Classify bounce messages."""

__all__ = [
    'BounceClassifier',
    ]


import logging

from mailbounce.app.normalize import normalize
from mailbounce.app.registry import DetectorRegistry
from mailbounce.bouncers import BUILTIN_DETECTORS
from mailbounce.core.errors import InvalidInputError
from mailbounce.email.message import RawMessage
from mailbounce.interfaces.bounce import NotMatched
from mailbounce.model.bounce import ParseResult
from mailbounce.reasons.builtin import builtin_rules
from mailbounce.reasons.engine import ReasonEngine


log = logging.getLogger('mailbounce.bounce')
NL = '\n'



class BounceClassifier:
    """Turn bounce messages into delivery status records.

    The classifier holds no per-message state, so one instance may be shared
    by any number of threads.
    """

    def __init__(self, registry=None, engine=None, drop_unrecipiented=True):
        if registry is None:
            registry = DetectorRegistry(
                detector() for detector in BUILTIN_DETECTORS)
        if engine is None:
            engine = ReasonEngine(builtin_rules())
        self.registry = registry
        self.engine = engine
        self.drop_unrecipiented = drop_unrecipiented

    @classmethod
    def from_config(cls, config):
        """Build a classifier as configured."""
        return cls(DetectorRegistry.from_config(config),
                   ReasonEngine.from_config(config),
                   config.drop_unrecipiented)

    def _validate(self, msg):
        if msg is None:
            raise InvalidInputError('No message')
        if len(msg) == 0:
            raise InvalidInputError('The message has no headers')
        if not isinstance(msg.body, str) or len(msg.body.strip()) == 0:
            raise InvalidInputError('The message has no body')

    def classify(self, msg):
        """Classify a bounce message.

        :param msg: The bounce message.
        :type msg: `RawMessage`
        :return: The classification, or `NotMatched` when no detector
            recognizes the message.
        :rtype: `ParseResult` or `NotMatched`
        :raises InvalidInputError: when the message has no headers or no
            body.
        """
        self._validate(msg)
        selected = self.registry.select(msg)
        if selected is NotMatched:
            log.info('No detector matched: %r', msg)
            return NotMatched
        detector, records, original = selected
        return self.build(detector, records, original, msg)

    def classify_all(self, msg):
        """Classify a bounce message with every detector that matches it.

        :return: One classification per matching detector, in order of
            precedence.
        :rtype: list of `ParseResult`
        """
        self._validate(msg)
        return [self.build(detector, records, original, msg)
                for detector, records, original
                in self.registry.select_all(msg)]

    def build(self, detector, records, original, msg):
        """Normalize and resolve the records found by a detector."""
        results = []
        for record in records:
            if self.drop_unrecipiented and not record.recipient:
                continue
            normalize(record, detector, msg)
            record.agent = detector.name
            record.reason = self.engine.resolve(record)
            results.append(record)
        text = (NL.join(original) + NL if original else '')
        return ParseResult(results, text, detector.name)

    def classify_string(self, text):
        """Classify the text of a complete message."""
        return self.classify(RawMessage.from_string(text))

    def classify_file(self, fp):
        """Classify a message read from an open text file."""
        return self.classify(RawMessage.from_file(fp))

# SPDX-FileCopyrightText: Copyright (c) 2023 CircuitPython IQS231 contributors
#
# SPDX-License-Identifier: MIT
"""
`circuitpython_iqs231.iqs231_reading`
================================================================================

Every IQS231 register read returns two bytes: the main events byte,
whatever register is addressed, followed by the register value.
:class:`Reading` keeps both together.
"""

from collections import namedtuple

from circuitpython_iqs231.iqs231_flags import MainEvents


class Reading(namedtuple("Reading", ("main_events", "value"))):
    """A register value and the main events sent along with it.

    :param MainEvents main_events: the status byte of the transaction.
    :param value: the decoded register value.
    """

    __slots__ = ()

    @classmethod
    def from_bytes(cls, buf):
        """Build a byte reading from the two bytes of a register read."""
        return cls(MainEvents(buf[0]), buf[1])

    def map(self, func):
        """A reading with ``func`` applied to the value, same main events."""
        return Reading(self.main_events, func(self.value))

    def split(self):
        """``(main_events, value)``"""
        return self.main_events, self.value


def combine16(high, low):
    """Combine the readings of the high and low byte of a 16-bit register.

    Either transaction may report a new event, so the main events of both
    are kept.
    """
    return Reading(
        high.main_events | low.main_events, (high.value << 8) | low.value
    )

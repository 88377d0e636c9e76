# SPDX-FileCopyrightText: Copyright (c) 2023 CircuitPython IQS231 contributors
#
# SPDX-License-Identifier: MIT
"""
`circuitpython_iqs231.iqs231_flags`
================================================================================

Single byte flag sets of the IQS231: the command byte, the main events byte
returned with every read, and the debug, system, UI and event flag registers.

Bits the datasheet leaves reserved are kept as read, so a value can always
be written back or compared exactly. Combine flags with ``|``, ``&`` and
``~`` and test them with ``in``:

.. code-block:: python

    from circuitpython_iqs231.iqs231_flags import MainEvents

    events = MainEvents(0x03)
    if MainEvents.TOUCH in events:
        print("touched")

Each flag set is its own type. Flags of different sets never compare equal
and cannot be combined, and flags are not numbers: ``+``, ``-`` and friends
raise `TypeError`. Use ``int()`` or ``.bits`` for the raw byte.
"""


class Flags:
    """An 8-bit set of independent flags."""

    __slots__ = ("_value",)

    _members = ()

    def __init__(self, value=0):
        if isinstance(value, Flags):
            value = self._coerce(value)
        value = int(value)
        if not 0 <= value <= 0xFF:
            raise ValueError("{} must be from 0-255".format(type(self).__name__))
        object.__setattr__(self, "_value", value)

    @classmethod
    def add_flags(cls, flag_tuples):
        """Creates the named flags of ``cls`` from ``(name, bit mask)`` pairs"""
        cls._members = tuple(flag_tuples)
        for name, mask in cls._members:
            setattr(cls, name, cls(mask))

    @classmethod
    def all(cls):
        """Every named flag of ``cls`` set, reserved bits clear."""
        value = 0
        for _, mask in cls._members:
            value |= mask
        return cls(value)

    @property
    def bits(self):
        """The raw byte."""
        return self._value

    def _coerce(self, other):
        # plain ints are raw bytes; another flag set is an error
        if isinstance(other, Flags):
            if type(other) is not type(self):
                raise TypeError(
                    "cannot combine {} with {}".format(
                        type(self).__name__, type(other).__name__
                    )
                )
            return other._value
        if isinstance(other, int) and not isinstance(other, bool):
            return other
        return NotImplemented

    def __setattr__(self, name, value):
        raise AttributeError("{} is immutable".format(type(self).__name__))

    def __int__(self):
        return self._value

    __index__ = __int__

    def __bool__(self):
        return self._value != 0

    def __eq__(self, other):
        if isinstance(other, Flags):
            return type(other) is type(self) and other._value == self._value
        if isinstance(other, int) and not isinstance(other, bool):
            return other == self._value
        return NotImplemented

    def __hash__(self):
        return hash(self._value)

    def __contains__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            raise TypeError("flags can only contain flags of the same set")
        return self._value & other == other

    def __or__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return type(self)(self._value | other)

    __ror__ = __or__

    def __and__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return type(self)(self._value & other)

    __rand__ = __and__

    def __xor__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return type(self)(self._value ^ other)

    __rxor__ = __xor__

    def __invert__(self):
        return type(self)(~self._value & 0xFF)

    def __iter__(self):
        for name, mask in self._members:
            if mask in self:
                yield name

    def __repr__(self):
        names = list(self)
        known = 0
        for _, mask in self._members:
            known |= mask
        unknown = self._value & ~known
        if unknown:
            names.append("0x{:02X}".format(unknown))
        return "{}({})".format(type(self).__name__, "|".join(names) or "0")

    __str__ = __repr__


class Commands(Flags):
    """Transient actions written to the Commands register.

    ``STANDALONE`` (a.k.a. warm boot) switches the I2C interface off until the
    next power cycle. It is refused by ``IQS231.send_commands()``; use
    ``IQS231.into_standalone()`` instead.
    """


Commands.add_flags(
    (
        ("ATI_CH0", 0x80),
        ("DISABLE_SENSING", 0x40),
        ("ENABLE_SENSING", 0x20),
        ("TOGGLE_AC_FILTER", 0x10),
        ("TOGGLE_ULP_MODE", 0x04),
        ("STANDALONE", 0x01),
    )
)


class MainEvents(Flags):
    """The status byte the device sends ahead of every register value."""


MainEvents.add_flags(
    (
        ("SENSING_DISABLED", 0x20),
        ("WARM_BOOT", 0x10),
        ("COLD_BOOT", 0x08),
        ("RELEASE", 0x04),
        ("TOUCH", 0x02),
        ("PROX", 0x01),
    )
)


class DebugEvents(Flags):
    """Contents of the DebugEvents register."""


DebugEvents.add_flags(
    (
        ("ATI_ERROR", 0x40),
        ("CH0_ATI", 0x20),
        ("QUICK_RELEASE", 0x08),
        ("EXIT_MOV_DETECT", 0x04),
        ("ENTER_MOV_DETECT", 0x02),
        ("MOVEMENT", 0x01),
    )
)


class SystemFlags(Flags):
    """Contents of the System_Flags register."""


SystemFlags.add_flags(
    (
        ("I2C", 0x80),
        ("TEMP", 0x40),
        ("CH0_ACTIVE", 0x20),
        ("CURRENT_CH", 0x10),
        ("NO_SYNC", 0x08),
        ("CH0_LTA_HALTED", 0x04),
        ("ATI_MODE", 0x02),
        ("ZOOM_MODE", 0x01),
    )
)


class UiFlags(Flags):
    """Contents of the UI_Flags register."""


UiFlags.add_flags(
    (
        ("TEMP_CHANNEL_ATI", 0x80),
        ("TEMPERATURE_RESEED", 0x40),
        ("UI_AUTO_ATI_OFF", 0x10),
        ("UI_SENSING_DISABLED", 0x08),
        ("QUICK_RELEASE", 0x04),
        ("OUTPUT_ACTIVE", 0x01),
    )
)


class EventFlags(Flags):
    """Contents of the EventFlags register (per channel detail)."""


EventFlags.add_flags(
    (
        ("CH1_ATI_ERROR", 0x80),
        ("CH1_MOVEMENT", 0x10),
        ("CH0_ATI_ERROR", 0x08),
        ("CH0_UNDEBOUNCED", 0x04),
        ("CH0_TOUCH", 0x02),
        ("CH0_PROX", 0x01),
    )
)

# SPDX-FileCopyrightText: Copyright (c) 2023 CircuitPython IQS231 contributors
#
# SPDX-License-Identifier: MIT
"""
`circuitpython_iqs231.iqs231_fields`
================================================================================

Bit-packed configuration registers of the IQS231 and the value encodings
that are not plain bytes.

The OTP bank, quick release and channel multiplier registers each pack
several fields into one byte. Fields are listed from bit 0 upwards. A field
value that does not fit its bit width is rejected, never truncated:

.. code-block:: python

    from circuitpython_iqs231.iqs231_fields import (
        ChargeTransferFrequency,
        OtpBank3,
        SampleRate,
    )

    bank = OtpBank3(sample_rate=SampleRate.RATE_8HZ)
    bank = bank.replace(charge_transfer_freq=ChargeTransferFrequency.FREQ_64KHZ)
    assert bank.to_byte() == 0x82

Values are immutable; `replace` returns a changed copy.

"""

from circuitpython_iqs231 import iqs231_regs
from circuitpython_iqs231.iqs231_errors import ValueOutOfRangeError
from circuitpython_iqs231.iqs231_regs import CV


class ProximityThreshold(CV):
    """Options for ``OtpBank1.prox_thresh`` and the ProximityThreshold register"""


ProximityThreshold.add_values(
    (
        ("COUNTS_4", 0, "4 counts", 4),
        ("COUNTS_6", 1, "6 counts", 6),
        ("COUNTS_8", 2, "8 counts", 8),
        ("COUNTS_10", 3, "10 counts", 10),
    )
)


class UiSelect(CV):
    """Options for ``OtpBank2.ui_select``"""


UiSelect.add_values(
    (
        ("PROX_NO_MOV", 0, "Prox, no movement", None),
        ("PROX_WITH_MOV", 1, "Prox with movement", None),
        ("PROX_WITH_MOV_TOUCH_NO_MOV", 2, "Prox with movement, touch without", None),
        ("PROX_WITH_MOV_TOUCH_ON_IO2", 3, "Prox with movement, touch on IO2", None),
    )
)


class BaseValue(CV):
    """Options for ``OtpBank2.base_value``"""


BaseValue.add_values(
    (
        ("COUNTS_100", 0, "100 counts", 100),
        ("COUNTS_75", 1, "75 counts", 75),
        ("COUNTS_150", 2, "150 counts", 150),
        ("COUNTS_200", 3, "200 counts", 200),
    )
)


class SampleRate(CV):
    """Options for ``OtpBank3.sample_rate``. ``lsb`` holds the cycle time in ms"""


SampleRate.add_values(
    (
        ("RATE_30HZ", 0, "30 Hz", 57),
        ("RATE_100HZ", 1, "100 Hz", 34),
        ("RATE_8HZ", 2, "8 Hz", 154),
        ("RATE_4HZ", 3, "4 Hz", 280),
    )
)


class Io2Function(CV):
    """Options for ``OtpBank3.io2_function``"""


Io2Function.add_values(
    (
        ("SENSITIVITY", 0, "Sensitivity input", None),  # proximity threshold adjust
        ("SYNCHRONIZE", 1, "Synchronize input", None),
        ("MOVEMENT", 2, "Movement output", None),
        ("IGNORE", 3, "Ignore input, no output", None),
    )
)


class ChargeTransferFrequency(CV):
    """Options for ``OtpBank3.charge_transfer_freq``. ``lsb`` holds the frequency in Hz"""


ChargeTransferFrequency.add_values(
    (
        ("FREQ_500KHZ", 0, "500 kHz", 500000),
        ("FREQ_125KHZ", 1, "125 kHz", 125000),
        ("FREQ_64KHZ", 2, "64 kHz", 64000),
        ("FREQ_16KHZ", 3, "16.5 kHz", 16500),
    )
)


class QuickReleaseThreshold(CV):
    """Options for ``QuickRelease.threshold``. ``lsb`` holds the threshold in counts"""

    @classmethod
    def counts(cls, code):
        """The threshold, in counts, selected by ``code``."""
        if not cls.is_valid(code):
            raise ValueOutOfRangeError(
                "quick release threshold code must be from 0-15, got {!r}".format(code)
            )
        return cls.lsb[code]

    @classmethod
    def from_counts(cls, counts):
        """The code selecting a threshold of ``counts``."""
        for code, value in cls.lsb.items():
            if value == counts:
                return code
        raise ValueOutOfRangeError(
            "{!r} is not a quick release threshold".format(counts)
        )


QuickReleaseThreshold.add_values(
    (
        ("QRT_100", 0x0, "100 counts", 100),
        ("QRT_150", 0x1, "150 counts", 150),
        ("QRT_50", 0x2, "50 counts", 50),
        ("QRT_250", 0x3, "250 counts", 250),
        ("QRT_10", 0x4, "10 counts", 10),
        ("QRT_20", 0x5, "20 counts", 20),
        ("QRT_25", 0x6, "25 counts", 25),
        ("QRT_30", 0x7, "30 counts", 30),
        ("QRT_75", 0x8, "75 counts", 75),
        ("QRT_200", 0x9, "200 counts", 200),
        ("QRT_300", 0xA, "300 counts", 300),
        ("QRT_400", 0xB, "400 counts", 400),
        ("QRT_500", 0xC, "500 counts", 500),
        ("QRT_750", 0xD, "750 counts", 750),
        ("QRT_850", 0xE, "850 counts", 850),
        ("QRT_1000", 0xF, "1000 counts", 1000),
    )
)


class SoftwareVersion(CV):
    """The two known silicon revisions."""


SoftwareVersion.add_values(
    (
        ("IQS231A", iqs231_regs.SOFTWARE_VERSION_IQS231A, "IQS231A", None),
        ("IQS231B", iqs231_regs.SOFTWARE_VERSION_IQS231B, "IQS231B", None),
    )
)


def touch_threshold_to_code(threshold):
    """Convert a touch threshold in counts to the TouchThreshold register code.

    Codes are 4 counts apart, so the threshold is rounded down to the next
    step: ``code_to_touch_threshold(touch_threshold_to_code(x))`` is between
    ``x - 3`` and ``x``.

    :raises ValueOutOfRangeError: if ``threshold`` is not from 4-1024
    """
    if not (
        iqs231_regs.TOUCH_THRESHOLD_MIN
        <= threshold
        <= iqs231_regs.TOUCH_THRESHOLD_MAX
    ):
        raise ValueOutOfRangeError("touch threshold must be from 4-1024")
    return (threshold - 4) >> 2


def code_to_touch_threshold(code):
    """Convert a TouchThreshold register code to counts"""
    return (code << 2) + 4


class _BitField:
    """A ``width`` bit field starting at bit ``shift`` of a register byte.

    ``kind`` is ``bool`` for single bit flags, a CV class for enumerated
    fields, or ``None`` for plain numbers.
    """

    def __init__(self, shift, width, kind=None):
        self.shift = shift
        self.width = width
        self.kind = kind
        self.mask = ((1 << width) - 1) << shift

    def check(self, name, value):
        """Return ``value`` as stored, or raise if it doesn't fit."""
        if self.kind is bool:
            if not isinstance(value, bool):
                raise TypeError("{} must be a bool".format(name))
            return value
        if isinstance(value, bool):
            raise ValueOutOfRangeError("{} must be a number, not a bool".format(name))
        if self.kind is not None and not self.kind.is_valid(value):
            raise ValueOutOfRangeError(
                "{} must be a `{}`".format(name, self.kind.__name__)
            )
        if not isinstance(value, int) or not 0 <= value < (1 << self.width):
            raise ValueOutOfRangeError(
                "{} must be from 0-{}".format(name, (1 << self.width) - 1)
            )
        return value

    def encode(self, value):
        return (int(value) << self.shift) & self.mask

    def decode(self, byte):
        value = (byte & self.mask) >> self.shift
        if self.kind is bool:
            return bool(value)
        return value


class _CompositeRegister:
    """One register byte split into named fields.

    Subclasses list their fields in ``_fields`` as ``(name, _BitField)``
    pairs. Fields not given to the constructor start at 0 / False. Values
    are immutable, use `replace` to change fields.
    """

    _fields = ()

    def __init__(self, **fields):
        for name, field in self._fields:
            default = False if field.kind is bool else 0
            value = field.check(name, fields.pop(name, default))
            object.__setattr__(self, name, value)
        if fields:
            raise TypeError(
                "{} has no field(s) {}".format(
                    type(self).__name__, ", ".join(sorted(fields))
                )
            )

    def __setattr__(self, name, value):
        raise AttributeError(
            "{} is immutable, use replace({}=...)".format(type(self).__name__, name)
        )

    def replace(self, **fields):
        """A copy with the given fields changed.

        :raises TypeError: for a field this register does not have
        :raises ValueOutOfRangeError: if a value does not fit its field
        """
        values = {name: getattr(self, name) for name, _ in self._fields}
        values.update(fields)
        return type(self)(**values)

    @classmethod
    def from_byte(cls, byte):
        """Decode a register byte."""
        if not 0 <= byte <= 0xFF:
            raise ValueOutOfRangeError("register value must be from 0-255")
        return cls(**{name: field.decode(byte) for name, field in cls._fields})

    def to_byte(self):
        """Encode to a register byte."""
        byte = 0
        for name, field in self._fields:
            byte |= field.encode(getattr(self, name))
        return byte

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.to_byte() == other.to_byte()

    def __hash__(self):
        return hash((type(self), self.to_byte()))

    def __repr__(self):
        fields = ", ".join(
            "{}={!r}".format(name, getattr(self, name)) for name, _ in self._fields
        )
        return "{}({})".format(type(self).__name__, fields)


class OtpBank1(_CompositeRegister):
    """OTP bank 1: touch threshold, AC filter, proximity threshold and
    standalone / I2C address selection."""

    _fields = (
        ("touch_thresh", _BitField(0, 2)),
        ("ac_filter", _BitField(2, 2)),
        ("prox_thresh", _BitField(4, 2, ProximityThreshold)),
        ("i2c_addr", _BitField(6, 2)),
    )


class OtpBank2(_CompositeRegister):
    """OTP bank 2: user interface, quick release, IO1 failsafe pulses, base
    value, target and debounce options."""

    _fields = (
        ("ui_select", _BitField(0, 2, UiSelect)),
        ("quick_release", _BitField(2, 1)),
        ("failsafe_pulses_on_io1", _BitField(3, 1, bool)),
        ("base_value", _BitField(4, 2, BaseValue)),
        ("target", _BitField(6, 1)),
        ("increase_debounce", _BitField(7, 1, bool)),
    )


class OtpBank3(_CompositeRegister):
    """OTP bank 3: sample rate, IO1 ATI events, IO2 function, temperature
    and interference compensation and charge transfer frequency."""

    _fields = (
        ("sample_rate", _BitField(0, 2, SampleRate)),
        ("ati_events_on_io1", _BitField(2, 1)),
        ("io2_function", _BitField(3, 2, Io2Function)),
        ("temp_n_interference_compensation", _BitField(5, 1, bool)),
        ("charge_transfer_freq", _BitField(6, 2, ChargeTransferFrequency)),
    )


class QuickRelease(_CompositeRegister):
    """Quick release beta (``base``) and threshold code."""

    _fields = (
        ("base", _BitField(0, 4)),
        ("threshold", _BitField(4, 4, QuickReleaseThreshold)),
    )

    @property
    def threshold_counts(self):
        """The quick release threshold in counts."""
        return QuickReleaseThreshold.counts(self.threshold)


class ChannelMultiplier(_CompositeRegister):
    """Compensation and sensitivity multipliers of one channel. The top two
    bits are reserved but kept as written."""

    _fields = (
        ("compensation_multiplier", _BitField(0, 4)),
        ("sensitivity_multiplier", _BitField(4, 2)),
        ("reserved", _BitField(6, 2)),
    )

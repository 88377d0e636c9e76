# SPDX-FileCopyrightText: Copyright (c) 2023 CircuitPython IQS231 contributors
#
# SPDX-License-Identifier: MIT
"""
`circuitpython_iqs231.iqs231_regs`
================================================================================

Azoteq IQS231A/B capacitive proximity sensor register addresses.

Register offset definitions, writability and address arithmetic for the
IQS231 I2C register file. See datasheet pg. 14 and pg. 30 onwards.

Implementation Notes
--------------------

**Hardware:**

* Azoteq IQS231A / IQS231B single channel capacitive proximity and touch
  controller.

**Software and Dependencies:**

* Adafruit CircuitPython firmware for the supported boards:
  https://circuitpython.org/downloads

* Adafruit's Bus Device library:
  https://github.com/adafruit/Adafruit_CircuitPython_BusDevice

"""

from micropython import const

from circuitpython_iqs231.iqs231_errors import InvalidRegisterError

PRODUCT_NUMBER = const(0x40)

SOFTWARE_VERSION_IQS231A = const(0x06)
SOFTWARE_VERSION_IQS231B = const(0x07)  # Identical to 0x06 software

I2C_ADDR_DEFAULT = const(0x44)
I2C_ADDR_TEST = const(0x45)  # Not used in normal operation
I2C_ADDR_ALT1 = const(0x46)
I2C_ADDR_ALT2 = const(0x47)

# Touch threshold limits, in counts. See iqs231_fields.touch_threshold_to_code.
TOUCH_THRESHOLD_MIN = const(4)
TOUCH_THRESHOLD_MAX = const(1024)

#
# IQS231 Register Addresses
#
PRODUCT_NUMBER_REG = const(0x00)  # Readonly, 0x40
SOFTWARE_VERSION = const(0x01)  # Readonly, 0x06 or 0x07
DEBUG_EVENTS = const(0x02)  # Readonly
RESERVED = const(0x03)
COMMANDS = const(0x04)
OTP_BANK_1 = const(0x05)
OTP_BANK_2 = const(0x06)
OTP_BANK_3 = const(0x07)
QUICK_RELEASE = const(0x08)
MOVEMENT = const(0x09)  # Default 0x34
TOUCH_THRESHOLD = const(0x0A)  # Default 0x07
PROXIMITY_THRESHOLD = const(0x0B)
TEMP_INTERFERENCE_THRESHOLD = const(0x0C)
CH0_MULTIPLIERS = const(0x0D)
CH0_COMPENSATION = const(0x0E)
CH1_MULTIPLIERS = const(0x0F)
CH1_COMPENSATION = const(0x10)
SYSTEM_FLAGS = const(0x11)  # Readonly from here on
UI_FLAGS = const(0x12)
ATI_FLAGS = const(0x13)
EVENT_FLAGS = const(0x14)
CH0_ACF_H = const(0x15)  # Proximity channel filtered count, 0-2000
CH0_ACF_L = const(0x16)
CH0_LTA_H = const(0x17)  # Proximity channel reference count (long term average)
CH0_LTA_L = const(0x18)
CH0_QRD_H = const(0x19)  # Proximity channel quick release detect reference
CH0_QRD_L = const(0x1A)
CH1_ACF_H = const(0x1B)  # Movement channel filtered count
CH1_ACF_L = const(0x1C)
CH1_UMOV_H = const(0x1D)  # Movement channel upper reference count
CH1_UMOV_L = const(0x1E)
CH1_LMOV_H = const(0x1F)  # Movement channel lower reference count
CH1_LMOV_L = const(0x20)
CH1_RAW_H = const(0x21)  # Temperature channel unfiltered count
CH1_RAW_L = const(0x22)
TEMPERATURE_H = const(0x23)  # Movement channel temperature reference
TEMPERATURE_L = const(0x24)
LTA_HALT_TIMER_H = const(0x25)  # (0 - 255) x 100ms
LTA_HALT_TIMER_L = const(0x26)
FILTER_HALT_TIMER = const(0x27)  # (0 - 50) x 100ms
TIMER_READ_INPUT = const(0x28)  # (0 - 10) x 100ms
TIMER_REDO_ATI = const(0x29)  # (0 - 255) x 100ms


class CV:
    """struct helper"""

    @classmethod
    def add_values(cls, value_tuples):
        """Creates CV entries"""
        cls.string = {}
        cls.lsb = {}

        for value_tuple in value_tuples:
            name, value, string, lsb = value_tuple
            setattr(cls, name, value)
            cls.string[value] = string
            cls.lsb[value] = lsb

    @classmethod
    def is_valid(cls, value):
        """Returns true if the given value is a member of the CV"""
        return value in cls.string


class Register(CV):
    """The IQS231 register catalogue. Each entry is its own byte address.

    ``Register.string`` maps an address to its name, ``Register.lsb`` maps
    it to its writability.
    """


# (name, address, display name, writable)
Register.add_values(
    (
        ("PRODUCT_NUMBER", PRODUCT_NUMBER_REG, "ProductNumber", False),
        ("SOFTWARE_VERSION", SOFTWARE_VERSION, "SoftwareVersion", False),
        ("DEBUG_EVENTS", DEBUG_EVENTS, "DebugEvents", False),
        ("RESERVED", RESERVED, "Reserved", True),
        ("COMMANDS", COMMANDS, "Commands", True),
        ("OTP_BANK_1", OTP_BANK_1, "OtpBank1", True),
        ("OTP_BANK_2", OTP_BANK_2, "OtpBank2", True),
        ("OTP_BANK_3", OTP_BANK_3, "OtpBank3", True),
        ("QUICK_RELEASE", QUICK_RELEASE, "QuickRelease", True),
        ("MOVEMENT", MOVEMENT, "Movement", True),
        ("TOUCH_THRESHOLD", TOUCH_THRESHOLD, "TouchThreshold", True),
        ("PROXIMITY_THRESHOLD", PROXIMITY_THRESHOLD, "ProximityThreshold", True),
        (
            "TEMP_INTERFERENCE_THRESHOLD",
            TEMP_INTERFERENCE_THRESHOLD,
            "TempInterferenceThreshold",
            True,
        ),
        ("CH0_MULTIPLIERS", CH0_MULTIPLIERS, "CH0_Multipliers", True),
        ("CH0_COMPENSATION", CH0_COMPENSATION, "CH0_Compensation", True),
        ("CH1_MULTIPLIERS", CH1_MULTIPLIERS, "CH1_Multipliers", True),
        ("CH1_COMPENSATION", CH1_COMPENSATION, "CH1_Compensation", True),
        ("SYSTEM_FLAGS", SYSTEM_FLAGS, "System_Flags", False),
        ("UI_FLAGS", UI_FLAGS, "UI_Flags", False),
        ("ATI_FLAGS", ATI_FLAGS, "ATI_Flags", False),
        ("EVENT_FLAGS", EVENT_FLAGS, "EventFlags", False),
        ("CH0_ACF_H", CH0_ACF_H, "CH0_ACF_H", False),
        ("CH0_ACF_L", CH0_ACF_L, "CH0_ACF_L", False),
        ("CH0_LTA_H", CH0_LTA_H, "CH0_LTA_H", False),
        ("CH0_LTA_L", CH0_LTA_L, "CH0_LTA_L", False),
        ("CH0_QRD_H", CH0_QRD_H, "CH0_QRD_H", False),
        ("CH0_QRD_L", CH0_QRD_L, "CH0_QRD_L", False),
        ("CH1_ACF_H", CH1_ACF_H, "CH1_ACF_H", False),
        ("CH1_ACF_L", CH1_ACF_L, "CH1_ACF_L", False),
        ("CH1_UMOV_H", CH1_UMOV_H, "CH1_UMOV_H", False),
        ("CH1_UMOV_L", CH1_UMOV_L, "CH1_UMOV_L", False),
        ("CH1_LMOV_H", CH1_LMOV_H, "CH1_LMOV_H", False),
        ("CH1_LMOV_L", CH1_LMOV_L, "CH1_LMOV_L", False),
        ("CH1_RAW_H", CH1_RAW_H, "CH1_RAW_H", False),
        ("CH1_RAW_L", CH1_RAW_L, "CH1_RAW_L", False),
        ("TEMPERATURE_H", TEMPERATURE_H, "Temperature_H", False),
        ("TEMPERATURE_L", TEMPERATURE_L, "Temperature_L", False),
        ("LTA_HALT_TIMER_H", LTA_HALT_TIMER_H, "LtaHaltTimer_H", False),
        ("LTA_HALT_TIMER_L", LTA_HALT_TIMER_L, "LtaHaltTimer_L", False),
        ("FILTER_HALT_TIMER", FILTER_HALT_TIMER, "FilterHaltTimer", False),
        ("TIMER_READ_INPUT", TIMER_READ_INPUT, "TimerReadInput", False),
        ("TIMER_REDO_ATI", TIMER_REDO_ATI, "TimerRedoAti", False),
    )
)


class I2cAddress(CV):
    """The 7-bit bus addresses an IQS231 can be ordered with."""


I2cAddress.add_values(
    (
        ("DEFAULT", I2C_ADDR_DEFAULT, "Default", None),
        ("TEST", I2C_ADDR_TEST, "Test", None),
        ("ALT1", I2C_ADDR_ALT1, "Alt1", None),
        ("ALT2", I2C_ADDR_ALT2, "Alt2", None),
    )
)


def register_name(register):
    """The datasheet name of ``register``, or its hex address if unknown."""
    return Register.string.get(register, "0x{:02X}".format(register))


def address_of(register):
    """The byte address of ``register``.

    :raises InvalidRegisterError: if ``register`` is not in the register map.
    """
    if isinstance(register, bool) or not Register.is_valid(register):
        raise InvalidRegisterError(register)
    return register


def is_writable(register):
    """True if ``register`` may be written over I2C.

    :raises InvalidRegisterError: if ``register`` is not in the register map.
    """
    return Register.lsb[address_of(register)]


def successor(register):
    """The register one address above ``register``, i.e. the low byte of a
    16-bit value whose high byte is ``register``.

    :raises InvalidRegisterError: if there is no such register.
    """
    return address_of(address_of(register) + 1)

# SPDX-FileCopyrightText: Copyright (c) 2023 CircuitPython IQS231 contributors
#
# SPDX-License-Identifier: MIT
"""
`circuitpython_iqs231.iqs231_errors`
================================================================================

Exceptions raised by the IQS231 driver.

Every error derives from :class:`IQS231Error`, so callers that do not care
about the detail can catch that one class. Each error also derives from the
builtin exception traditionally raised for the same kind of failure.
"""


class IQS231Error(Exception):
    """Base class of all IQS231 driver errors."""


class TransportError(IQS231Error, OSError):
    """The I2C transaction itself failed. The bus error is kept in ``cause``."""

    def __init__(self, cause):
        super().__init__("I2C transfer failed: {}".format(cause))
        self.cause = cause


class InvalidRegisterError(IQS231Error, ValueError):
    """The requested register does not exist."""

    def __init__(self, register):
        super().__init__("No register at address {!r}".format(register))
        self.register = register


class RegisterNotWritableError(IQS231Error, RuntimeError):
    """A write was attempted on a read-only register."""

    def __init__(self, register):
        super().__init__("Register 0x{:02X} is read-only".format(register))
        self.register = register


class UnknownSoftwareVersionError(IQS231Error, RuntimeError):
    """Software version is other than the known 0x06 (IQS231A) or 0x07 (IQS231B)."""

    def __init__(self, value):
        super().__init__("Unknown software version 0x{:02X}".format(value))
        self.value = value


class IncorrectProductNumberError(IQS231Error, RuntimeError):
    """The device did not report the IQS231 product number (0x40)."""

    def __init__(self, value):
        super().__init__("No IQS231 (product number=0x{:02X})".format(value))
        self.value = value


class ForbiddenCommandError(IQS231Error, RuntimeError):
    """The STANDALONE command may only be sent with ``into_standalone()``."""

    def __init__(self):
        super().__init__(
            "STANDALONE disables I2C on the device, use into_standalone()"
        )


class ValueOutOfRangeError(IQS231Error, ValueError):
    """A value does not fit the register field it is meant for."""


class DeviceReleasedError(IQS231Error, RuntimeError):
    """The device handle gave its I2C bus back and can no longer be used."""

    def __init__(self):
        super().__init__("IQS231 handle has been released")

# SPDX-FileCopyrightText: Copyright (c) 2023 CircuitPython IQS231 contributors
#
# SPDX-License-Identifier: MIT
"""
`circuitpython_iqs231`
================================================================================

Capacitive proximity and touch sensor


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

* Adafruit's Logging library:
  https://github.com/adafruit/Adafruit_CircuitPython_Logging

"""

import adafruit_bus_device.i2c_device as i2cdevice
import adafruit_logging as logging

from circuitpython_iqs231 import iqs231_regs
from circuitpython_iqs231.iqs231_errors import (
    DeviceReleasedError,
    ForbiddenCommandError,
    IncorrectProductNumberError,
    RegisterNotWritableError,
    TransportError,
    UnknownSoftwareVersionError,
    ValueOutOfRangeError,
)
from circuitpython_iqs231.iqs231_fields import (
    ChannelMultiplier,
    OtpBank1,
    OtpBank2,
    OtpBank3,
    ProximityThreshold,
    QuickRelease,
    SoftwareVersion,
    code_to_touch_threshold,
    touch_threshold_to_code,
)
from circuitpython_iqs231.iqs231_flags import (
    Commands,
    DebugEvents,
    EventFlags,
    MainEvents,
    SystemFlags,
    UiFlags,
)
from circuitpython_iqs231.iqs231_reading import Reading, combine16
from circuitpython_iqs231.iqs231_regs import I2cAddress, Register, register_name

__version__ = "0.0.0+auto.0"
__repo__ = "https://github.com/circuitpython-iqs231/CircuitPython_IQS231.git"

logger = logging.getLogger(__name__)


class IQS231:  # pylint: disable=too-many-public-methods
    """Driver for the Azoteq IQS231A/B capacitive proximity sensor.

    :param ~busio.I2C i2c_bus: The I2C bus the IQS231 is connected to.
    :param int address: The I2C address, one of the `I2cAddress` values.
        Defaults to ``0x44``.
    :param bool probe: Check that something answers at ``address`` first.
    :param bool check_identity: Read the product number on construction and
        raise if it isn't an IQS231.

    Every ``get_*`` method returns a :class:`Reading`, pairing the value with
    the `MainEvents` the device sent in the same transaction. Nothing is
    cached: each call is a fresh bus transaction.

    **Quickstart: Importing and using the device**

        .. code-block:: python

            import board
            from circuitpython_iqs231 import IQS231

            i2c = board.I2C()  # uses board.SCL and board.SDA
            iqs = IQS231(i2c)
            events, count = iqs.get_prox_filtered_count()

    Datasheet: https://www.azoteq.com/images/stories/pdf/iqs231a_datasheet.pdf
    """

    def __init__(
        self,
        i2c_bus,
        address=iqs231_regs.I2C_ADDR_DEFAULT,
        *,
        probe=True,
        check_identity=True,
    ):
        if not I2cAddress.is_valid(address):
            raise ValueError(
                "address must be one of 0x44, 0x45, 0x46 or 0x47, got {!r}".format(
                    address
                )
            )
        self.address = address
        self.i2c_device = i2cdevice.I2CDevice(i2c_bus, address, probe=probe)

        if check_identity:
            self.get_prod_nr()

    def _device(self):
        if self.i2c_device is None:
            raise DeviceReleasedError()
        return self.i2c_device

    def release(self):
        """Give up the I2C bus. The handle cannot be used afterwards.

        :return: the ``busio.I2C`` bus passed to the constructor.
        """
        i2c_bus = self._device().i2c
        self.i2c_device = None
        return i2c_bus

    # Raw register access

    def read_register(self, register):
        """Read one register.

        :param int register: a `Register` address.
        :return: `Reading` of the raw byte.
        :raises InvalidRegisterError: if ``register`` does not exist.
        :raises TransportError: if the I2C transfer fails.
        """
        address = iqs231_regs.address_of(register)
        device = self._device()
        buf = bytearray(2)
        try:
            with device as i2c:
                i2c.write_then_readinto(bytes([address]), buf)
        except OSError as err:
            raise TransportError(err) from err

        reading = Reading.from_bytes(buf)
        logger.debug("Read reg [%s] -> %r", register_name(address), reading)
        return reading

    def read_register16(self, register):
        """Read a 16-bit value stored high byte first in ``register`` and the
        register after it.

        :raises InvalidRegisterError: if there is no register after ``register``.
        """
        low_register = iqs231_regs.successor(register)
        high = self.read_register(register)
        low = self.read_register(low_register)
        return combine16(high, low)

    def write_register(self, register, value):
        """Write one byte to a register.

        :raises InvalidRegisterError: if ``register`` does not exist.
        :raises RegisterNotWritableError: if ``register`` is read-only.
        :raises ValueOutOfRangeError: if ``value`` isn't a byte.
        :raises TransportError: if the I2C transfer fails.
        """
        address = iqs231_regs.address_of(register)
        if not iqs231_regs.is_writable(address):
            raise RegisterNotWritableError(address)
        if not 0 <= value <= 0xFF:
            raise ValueOutOfRangeError("register value must be from 0-255")
        device = self._device()

        logger.debug("Write reg [%s] <- 0x%02X", register_name(address), value)
        try:
            with device as i2c:
                i2c.write(bytes([address, value]))
        except OSError as err:
            raise TransportError(err) from err

    def read_main_events(self):
        """Read just the main events byte, without addressing a register.

        :return: `MainEvents`
        """
        device = self._device()
        buf = bytearray(1)
        try:
            with device as i2c:
                i2c.readinto(buf)
        except OSError as err:
            raise TransportError(err) from err
        return MainEvents(buf[0])

    # Identification

    def get_prod_nr(self):
        """The product number, which is always 0x40 for an IQS231.

        :raises IncorrectProductNumberError: if another number is read, i.e.
            the device at this address is not an IQS231.
        """
        reading = self.read_register(Register.PRODUCT_NUMBER)
        if reading.value != iqs231_regs.PRODUCT_NUMBER:
            raise IncorrectProductNumberError(reading.value)
        return reading

    def get_software_version(self):
        """The silicon revision, a `SoftwareVersion` value.

        :raises UnknownSoftwareVersionError: if the version isn't 0x06 or 0x07.
        """
        reading = self.read_register(Register.SOFTWARE_VERSION)
        if not SoftwareVersion.is_valid(reading.value):
            raise UnknownSoftwareVersionError(reading.value)
        return reading

    # Commands

    def send_commands(self, commands):
        """Send one or more `Commands`.

        ``Commands.STANDALONE`` (a.k.a. warm boot) is refused here because it
        switches off the I2C interface of the device; see `into_standalone`.

        :raises ForbiddenCommandError: if ``Commands.STANDALONE`` is set.
        """
        commands = Commands(commands)
        if Commands.STANDALONE in commands:
            raise ForbiddenCommandError()
        self.write_register(Register.COMMANDS, commands.bits)

    def into_standalone(self):
        """Put the device in standalone mode and release the bus.

        The device stops answering on I2C until it is power cycled, so this
        handle is released and the bus is returned for other devices.

        :return: the ``busio.I2C`` bus passed to the constructor.
        """
        self.write_register(Register.COMMANDS, Commands.STANDALONE.bits)
        logger.info("IQS231 at 0x%02X entered standalone mode", self.address)
        return self.release()

    # OTP banks

    def get_otp_bank1(self):
        """OTP bank 1 as an `OtpBank1`."""
        return self.read_register(Register.OTP_BANK_1).map(OtpBank1.from_byte)

    def set_otp_bank1(self, bank):
        """Write an `OtpBank1`."""
        self.write_register(Register.OTP_BANK_1, bank.to_byte())

    def get_otp_bank2(self):
        """OTP bank 2 as an `OtpBank2`."""
        return self.read_register(Register.OTP_BANK_2).map(OtpBank2.from_byte)

    def set_otp_bank2(self, bank):
        """Write an `OtpBank2`."""
        self.write_register(Register.OTP_BANK_2, bank.to_byte())

    def get_otp_bank3(self):
        """OTP bank 3 as an `OtpBank3`."""
        return self.read_register(Register.OTP_BANK_3).map(OtpBank3.from_byte)

    def set_otp_bank3(self, bank):
        """Write an `OtpBank3`."""
        self.write_register(Register.OTP_BANK_3, bank.to_byte())

    def get_quick_release(self):
        """Quick release settings as a `QuickRelease`."""
        return self.read_register(Register.QUICK_RELEASE).map(QuickRelease.from_byte)

    def set_quick_release(self, quick_release):
        """Write a `QuickRelease`."""
        self.write_register(Register.QUICK_RELEASE, quick_release.to_byte())

    # Thresholds

    def get_movement_threshold(self):
        """The raw Movement register. Default 0x34."""
        return self.read_register(Register.MOVEMENT)

    def set_movement_threshold(self, threshold):
        self.write_register(Register.MOVEMENT, threshold)

    def get_touch_threshold(self):
        """The touch threshold in counts, 4-1024 in steps of 4."""
        return self.read_register(Register.TOUCH_THRESHOLD).map(
            code_to_touch_threshold
        )

    def set_touch_threshold(self, threshold):
        """Set the touch threshold in counts. Rounded down to a multiple of 4
        counts above 4.

        :raises ValueOutOfRangeError: if ``threshold`` is not from 4-1024.
        """
        self.write_register(
            Register.TOUCH_THRESHOLD, touch_threshold_to_code(threshold)
        )

    def get_proximity_threshold(self):
        """The proximity threshold as a `ProximityThreshold` value."""
        return self.read_register(Register.PROXIMITY_THRESHOLD).map(
            lambda value: value & 0x03
        )

    def set_proximity_threshold(self, threshold):
        """Set the proximity threshold.

        :param int threshold: a `ProximityThreshold` value.
        :raises ValueOutOfRangeError: if ``threshold`` isn't a `ProximityThreshold`.
        """
        if not ProximityThreshold.is_valid(threshold):
            raise ValueOutOfRangeError(
                "proximity threshold must be a `ProximityThreshold`"
            )
        self.write_register(Register.PROXIMITY_THRESHOLD, threshold)

    def get_temp_interference_threshold(self):
        return self.read_register(Register.TEMP_INTERFERENCE_THRESHOLD)

    def set_temp_interference_threshold(self, threshold):
        """Default 3. Low values are recommended for the intended effect, use
        a higher value when using the feature in a noisy environment."""
        self.write_register(Register.TEMP_INTERFERENCE_THRESHOLD, threshold)

    # Channel multipliers and compensation

    def get_ch0_multipliers(self):
        """Proximity channel multipliers as a `ChannelMultiplier`."""
        return self.read_register(Register.CH0_MULTIPLIERS).map(
            ChannelMultiplier.from_byte
        )

    def set_ch0_multipliers(self, multipliers):
        self.write_register(Register.CH0_MULTIPLIERS, multipliers.to_byte())

    def get_ch0_compensation(self):
        """Proximity channel compensation, 0-255."""
        return self.read_register(Register.CH0_COMPENSATION)

    def set_ch0_compensation(self, compensation):
        self.write_register(Register.CH0_COMPENSATION, compensation)

    def get_ch1_multipliers(self):
        """Movement channel multipliers as a `ChannelMultiplier`."""
        return self.read_register(Register.CH1_MULTIPLIERS).map(
            ChannelMultiplier.from_byte
        )

    def set_ch1_multipliers(self, multipliers):
        self.write_register(Register.CH1_MULTIPLIERS, multipliers.to_byte())

    def get_ch1_compensation(self):
        """Movement channel compensation, 0-255."""
        return self.read_register(Register.CH1_COMPENSATION)

    def set_ch1_compensation(self, compensation):
        self.write_register(Register.CH1_COMPENSATION, compensation)

    # Status flags

    def get_debug_events(self):
        """The DebugEvents register as `DebugEvents`."""
        return self.read_register(Register.DEBUG_EVENTS).map(DebugEvents)

    def get_system_flags(self):
        """The System_Flags register as `SystemFlags`."""
        return self.read_register(Register.SYSTEM_FLAGS).map(SystemFlags)

    def get_ui_flags(self):
        """The UI_Flags register as `UiFlags`."""
        return self.read_register(Register.UI_FLAGS).map(UiFlags)

    def get_ati_flags(self):
        """The raw ATI_Flags register. No bits are documented."""
        return self.read_register(Register.ATI_FLAGS)

    def get_event_flags(self):
        """The EventFlags register as `EventFlags`."""
        return self.read_register(Register.EVENT_FLAGS).map(EventFlags)

    # Counts, 0-2000

    def get_prox_filtered_count(self):
        """Proximity channel: filtered count value."""
        return self.read_register16(Register.CH0_ACF_H)

    def get_prox_reference_count(self):
        """Proximity channel: reference count value (long term average)."""
        return self.read_register16(Register.CH0_LTA_H)

    def get_prox_quick_release_detect_reference(self):
        """Proximity channel: quick release detect reference value."""
        return self.read_register16(Register.CH0_QRD_H)

    def get_move_filtered_count(self):
        """Movement channel: filtered count value."""
        return self.read_register16(Register.CH1_ACF_H)

    def get_move_upper_reference_count(self):
        """Movement channel: upper reference count value."""
        return self.read_register16(Register.CH1_UMOV_H)

    def get_move_lower_reference_count(self):
        """Movement channel: lower reference count value."""
        return self.read_register16(Register.CH1_LMOV_H)

    def get_move_unfiltered_count(self):
        """Temperature channel: unfiltered count value (if the temperature
        feature is enabled)."""
        return self.read_register16(Register.CH1_RAW_H)

    def get_temp_reference(self):
        """Movement channel temperature reference (a previous value of the
        temperature channel)."""
        return self.read_register16(Register.TEMPERATURE_H)

    # Timers, in units of 100ms

    def get_lta_halt_timer(self):
        """Countdown to the long term average halt time-out. Movement events
        reset this timer. 0-90 minutes."""
        return self.read_register16(Register.LTA_HALT_TIMER_H)

    def get_filter_halt_timer(self):
        """Countdown of the fixed 5 second time-out in filter halt mode,
        before entering proximity detect."""
        return self.read_register(Register.FILTER_HALT_TIMER)

    def get_timer_read_input(self):
        """Countdown to the next read of IO2. 0-1 seconds."""
        return self.read_register(Register.TIMER_READ_INPUT)

    def get_timer_redo_ati(self):
        """Countdown until re-calibration is attempted after an ATI error.
        0-25 seconds."""
        return self.read_register(Register.TIMER_REDO_ATI)

"""Pytest configuration for IQS231 tests.

Provides a simulated IQS231 sitting on a fake ``busio.I2C``, so the driver
is exercised through the real ``adafruit_bus_device`` I2CDevice.
"""

from collections import deque

import adafruit_logging as logging
import pytest

from circuitpython_iqs231 import IQS231, iqs231_regs


class FakeIQS231Bus:
    """A ``busio.I2C`` look-alike with one IQS231 attached.

    Register reads answer ``[main_events, registers[address]]`` unless a
    scripted two byte response is queued in ``responses``. Register writes
    are recorded in ``writes`` and stored in ``registers``.
    """

    def __init__(self, address=iqs231_regs.I2C_ADDR_DEFAULT):
        self.address = address
        self.registers = bytearray(0x2A)
        self.registers[iqs231_regs.PRODUCT_NUMBER_REG] = iqs231_regs.PRODUCT_NUMBER
        self.registers[iqs231_regs.SOFTWARE_VERSION] = (
            iqs231_regs.SOFTWARE_VERSION_IQS231A
        )
        self.registers[iqs231_regs.MOVEMENT] = 0x34
        self.registers[iqs231_regs.TOUCH_THRESHOLD] = 0x07
        self.main_events = 0x00
        self.responses = deque()
        self.reads = []
        self.writes = []
        self.error = None
        self.locked = False

    def _check(self, address):
        if address != self.address:
            raise OSError(19, "No device at 0x{:02X}".format(address))
        if self.error is not None:
            raise self.error

    def try_lock(self):
        if self.locked:
            return False
        self.locked = True
        return True

    def unlock(self):
        self.locked = False

    def writeto(self, address, buffer, *, start=0, end=None):
        self._check(address)
        data = bytes(buffer[start:end])
        if not data:
            # I2CDevice probe
            return
        self.writes.append(data)
        self.registers[data[0]] = data[1]

    def readfrom_into(self, address, buffer, *, start=0, end=None):
        self._check(address)
        end = len(buffer) if end is None else end
        for i in range(start, end):
            buffer[i] = self.main_events

    def writeto_then_readfrom(
        self,
        address,
        buffer_out,
        buffer_in,
        *,
        out_start=0,
        out_end=None,
        in_start=0,
        in_end=None
    ):
        self._check(address)
        register = buffer_out[out_start:out_end][0]
        self.reads.append(register)
        if self.responses:
            response = self.responses.popleft()
        else:
            response = (self.main_events, self.registers[register])
        in_end = len(buffer_in) if in_end is None else in_end
        buffer_in[in_start:in_end] = bytes(response)

    def deinit(self):
        pass


class RecordingHandler(logging.Handler):
    """Keeps the message of every record it is given."""

    def __init__(self):
        super().__init__()
        self.messages = []

    def emit(self, record):
        self.messages.append(record.msg)


@pytest.fixture
def bus():
    """A fake I2C bus with an IQS231 at the default address."""
    return FakeIQS231Bus()


@pytest.fixture
def iqs(bus):
    """A driver for the simulated IQS231, with the transaction log cleared."""
    device = IQS231(bus)
    bus.reads.clear()
    return device


@pytest.fixture
def log_messages():
    """Messages logged by the driver at DEBUG and above while the test runs."""
    logger = logging.getLogger("circuitpython_iqs231")
    handler = RecordingHandler()
    level = logger.getEffectiveLevel()
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    yield handler.messages
    logger.removeHandler(handler)
    logger.setLevel(level)

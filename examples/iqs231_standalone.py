# SPDX-FileCopyrightText: 2023 CircuitPython IQS231 contributors
#
# SPDX-License-Identifier: MIT
import board
import busio
from circuitpython_iqs231 import IQS231
from circuitpython_iqs231.iqs231_fields import (
    QuickRelease,
    QuickReleaseThreshold,
)

i2c = busio.I2C(board.SCL, board.SDA)

iqs = IQS231(i2c)
iqs.set_quick_release(
    QuickRelease(base=4, threshold=QuickReleaseThreshold.QRT_400)
)
print("Quick release:", iqs.get_quick_release().value)

# The IQS231 stops answering on I2C until it is power cycled.
i2c = iqs.into_standalone()
print("Standalone, bus is free:", i2c)

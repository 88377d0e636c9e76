# SPDX-FileCopyrightText: 2023 CircuitPython IQS231 contributors
#
# SPDX-License-Identifier: MIT
import time
import board
import busio
from circuitpython_iqs231 import IQS231
from circuitpython_iqs231.iqs231_fields import OtpBank3, SampleRate
from circuitpython_iqs231.iqs231_flags import MainEvents

i2c = busio.I2C(board.SCL, board.SDA)

iqs = IQS231(i2c)
print("Software version: 0x%02X" % iqs.get_software_version().value)

iqs.set_touch_threshold(64)
iqs.set_otp_bank3(OtpBank3(sample_rate=SampleRate.RATE_100HZ))

while True:
    events, count = iqs.get_prox_filtered_count()
    if MainEvents.TOUCH in events:
        print("Touch", count)
    elif MainEvents.PROX in events:
        print("Proximity", count)
    time.sleep(0.1)

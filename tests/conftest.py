import struct

import pytest

from davisarchive.archive import record_format

# 2012-06-17 15:05, 25 C average, 2 mph wind from the north
SAMPLE = {
    'date_stamp': 6353,
    'time_stamp': 1505,
    'out_temp': 766,
    'high_out_temp': 800,
    'low_out_temp': 736,
    'rain': 10,
    'rain_rate': 5,
    'barometer': 29921,
    'radiation': 500,
    'wind_samples': 100,
    'in_temp': 700,
    'in_humidity': 40,
    'out_humidity': 35,
    'wind_speed': 2,
    'wind_gust': 10,
    'wind_gust_dir': 1,
    'wind_dir': 0,
    'uv': 100,
    'et': 10,
    'high_radiation': 32767,
    'high_uv': 255,
    'forecast_rule': 0,
    'leaf_temps': 0xFFFF,
    'leaf_wets': 0x1234,
    'soil_temps': 0xFFFFFFFF,
    'record_type': 0,
    'extra_humids': 0xFF32,
    'extra_temp_0': 120,
    'extra_temp_1': 255,
    'extra_temp_2': 255,
    'soil_moists': 0x01020304,
    }


def build_record(**overrides):
    values = dict(SAMPLE, **overrides)
    fmt = '<' + ''.join(code for name, offset, code in record_format)
    return struct.pack(fmt, *(values[name] for name, offset, code in record_format))


@pytest.fixture
def make_record():
    return build_record

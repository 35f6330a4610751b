# davisarchive - decode Davis Vantage weather station archive records
# Copyright (C) 2026  davisarchive contributors

# This program is free software; you can redistribute it and/or
# modify it under the terms of the GNU General Public License
# as published by the Free Software Foundation; either version 2
# of the License, or (at your option) any later version.

# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.

# You should have received a copy of the GNU General Public License
# along with this program; if not, write to the Free Software
# Foundation, Inc., 51 Franklin Street, Fifth Floor, Boston, MA  02110-1301, USA.

"""conversions.py - a set of functions to convert raw Davis archive
values (Fahrenheit tenths, rain clicks, mph, inches) to metric units

Every ``decode_*`` function takes the raw integer from an archive
record and returns :obj:`None` if that integer is the station's "no
reading" value for the field. A reading of zero is never confused
with a missing reading.

"""

__docformat__ = "restructuredtext en"

import logging

from davisarchive.constants import (
    CARDINALS, DASH_BYTE, DASH_SHORT, DASH_SIGNED_SHORT, KMH_PER_MPH,
    MM_PER_CLICK, MM_PER_INCH)

logger = logging.getLogger(__name__)


def _blank(value):
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()

def scale(value, factor):
    """Multiply value by factor, allowing for None values."""
    if value is None:
        return None
    return value * factor

def in_to_mm(value):
    "Convert inches to millimetres"
    if _blank(value):
        return None
    return float(value) * MM_PER_INCH

def mph_to_kmh(value):
    "Convert miles per hour to kilometres per hour, to 0.1 km/h"
    if _blank(value):
        return None
    return round(float(value) * KMH_PER_MPH, 1)

def decode_temperature(raw):
    """Convert temperature from tenths of a degree Fahrenheit to
    Celsius.

    Both 32767 and -32768 are used by the station to mean "no
    reading".

    """
    if raw in (DASH_SHORT, DASH_SIGNED_SHORT):
        return None
    return ((raw / 10.0) - 32) * (5 / 9.0)

def decode_rain(raw):
    "Convert rain bucket clicks to mm. Zero is a valid reading."
    return scale(raw, MM_PER_CLICK)

def decode_barometer(raw):
    "Convert barometer from thousandths of an inch of mercury"
    if not raw:
        return None
    return raw / 1000.0

def decode_wind_speed(raw):
    "Convert wind speed from mph to km/h"
    if raw == DASH_BYTE:
        return None
    return mph_to_kmh(raw)

def decode_wind_direction(raw):
    """Convert wind direction from 0..15 to compass point text.

    Any value that isn't a compass point, including the "no reading"
    value, gives :obj:`None`.

    """
    if raw == DASH_BYTE:
        return None
    if not 0 <= raw < len(CARDINALS):
        logger.debug('wind direction %d out of range', raw)
        return None
    return CARDINALS[raw]

def decode_uv(raw):
    "Convert UV index from tenths"
    if raw == DASH_BYTE:
        return None
    return raw / 10.0

def decode_et(raw):
    """Convert evapotranspiration from thousandths of an inch to mm.

    The station stores zero when no ET sensor is fitted.

    """
    if raw == 0:
        return None
    return in_to_mm(raw / 1000.0)

def decode_solar_radiation(raw):
    "Solar radiation is already in W/m2"
    if raw == DASH_SHORT:
        return None
    return raw

def decode_humidity(raw):
    if raw == DASH_BYTE:
        return None
    return raw


def _main(argv=None):
    # run some simple tests
    print('Temperature:')
    print('%8s %8s' % ('raw', 'C'))
    for raw in (320, 500, 736, 766, 1000, 2120):
        print('%8d %8.2f' % (raw, decode_temperature(raw)))
    print('Wind speed:')
    print('%6s %8s' % ('mph', 'km/h'))
    for mph in (0, 1, 2, 5, 10, 20, 40):
        print('%6d %8.1f' % (mph, decode_wind_speed(mph)))
    print('Wind direction:')
    for pts in range(16):
        print(' ' + decode_wind_direction(pts), end='')
    print('')


if __name__ == "__main__":
    _main()

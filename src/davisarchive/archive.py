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

"""Decode archive records downloaded from Vantage Pro, Vantage Pro2
and Vantage Vue weather stations.

Introduction
------------

The station stores its history as 52 byte "revision B" archive
records, as described in the Vantage Serial Communication Reference
Manual, section X.4. A download ("DMP" or "DMPAFT") produces a buffer
of consecutive records. Slots the station has not yet written are
filled with ``0xFF``; these placeholder records produce no reading.

Decoding is controlled by the static table :py:data:`record_format`.
Each entry is a ``(name, offset, code)`` tuple, where ``code`` is a
:py:mod:`struct` format character. So, for example, the entry
``('rain', 10, 'H')`` means that the rain value is an unsigned short
(two bytes), 10 bytes from the start of the record. All values are
little-endian.

Only some fields are converted to physical units. The extra sensor
fields (leaf and soil temperature and moisture, extra humidity and
temperature channels) are passed through as raw integers.

To decode a complete download::

  from davisarchive.archive import decode_data
  from davisarchive.timezone import parse_utc_offset

  utc_offset = parse_utc_offset('-0300 -03')
  for reading in decode_data(raw_bytes, utc_offset):
      print(reading.valid_date_time, reading.temperature_c)

Detailed API
------------

"""

__docformat__ = "restructuredtext en"

from collections import namedtuple, OrderedDict
import logging
import struct

from davisarchive.constants import ARCHIVE_SIZE, DASH_WORD
from davisarchive.conversions import (
    decode_barometer, decode_et, decode_humidity, decode_rain,
    decode_solar_radiation, decode_temperature, decode_uv,
    decode_wind_direction, decode_wind_speed)
from davisarchive.timestamp import decode_timestamp, pack_datetime

logger = logging.getLogger(__name__)


class MalformedRecord(ValueError):
    """An archive record is not exactly 52 bytes long."""
    pass


class MalformedBufferLength(ValueError):
    """A download buffer is not a whole number of archive records."""
    pass


# Table of "meanings" for raw archive record data.
record_format = (
    # name              offset  code
    ('date_stamp',          0,  'H'),
    ('time_stamp',          2,  'H'),
    ('out_temp',            4,  'h'),   # average, 0.1 F
    ('high_out_temp',       6,  'h'),
    ('low_out_temp',        8,  'h'),
    ('rain',               10,  'H'),   # clicks
    ('rain_rate',          12,  'H'),   # clicks / hour
    ('barometer',          14,  'H'),   # 0.001 inHg
    ('radiation',          16,  'H'),   # W/m2
    ('wind_samples',       18,  'H'),
    ('in_temp',            20,  'h'),
    ('in_humidity',        22,  'B'),
    ('out_humidity',       23,  'B'),
    ('wind_speed',         24,  'B'),   # mph
    ('wind_gust',          25,  'B'),
    ('wind_gust_dir',      26,  'B'),   # 0..15
    ('wind_dir',           27,  'B'),
    ('uv',                 28,  'B'),   # 0.1 UV index
    ('et',                 29,  'B'),   # 0.001 inch
    ('high_radiation',     30,  'H'),
    ('high_uv',            32,  'B'),
    ('forecast_rule',      33,  'B'),
    ('leaf_temps',         34,  'H'),
    ('leaf_wets',          36,  'H'),
    ('soil_temps',         38,  'L'),
    ('record_type',        42,  'B'),
    ('extra_humids',       43,  'H'),
    ('extra_temp_0',       45,  'B'),
    ('extra_temp_1',       46,  'B'),
    ('extra_temp_2',       47,  'B'),
    ('soil_moists',        48,  'L'),
    )

_record_struct = struct.Struct(
    '<' + ''.join(code for name, offset, code in record_format))
_dash_struct = struct.Struct('<HH')


class DecodedReading(namedtuple('DecodedReading', (
    'davis_timestamp', 'valid_date_time',
    'high_temperature_c', 'low_temperature_c', 'temperature_c',
    'rain_amount_mm', 'rain_rate_mm_per_hour', 'barometer',
    'solar_radiation', 'humidity',
    'average_wind_speed', 'high_wind_speed',
    'high_wind_direction', 'wind_direction',
    'average_uv', 'et', 'high_solar_radiation', 'high_uv_index',
    'leaf_temperatures_raw', 'leaf_wetnesses_raw', 'soil_temperatures_raw',
    'extra_humidities_raw', 'extra_temperature_0_raw',
    'extra_temperature_1_raw', 'extra_temperature_2_raw',
    'soil_moistures_raw',
    ))):
    """One decoded archive record. Missing readings are :obj:`None`."""
    __slots__ = ()

    def as_dict(self):
        return OrderedDict(zip(self._fields, self))


def _check_length(record):
    if len(record) != ARCHIVE_SIZE:
        raise MalformedRecord(
            'archive record is %d bytes, expected %d' % (
                len(record), ARCHIVE_SIZE))

def is_dash(record):
    """Is ``record`` an unused archive slot?"""
    return _dash_struct.unpack_from(record) == (DASH_WORD, DASH_WORD)

def unpack_archive(record):
    """Get the raw integer values from an archive record.

    :return: field values, keyed by the names in
        :py:data:`record_format`.

    :rtype: collections.OrderedDict

    """
    _check_length(record)
    return OrderedDict(zip(
        (name for name, offset, code in record_format),
        _record_struct.unpack(bytes(record))))

def decode_archive(record, utc_offset):
    """Decode one 52 byte archive record.

    :param record: the raw record.

    :type record: bytes

    :param utc_offset: the station clock's offset from UTC, as
        returned by :py:func:`davisarchive.timezone.parse_utc_offset`.
        If this is :obj:`None` the timestamp is not resolved and
        ``valid_date_time`` is :obj:`None`.

    :type utc_offset: str

    :return: the decoded reading, or :obj:`None` if ``record`` is a
        placeholder.

    :rtype: DecodedReading

    """
    _check_length(record)
    if is_dash(record):
        logger.debug('skipping unused archive record')
        return None
    raw = unpack_archive(record)
    if utc_offset is None:
        valid_date_time = None
    else:
        valid_date_time = decode_timestamp(
            raw['date_stamp'], raw['time_stamp'], utc_offset)
    return DecodedReading(
        davis_timestamp=pack_datetime(raw['date_stamp'], raw['time_stamp']),
        valid_date_time=valid_date_time,
        high_temperature_c=decode_temperature(raw['high_out_temp']),
        low_temperature_c=decode_temperature(raw['low_out_temp']),
        temperature_c=decode_temperature(raw['out_temp']),
        rain_amount_mm=decode_rain(raw['rain']),
        rain_rate_mm_per_hour=decode_rain(raw['rain_rate']),
        barometer=decode_barometer(raw['barometer']),
        solar_radiation=decode_solar_radiation(raw['radiation']),
        humidity=decode_humidity(raw['out_humidity']),
        average_wind_speed=decode_wind_speed(raw['wind_speed']),
        high_wind_speed=decode_wind_speed(raw['wind_gust']),
        high_wind_direction=decode_wind_direction(raw['wind_gust_dir']),
        wind_direction=decode_wind_direction(raw['wind_dir']),
        average_uv=decode_uv(raw['uv']),
        et=decode_et(raw['et']),
        high_solar_radiation=decode_solar_radiation(raw['high_radiation']),
        high_uv_index=decode_uv(raw['high_uv']),
        leaf_temperatures_raw=raw['leaf_temps'],
        leaf_wetnesses_raw=raw['leaf_wets'],
        soil_temperatures_raw=raw['soil_temps'],
        extra_humidities_raw=raw['extra_humids'],
        extra_temperature_0_raw=raw['extra_temp_0'],
        extra_temperature_1_raw=raw['extra_temp_1'],
        extra_temperature_2_raw=raw['extra_temp_2'],
        soil_moistures_raw=raw['soil_moists'],
        )

def record_count(buf, strict=True):
    """Get the number of whole archive records in ``buf``.

    :raises MalformedBufferLength: if ``strict`` is true and the
        buffer length is not a multiple of the record size.

    """
    count, spare = divmod(len(buf), ARCHIVE_SIZE)
    if spare:
        if strict:
            raise MalformedBufferLength(
                'buffer of %d bytes is not a multiple of %d' % (
                    len(buf), ARCHIVE_SIZE))
        logger.warning('ignoring %d bytes after last archive record', spare)
    return count

def iter_archive(buf, utc_offset, strict=True):
    """Generate readings from a buffer of archive records.

    Readings are produced in the same order as the records, and
    placeholder records are skipped.

    """
    count = record_count(buf, strict=strict)
    view = memoryview(buf)
    for i in range(count):
        reading = decode_archive(
            view[i * ARCHIVE_SIZE:(i + 1) * ARCHIVE_SIZE], utc_offset)
        if reading is not None:
            yield reading

def decode_data(buf, utc_offset, strict=True):
    """Decode a buffer of archive records.

    :param buf: one or more 52 byte archive records.

    :type buf: bytes

    :param utc_offset: the station clock's offset from UTC.

    :type utc_offset: str

    :param strict: if true, a buffer whose length isn't a multiple of
        52 raises :py:class:`MalformedBufferLength`. Otherwise any
        trailing partial record is ignored.

    :type strict: bool

    :rtype: list(DecodedReading)

    """
    result = list(iter_archive(buf, utc_offset, strict=strict))
    logger.debug('decoded %d readings', len(result))
    return result

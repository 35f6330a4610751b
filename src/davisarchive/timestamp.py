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

"""Encode and decode Davis station date and time stamps.

Introduction
------------

Each archive record starts with two 16 bit words. The date stamp is
bit packed::

  15 14 13 12 11 10  9  8  7  6  5  4  3  2  1  0
   y  y  y  y  y  y  y  m  m  m  m  d  d  d  d  d

where ``y`` is the year - 2000, i.e. ``day + month*32 +
(year-2000)*512``. The time stamp is not bit packed, it is ``hour*100
+ minute``.

The archive query command ("DMPAFT") sends the two words as one 32
bit value with the time first, so the packed timestamp is ``(date <<
16) | time``. For example, 2012-06-17 15:05 is date 6353, time 1505,
packed 416351713.

The encoders check their inputs, so any value they produce can be
decoded again.

Detailed API
------------

"""

__docformat__ = "restructuredtext en"

import calendar
from datetime import datetime
import logging

from davisarchive.constants import (
    BASE_YEAR, DAY_MASK, MAX_YEAR, MONTH_MASK, MONTH_SHIFT, YEAR_MASK,
    YEAR_SHIFT)
from davisarchive.timezone import fixed_offset

logger = logging.getLogger(__name__)


class InvalidCalendarValue(ValueError):
    """A date or time field is out of range."""
    pass


def _check(name, value, lo, hi):
    if not lo <= value <= hi:
        raise InvalidCalendarValue(
            '%s %d out of range %d..%d' % (name, value, lo, hi))

def encode_date(year, month, day):
    """Pack a date into a 16 bit date stamp.

    :raises InvalidCalendarValue: if the date can't be represented.

    """
    _check('year', year, BASE_YEAR, MAX_YEAR)
    _check('month', month, 1, 12)
    _check('day', day, 1, calendar.monthrange(year, month)[1])
    return day + (month * 32) + ((year - BASE_YEAR) * 512)

def encode_time(hour, minute):
    """Convert a time of day to a time stamp.

    :raises InvalidCalendarValue: if the time is out of range.

    """
    _check('hour', hour, 0, 23)
    _check('minute', minute, 0, 59)
    return (100 * hour) + minute

def pack_datetime(date, time):
    """Combine date and time stamps into one 32 bit value, time in the
    low order word."""
    return ((date & 0xFFFF) << 16) | (time & 0xFFFF)

def unpack_datetime(packed):
    """Split a 32 bit packed value into ``(date, time)`` stamps."""
    return (packed >> 16) & 0xFFFF, packed & 0xFFFF

def encode_timestamp(dt):
    """Convert a :py:class:`datetime.datetime` to a packed timestamp.

    Seconds and tzinfo are ignored; the station's clock is assumed to
    be in the same time zone as ``dt``.

    :rtype: int

    """
    time = encode_time(dt.hour, dt.minute)
    date = encode_date(dt.year, dt.month, dt.day)
    return pack_datetime(date, time)

def decode_timestamp(date, time, utc_offset):
    """Convert date and time stamps to a :py:class:`datetime.datetime`.

    :param date: date stamp.

    :type date: int

    :param time: time stamp.

    :type time: int

    :param utc_offset: the station clock's offset from UTC, as a
        ``[+-]HH:MM`` string or a :py:class:`datetime.tzinfo`.

    :raises InvalidCalendarValue: if any field is out of range, e.g.
        month 13 or 31st June.

    :rtype: datetime.datetime

    """
    year = ((date & YEAR_MASK) >> YEAR_SHIFT) + BASE_YEAR
    month = (date & MONTH_MASK) >> MONTH_SHIFT
    day = date & DAY_MASK
    hour = time // 100
    minute = time - (hour * 100)
    logger.debug('%04d-%02d-%02d %02d:%02d', year, month, day, hour, minute)
    tz = fixed_offset(utc_offset)
    try:
        return datetime(year, month, day, hour, minute, 0, tzinfo=tz)
    except ValueError as ex:
        raise InvalidCalendarValue(
            'date stamp %d, time stamp %d: %s' % (date, time, ex))

#!/usr/bin/env python

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

"""Station UTC offsets and :py:class:`datetime.tzinfo` compatible
objects.

Introduction
------------

A Davis station does not know about time zones. Its archive records
carry a local "wall clock" date and time, and the offset of that
clock from UTC is supplied separately, in the station's signed HHMM
text form, e.g. ``-0200 -02``. :py:func:`parse_utc_offset` converts
this to ``-02:00`` and :py:func:`fixed_offset` converts that to a
:py:class:`datetime.timezone`, which is used to anchor decoded
timestamps.

The :py:class:`TimeZone` class represents the computer's local time
zone, so that decoded timestamps can be displayed in local time.

Detailed API
------------

"""

import datetime
import logging
import re
import sys

import tzlocal

logger = logging.getLogger(__name__)

_offset_token = re.compile(r'^([+-]\d\d)(\d\d)$')
_offset_string = re.compile(r'^([+-])(\d\d):(\d\d)$')


def parse_utc_offset(text):
    """Convert a UTC offset from station format to ``[+-]HH:MM``.

    Only the first whitespace-delimited token of ``text`` is used, so
    ``'-0200 -02'`` gives ``'-02:00'``.

    :return: the offset, or :obj:`None` if ``text`` doesn't contain
        one.

    :rtype: str

    """
    if not text:
        return None
    tokens = text.split()
    if not tokens:
        return None
    match = _offset_token.match(tokens[0])
    if not match:
        return None
    return '{}:{}'.format(*match.groups())

def fixed_offset(offset):
    """Get a :py:class:`datetime.tzinfo` from a ``[+-]HH:MM`` string.

    An existing tzinfo object is returned unchanged.

    """
    if isinstance(offset, datetime.tzinfo):
        return offset
    match = _offset_string.match(offset or '')
    if not match:
        raise ValueError('invalid UTC offset "{!s}"'.format(offset))
    sign, hours, minutes = match.groups()
    delta = datetime.timedelta(hours=int(hours), minutes=int(minutes))
    if sign == '-':
        delta = -delta
    return datetime.timezone(delta)


class TimeZone(object):
    """Local time zone, used to display decoded timestamps."""
    def __init__(self, tz_name=None):
        if tz_name:
            # use a named time zone instead of system default
            import pytz
            self.local = pytz.timezone(tz_name)
        else:
            self.local = tzlocal.get_localzone()
        logger.info('Using timezone "{!s}"'.format(self.local))

    def to_local(self, dt):
        """Convert a timestamp with tzinfo to local time."""
        if dt is None:
            return None
        return dt.astimezone(self.local)


def main():
    if len(sys.argv) > 1:
        time_zone = TimeZone(sys.argv[1])
    else:
        time_zone = TimeZone()
    print('Local time zone:', time_zone.local)
    for text in ('-0200 -02', '+0530', '-0300 -03', 'bad'):
        offset = parse_utc_offset(text)
        print(repr(text), '->', offset)
        if offset:
            now = datetime.datetime.now(fixed_offset(offset)).replace(
                second=0, microsecond=0)
            print('  station time:', now)
            print('  local time:  ', time_zone.to_local(now))
    return 0


if __name__ == "__main__":
    sys.exit(main())

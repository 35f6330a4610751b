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

"""Display the contents of a Davis archive download.

This script can also be run with the ``davisarchive-dump`` command. ::
%s
The input file holds the raw bytes of one or more 52 byte archive
records, as sent by the station in response to a "DMP" or "DMPAFT"
command. By default each record is shown as a hex dump. Use
``--decode`` to show the values in metric units.

The station's clock has no time zone, so decoded timestamps need the
station's UTC offset. This is given with ``--utc-offset`` or read from
``weather.ini`` in the directory given with ``--params``. If both are
given, the offset is saved in ``weather.ini``.

"""

__usage__ = """
 usage: %s [options] file
 options are:
         --help            display this help
  -d   | --decode          display meaningful values instead of raw data
  -i   | --ignore-partial  ignore an incomplete record at end of file
  -l   | --local           display timestamps in local time
  -L f | --log-file f      write log messages to file f instead of stderr
  -p d | --params d        read settings from weather.ini in directory d
  -q t | --query t         show packed timestamp for "YYYY-MM-DD HH:MM"
  -t z | --timezone z      use named time zone z with --local
  -v   | --verbose         increase amount of reassuring messages
                           (repeat for even more messages e.g. -vvv)
  -z o | --utc-offset o    station UTC offset, e.g. "-0300"
"""

__doc__ %= __usage__ % ('python -m davisarchive.dumparchive')

from datetime import datetime
import getopt
import logging
import pprint
import sys

from davisarchive.archive import decode_data, is_dash, record_count
from davisarchive.constants import ARCHIVE_SIZE
import davisarchive.logger
from davisarchive.storage import ParamStore, get_utc_offset
from davisarchive.timestamp import encode_timestamp, unpack_datetime
from davisarchive.timezone import TimeZone, parse_utc_offset

logger = logging.getLogger(__name__)


def raw_dump(pos, data):
    print("%04x" % pos, end=' ')
    for item in data:
        print("%02x" % item, end=' ')
    if is_dash(data):
        print('(unused)', end='')
    print('')


def show_query(text):
    dt = datetime.strptime(text, '%Y-%m-%d %H:%M')
    packed = encode_timestamp(dt)
    date, time = unpack_datetime(packed)
    print('date stamp: %d' % date)
    print('time stamp: %d' % time)
    print('packed:     %d (0x%08x)' % (packed, packed))


def show_readings(data, utc_offset, strict, time_zone):
    for reading in decode_data(data, utc_offset, strict=strict):
        values = reading.as_dict()
        idx = values.pop('valid_date_time')
        if idx is None:
            print('timestamp %d' % values['davis_timestamp'])
        elif time_zone:
            print(time_zone.to_local(idx))
        else:
            print(idx)
        pprint.pprint(dict(values))


def main(argv=None):
    if argv is None:
        argv = sys.argv
    usage = (__usage__ % (argv[0])).strip()
    try:
        opts, args = getopt.getopt(
            argv[1:], "diL:lp:q:t:vz:",
            ('help', 'decode', 'ignore-partial', 'local', 'log-file=',
             'params=', 'query=', 'timezone=', 'verbose', 'utc-offset='))
    except getopt.error as msg:
        print('Error: %s\n' % msg, file=sys.stderr)
        print(usage, file=sys.stderr)
        return 1
    # process options
    decode = False
    strict = True
    local = False
    logfile = None
    params_dir = None
    query = None
    tz_name = None
    verbose = 0
    offset_text = None
    for o, a in opts:
        if o == '--help':
            print(__doc__.split('\n\n')[0])
            print(usage)
            return 0
        elif o in ('-d', '--decode'):
            decode = True
        elif o in ('-i', '--ignore-partial'):
            strict = False
        elif o in ('-l', '--local'):
            local = True
        elif o in ('-L', '--log-file'):
            logfile = a
        elif o in ('-p', '--params'):
            params_dir = a
        elif o in ('-q', '--query'):
            query = a
        elif o in ('-t', '--timezone'):
            tz_name = a
        elif o in ('-v', '--verbose'):
            verbose += 1
        elif o in ('-z', '--utc-offset'):
            offset_text = a
    if query:
        if args:
            print('Error: no arguments allowed with --query\n',
                  file=sys.stderr)
            print(usage, file=sys.stderr)
            return 2
        try:
            show_query(query)
        except ValueError as ex:
            print('Error: %s' % ex, file=sys.stderr)
            return 3
        return 0
    # check arguments
    if len(args) != 1:
        print('Error: 1 argument required\n', file=sys.stderr)
        print(usage, file=sys.stderr)
        return 2
    davisarchive.logger.setup_handler(verbose, logfile)
    # get station UTC offset
    utc_offset = None
    if offset_text:
        utc_offset = parse_utc_offset(offset_text)
        if not utc_offset:
            print('Error: invalid UTC offset "%s"\n' % offset_text,
                  file=sys.stderr)
            print(usage, file=sys.stderr)
            return 2
    if params_dir:
        try:
            params = ParamStore(params_dir)
        except RuntimeError as ex:
            print('Error: %s\n' % ex, file=sys.stderr)
            print(usage, file=sys.stderr)
            return 2
        if offset_text:
            params.set('config', 'utc offset', offset_text)
            params.flush()
        else:
            utc_offset = get_utc_offset(params)
    if decode and not utc_offset:
        logger.warning('station UTC offset unknown, timestamps not decoded')
    time_zone = None
    if local:
        time_zone = TimeZone(tz_name)
    # do it!
    try:
        with open(args[0], 'rb') as f:
            data = f.read()
        if decode:
            show_readings(data, utc_offset, strict, time_zone)
        else:
            for i in range(record_count(data, strict=strict)):
                pos = i * ARCHIVE_SIZE
                raw_dump(pos, data[pos:pos + ARCHIVE_SIZE])
    except (IOError, ValueError) as ex:
        print('Error: %s' % ex, file=sys.stderr)
        return 3
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        pass

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

"""Store parameters in easy to access files.

Introduction
------------

Settings, such as the station's UTC offset, are kept in an "ini"
file called ``weather.ini`` in a data directory. For example::

  [config]
  utc offset = -0300 -03

The station reports its offset in this form (see
:py:func:`davisarchive.timezone.parse_utc_offset`), so it can be
copied straight from the station's setup information.

Detailed API
------------

"""

from configparser import RawConfigParser
import logging
import os
import threading

from davisarchive.timezone import parse_utc_offset

logger = logging.getLogger(__name__)


class ParamStore(object):
    def __init__(self, root_dir, file_name='weather.ini'):
        self._lock = threading.Lock()
        with self._lock:
            if not os.path.isdir(root_dir):
                raise RuntimeError(
                    'Directory "' + root_dir + '" does not exist.')
            self._path = os.path.join(root_dir, file_name)
            self._dirty = False
            # open config file
            self._config = RawConfigParser()
            self._config.read(self._path)

    def flush(self):
        if not self._dirty:
            return
        with self._lock:
            self._dirty = False
            with open(self._path, 'w') as of:
                self._config.write(of)

    def get(self, section, option, default=None):
        """Get a parameter value and return a string.

        If default is specified and section or option are not defined
        in the file, they are created and set to default, which is
        then the return value.

        """
        with self._lock:
            if not self._config.has_option(section, option):
                if default is not None:
                    self._set(section, option, default)
                return default
            return self._config.get(section, option)

    def set(self, section, option, value):
        """Set option in section to string value."""
        with self._lock:
            self._set(section, option, value)

    def _set(self, section, option, value):
        if not self._config.has_section(section):
            self._config.add_section(section)
        elif (self._config.has_option(section, option) and
              self._config.get(section, option) == value):
            return
        self._config.set(section, option, value)
        self._dirty = True

    def unset(self, section, option):
        """Remove option from section, and section if it is then empty."""
        with self._lock:
            if not self._config.has_section(section):
                return
            if self._config.has_option(section, option):
                self._config.remove_option(section, option)
                self._dirty = True
            if not self._config.options(section):
                self._config.remove_section(section)
                self._dirty = True


def get_utc_offset(params):
    """Get the station's UTC offset from ``[config] utc offset``.

    :return: the offset as ``[+-]HH:MM``, or :obj:`None` if it's not
        set or can't be understood.

    """
    text = params.get('config', 'utc offset')
    if not text:
        logger.info('no "utc offset" in [config]')
        return None
    result = parse_utc_offset(text)
    if not result:
        logger.error('invalid "utc offset" value "%s"', text)
    return result

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

"""Route davisarchive log messages to stderr or a log file.

The decoding modules only create loggers. Nothing is shown unless an
application adds a handler, which is what :py:func:`setup_handler`
does for the ``davisarchive-dump`` command. Only the ``davisarchive``
logger is configured, so an application's own logging is left alone.

"""

import logging
import logging.handlers

from davisarchive import __version__, _release, _commit

logger = logging.getLogger(__name__)

PACKAGE = 'davisarchive'


def log_level(verbose):
    """Get the threshold for a ``--verbose`` count.

    0 shows warnings, 1 adds INFO and 2 or more adds DEBUG messages.

    """
    return max(logging.WARNING - (verbose * 10), logging.DEBUG)

def setup_handler(verbose, logfile=None):
    """Add a handler to the ``davisarchive`` logger.

    :param verbose: how many times ``--verbose`` was given.

    :type verbose: int

    :param logfile: if set, messages are appended to this file, which
        is rotated when it reaches 128 KiB. Otherwise they go to
        stderr.

    :type logfile: str

    :return: the new handler, so it can be passed to
        :py:func:`remove_handler` later.

    """
    package_logger = logging.getLogger(PACKAGE)
    package_logger.setLevel(log_level(verbose))
    if logfile:
        handler = logging.handlers.RotatingFileHandler(
            logfile, maxBytes=128*1024, backupCount=3)
        formatter = logging.Formatter(
            '%(asctime)s:%(levelname)s:%(name)s:%(message)s',
            '%Y-%m-%d %H:%M:%S')
    else:
        handler = logging.StreamHandler()
        formatter = logging.Formatter('%(levelname)s:%(name)s:%(message)s')
    handler.setFormatter(formatter)
    package_logger.addHandler(handler)
    logger.info(
        'davisarchive version %s, build %s (%s)', __version__, _release, _commit)
    return handler

def remove_handler(handler):
    """Detach and close a handler added by :py:func:`setup_handler`."""
    logging.getLogger(PACKAGE).removeHandler(handler)
    handler.close()

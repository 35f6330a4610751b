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

"""Bits of data used in several places.

This module collects together some 'constants' that are used in other
davisarchive modules.

"""

__docformat__ = "restructuredtext en"

# values the station uses to mean "no reading"
DASH_BYTE = 255                 # 0xFF
DASH_SHORT = 32767              # 0x7FFF
DASH_SIGNED_SHORT = -32768

# an unused archive slot has both date and time words set to this
DASH_WORD = 0xFFFF

# bytes per archive record
ARCHIVE_SIZE = 52

# date stamp bit fields
YEAR_MASK = 0xFE00
MONTH_MASK = 0x01E0
DAY_MASK = 0x001F
YEAR_SHIFT = 9
MONTH_SHIFT = 5
BASE_YEAR = 2000
MAX_YEAR = BASE_YEAR + (YEAR_MASK >> YEAR_SHIFT)

# 16 point compass, in the station's 0..15 order
CARDINALS = (
    'N', 'NNE', 'NE', 'ENE', 'E', 'ESE', 'SE', 'SSE',
    'S', 'SSW', 'SW', 'WSW', 'W', 'WNW', 'NW', 'NNW',
    )

MM_PER_INCH = 25.4
KMH_PER_MPH = 1.60934
# one rain bucket "click"
MM_PER_CLICK = 0.2

"""Tests for UTC offset parsing and time zone helpers."""
from datetime import datetime, timedelta, timezone

import pytest

from davisarchive.timezone import TimeZone, fixed_offset, parse_utc_offset


def test_parse_utc_offset():
    assert parse_utc_offset('-0200 -02') == '-02:00'
    assert parse_utc_offset('-0300 -02') == '-03:00'
    assert parse_utc_offset('+0530') == '+05:30'


def test_parse_utc_offset_uses_first_token():
    assert parse_utc_offset('  +0100 anything') == '+01:00'


@pytest.mark.parametrize('text', [None, '', '   ', 'bad', '0200', '-02:00', '-02',
                                  '-02000', '+05301', '-0200x'])
def test_parse_utc_offset_malformed(text):
    assert parse_utc_offset(text) is None


def test_fixed_offset():
    assert fixed_offset('-02:00').utcoffset(None) == timedelta(hours=-2)
    assert fixed_offset('+05:30').utcoffset(None) == timedelta(hours=5, minutes=30)
    assert fixed_offset('+00:00').utcoffset(None) == timedelta(0)


def test_fixed_offset_passes_tzinfo_through():
    assert fixed_offset(timezone.utc) is timezone.utc


@pytest.mark.parametrize('offset', [None, '', '-0200', 'bad'])
def test_fixed_offset_malformed(offset):
    with pytest.raises(ValueError):
        fixed_offset(offset)


def test_time_zone_named():
    time_zone = TimeZone('UTC')
    dt = datetime(2012, 6, 17, 15, 5, tzinfo=timezone(timedelta(hours=-2)))
    local = time_zone.to_local(dt)
    assert local.hour == 17
    assert local == dt


def test_time_zone_none():
    time_zone = TimeZone('UTC')
    assert time_zone.to_local(None) is None

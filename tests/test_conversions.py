"""Tests for raw value to metric unit conversions."""
import logging

import pytest

from davisarchive.conversions import (
    decode_barometer, decode_et, decode_humidity, decode_rain,
    decode_solar_radiation, decode_temperature, decode_uv,
    decode_wind_direction, decode_wind_speed, in_to_mm, mph_to_kmh, scale)


def test_decode_temperature():
    assert round(decode_temperature(766)) == 25
    assert round(decode_temperature(736)) == 23
    assert round(decode_temperature(2120)) == 100
    assert round(decode_temperature(320)) == 0


def test_decode_temperature_below_freezing():
    assert decode_temperature(-400) == pytest.approx(-40.0)


def test_decode_temperature_missing():
    assert decode_temperature(32767) is None
    assert decode_temperature(-32768) is None


def test_decode_rain():
    assert decode_rain(1) == 0.2
    assert decode_rain(10) == 2
    assert decode_rain(100) == 20


def test_decode_rain_zero_is_a_reading():
    assert decode_rain(0) == 0
    assert decode_rain(None) is None


def test_decode_solar_radiation():
    assert decode_solar_radiation(1000) == 1000
    assert decode_solar_radiation(0) == 0
    assert decode_solar_radiation(32767) is None


def test_decode_humidity():
    assert decode_humidity(35) == 35
    assert decode_humidity(255) is None


def test_decode_wind_speed():
    assert decode_wind_speed(2) == pytest.approx(3.2, abs=0.1)
    assert decode_wind_speed(0) == 0
    assert decode_wind_speed(255) is None


def test_decode_wind_direction():
    assert decode_wind_direction(0) == 'N'
    assert decode_wind_direction(1) == 'NNE'
    assert decode_wind_direction(8) == 'S'
    assert decode_wind_direction(15) == 'NNW'
    assert decode_wind_direction(255) is None


def test_decode_wind_direction_out_of_range(caplog):
    caplog.set_level(logging.DEBUG, logger='davisarchive.conversions')
    assert decode_wind_direction(16) is None
    assert decode_wind_direction(254) is None
    assert 'wind direction 16 out of range' in caplog.text


def test_decode_uv():
    assert decode_uv(100) == 10.0
    assert decode_uv(0) == 0.0
    assert decode_uv(255) is None


def test_decode_et():
    assert decode_et(1000) == pytest.approx(25.4, abs=0.1)
    assert decode_et(0) is None


def test_decode_barometer():
    assert decode_barometer(29921) == pytest.approx(29.921)
    assert decode_barometer(0) is None


def test_in_to_mm():
    assert in_to_mm(1) == pytest.approx(25.4)
    assert in_to_mm('2') == pytest.approx(50.8)
    assert in_to_mm(None) is None
    assert in_to_mm('  ') is None


def test_mph_to_kmh_rounds_to_one_decimal():
    assert mph_to_kmh(10) == 16.1
    assert mph_to_kmh('1') == 1.6
    assert mph_to_kmh(None) is None
    assert mph_to_kmh('') is None


def test_scale_allows_none():
    assert scale(None, 2) is None
    assert scale(3, 2) == 6

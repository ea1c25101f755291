from datetime import datetime, timezone

import pytest

from parsers.weather_parser import (
    degrees_to_compass, dewpoint_class, heat_index, parse_observation, wind_chill,
)

NOW = datetime(2024, 7, 1, 20, 5, tzinfo=timezone.utc)   # 3:05 PM CDT


def _obs(**props):
    return {'properties': {k: ({'value': v} if k != 'textDescription' else v) for k, v in props.items()}}


def test_full_observation_converts_units():
    report = parse_observation(_obs(
        temperature=30.0, dewpoint=20.0, windSpeed=16.0934, windGust=32.1869,
        windDirection=200, relativeHumidity=55.4, visibility=16093.4,
        barometricPressure=101591.7, textDescription='Mostly Sunny',
    ), now=NOW)

    assert report.temp_f == 86
    assert report.dewpoint_f == 68
    assert report.dewpoint_class == 'dewpoint-oppressive'
    assert report.conditions == 'Mostly Sunny'
    assert report.wind == '10 mph'
    assert report.gusts == '20 mph'
    assert report.wind_dir == 'SSW'
    assert report.humidity == '55%'
    assert report.visibility == '10 mi'
    assert report.pressure == '30.00"'
    assert report.dew_depression == '18°F'
    assert report.feels_like.startswith('Heat Index:')
    assert report.last_update == 'Last: 3:05 PM'
    assert report.spc_outlook_url.endswith(f'?t={int(NOW.timestamp() * 1000)}')


def test_missing_fields_degrade_to_placeholders():
    report = parse_observation({'properties': {'temperature': {'value': None}}}, now=NOW)

    assert report.temp_f == '--'
    assert report.dewpoint_f == '--'
    assert report.dewpoint_class is None
    assert report.conditions == 'Unknown'
    assert report.wind == '-- mph'
    assert report.gusts == 'None'
    assert report.wind_dir == '--'
    assert report.humidity == '--%'
    assert report.visibility == '-- mi'
    assert report.pressure == '--"'
    assert report.dew_depression == '--'
    assert report.feels_like == ''


@pytest.mark.parametrize('payload', [None, {}, {'properties': None}, [], 'x'])
def test_garbage_payload_never_crashes(payload):
    assert parse_observation(payload, now=NOW).temp_f == '--'


def test_wind_chill_shown_in_cold():
    report = parse_observation(_obs(temperature=-5.0, relativeHumidity=60, windSpeed=32.0), now=NOW)
    assert report.feels_like.startswith('Wind Chill:')


@pytest.mark.parametrize('deg,expected', [(0, 'N'), (22.5, 'NNE'), (90, 'E'), (350, 'N'), (None, '--')])
def test_compass(deg, expected):
    assert degrees_to_compass(deg) == expected


def test_thresholds():
    assert dewpoint_class(54) == 'dewpoint-comfortable'
    assert dewpoint_class(60) == 'dewpoint-sticky'
    assert dewpoint_class(75) == 'dewpoint-miserable'
    assert heat_index(79, 50) is None
    assert heat_index(90, None) is None
    assert wind_chill(51, 10) is None
    assert wind_chill(30, 2) is None

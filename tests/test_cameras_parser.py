import pytest

from parsers.cameras_parser import parse_cameras_payload


def test_flat_camera_list():
    pois = parse_cameras_payload([
        {'id': 1, 'name': 'I-49 @ Joyce', 'latitude': 36.12, 'longitude': -94.15},
        {'camera_id': 'c2', 'title': 'US-412', 'lat': '36.2', 'lng': '-94.2'},
        {'id': 3},
    ])

    assert [p.id for p in pois] == ['1', 'c2', '3']
    assert pois[0].name == 'I-49 @ Joyce'
    assert pois[1].location.lon == pytest.approx(-94.2)
    assert pois[2].location is None


def test_camera_feature_collection():
    pois = parse_cameras_payload({'features': [
        {'geometry': {'coordinates': [-94.0, 36.0]}, 'properties': {'id': 'x'}},
    ]})
    assert pois[0].location.lat == pytest.approx(36.0)


def test_camera_events_wrapper_is_not_a_camera_shape():
    assert parse_cameras_payload({'events': [{'id': 1}]}) == []


def test_object_valued_fields_are_not_used_as_name():
    pois = parse_cameras_payload([
        {'id': 1, 'location': {'lat': 36.1, 'lon': -94.1}, 'latitude': 36.1, 'longitude': -94.1},
        {'id': 2, 'name': {'en': 'I-49'}, 'title': 'fallback'},
    ])

    assert pois[0].name is None
    assert pois[1].name is None

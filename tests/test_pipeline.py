import pytest

from services.pipeline import run_pipeline


def test_pipeline_filters_and_enriches(session, cameras, make_event):
    session.replace_pois(cameras)
    payload = {'events': [
        make_event('A', 'Crash', 'Two vehicles', lat=0, lon=0.4),
        make_event('B', 'Bridge Inspection', 'Deck work', lat=0, lon=0.9),
        make_event('C', 'Stalled Vehicle', 'Right shoulder', lat=None, lon=None),
    ]}

    res = run_pipeline(payload, session)

    assert res.count == 2
    assert [it.id for it in res.items] == ['A', 'C']
    assert res.items[0].nearest_poi.poi.id == 'cam-a'
    assert res.items[0].nearest_poi.distance_miles == pytest.approx(27.64, abs=0.01)
    assert res.items[1].nearest_poi is None


def test_ignored_id_stays_hidden_until_cleared(session, make_event):
    payload = [make_event('A'), make_event('B')]
    session.ignore('A')

    for _ in range(3):
        assert [it.id for it in run_pipeline(payload, session).items] == ['B']

    session.clear_ignored()
    assert [it.id for it in run_pipeline(payload, session).items] == ['A', 'B']


def test_change_detection_across_runs(session, make_event):
    alerts = []

    first = run_pipeline([make_event('A'), make_event('B')], session, alert=alerts.append)
    second = run_pipeline([make_event('A'), make_event('B'), make_event('C')], session, alert=alerts.append)
    third = run_pipeline([make_event('A'), make_event('B'), make_event('C')], session, alert=alerts.append)

    assert not first.new_incident
    assert second.new_incident
    assert not third.new_incident
    assert alerts == [frozenset({'C'})]


def test_previous_ids_tracked_even_when_alerts_disabled(session, make_event):
    session.alerts_enabled = False
    run_pipeline([make_event('A')], session)
    run_pipeline([make_event('A'), make_event('B')], session)

    assert session.previous_ids == frozenset({'A', 'B'})

    session.alerts_enabled = True
    assert not run_pipeline([make_event('A'), make_event('B')], session).new_incident


def test_pipeline_never_mutates_shared_state(session, cameras, make_event):
    session.replace_pois(cameras)
    session.ignore('X')
    pois_before = session.pois
    ignored_before = session.ignored_snapshot()

    run_pipeline([make_event('A', lat=0, lon=0.1), make_event('X')], session)

    assert session.pois is pois_before
    assert session.ignored_snapshot() == ignored_before


def test_unknown_payload_yields_empty_result(session):
    res = run_pipeline({'unexpected': True}, session)
    assert res.items == [] and res.count == 0

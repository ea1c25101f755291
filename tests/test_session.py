import json

from core.store import JsonStore, MemoryStore
from models.incidents import Location, PointOfInterest
from services.session import DashboardSession


def test_ignore_persists_across_sessions(tmp_path):
    path = str(tmp_path / 'state.json')
    s1 = DashboardSession(JsonStore(path))

    assert s1.ignore(101)
    assert not s1.ignore('101')
    s1.ignore('abc')

    with open(path, encoding='utf-8') as f:
        assert json.load(f)['ignoredIds'] == ['101', 'abc']

    s2 = DashboardSession(JsonStore(path))
    assert s2.ignored_ids == ['101', 'abc']

    s2.clear_ignored()
    assert DashboardSession(JsonStore(path)).ignored_ids == []


def test_ignored_snapshot_is_independent_of_later_mutation():
    s = DashboardSession(MemoryStore({'ignoredIds': ['1']}))
    snap = s.ignored_snapshot()

    s.ignore('2')

    assert snap == frozenset({'1'})
    assert s.ignored_snapshot() == frozenset({'1', '2'})


def test_replace_pois_is_wholesale():
    s = DashboardSession(MemoryStore())
    first = [PointOfInterest(id='a', location=Location(lat=1, lon=1))]
    s.replace_pois(first)
    held = s.pois

    s.replace_pois([PointOfInterest(id='b')])

    assert [p.id for p in held] == ['a']
    assert [p.id for p in s.pois] == ['b']
    assert s.cameras_updated_at is not None


def test_history_keeps_most_recent_samples(tmp_path):
    path = str(tmp_path / 'state.json')
    s = DashboardSession(JsonStore(path), history_limit=20)
    for i in range(25):
        s.record_history(i, timestamp=1000.0 + i)

    hist = s.history()
    assert len(hist) == 20
    assert hist[0].count == 5
    assert hist[-1].count == 24

    reloaded = DashboardSession(JsonStore(path)).history()
    assert [h.count for h in reloaded] == list(range(5, 25))


def test_corrupt_state_file_starts_empty(tmp_path):
    path = tmp_path / 'state.json'
    path.write_text('{not json', encoding='utf-8')

    s = DashboardSession(JsonStore(str(path)))

    assert s.ignored_ids == []
    assert s.history() == []


def test_concurrent_ignores_are_all_persisted(tmp_path):
    import threading

    path = str(tmp_path / 'state.json')
    s = DashboardSession(JsonStore(path))
    threads = [threading.Thread(target=s.ignore, args=(i,)) for i in range(50)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert sorted(s.ignored_ids, key=int) == [str(i) for i in range(50)]
    assert sorted(DashboardSession(JsonStore(path)).ignored_ids, key=int) == [str(i) for i in range(50)]

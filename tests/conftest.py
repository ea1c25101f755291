import pytest

from core.store import MemoryStore
from models.incidents import Location, PointOfInterest
from services.session import DashboardSession


def _event(id_, type_='Crash', description='Two vehicles', lat=36.1, lon=-94.1, **extra):
    d = {'id': id_, 'type': type_, 'description': description, 'latitude': lat, 'longitude': lon}
    d.update(extra)
    return d


@pytest.fixture
def make_event():
    return _event


@pytest.fixture
def session():
    return DashboardSession(MemoryStore(), suppress_maintenance_like=True, alerts_enabled=True)


@pytest.fixture
def cameras():
    return [
        PointOfInterest(id='cam-a', name='I-49 @ Wedington', location=Location(lat=0.0, lon=0.0)),
        PointOfInterest(id='cam-b', name='I-49 @ Drake', location=Location(lat=0.0, lon=1.0)),
    ]

# routers/dashboard.py
from typing import Optional
from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel

from services.cameras_service import camera_count_text
from services.incidents_service import rerun_incidents
from services.session import DashboardSession

router = APIRouter(prefix="/dashboard", tags=["dashboard"])

class SettingsInput(BaseModel):
    alerts_enabled: Optional[bool] = None
    suppress_maintenance_like: Optional[bool] = None

def get_dashboard_session(request: Request) -> DashboardSession:
    return request.app.state.session

def _incidents_view(session: DashboardSession) -> dict:
    res = session.incidents
    return {
        "items": [it.model_dump() for it in res.items] if res else [],
        "count": res.count if res else 0,
        "new_incident": res.new_incident if res else False,
        "error": session.incidents_error,
        "updated_at": session.incidents_updated_at,
    }

def _settings_view(session: DashboardSession) -> dict:
    return {
        "alerts_enabled": session.alerts_enabled,
        "suppress_maintenance_like": session.suppress_maintenance_like,
    }

@router.get("/incidents")
def incidents(session: DashboardSession = Depends(get_dashboard_session)):
    return _incidents_view(session)

@router.post("/incidents/{incident_id}/ignore")
def ignore_incident(incident_id: str, session: DashboardSession = Depends(get_dashboard_session)):
    session.ignore(incident_id)
    rerun_incidents(session)
    return {"ignored": session.ignored_ids, **_incidents_view(session)}

@router.get("/ignored")
def ignored(session: DashboardSession = Depends(get_dashboard_session)):
    return {"ignored": session.ignored_ids}

@router.delete("/ignored")
def clear_ignored(session: DashboardSession = Depends(get_dashboard_session)):
    session.clear_ignored()
    rerun_incidents(session)
    return {"ignored": [], **_incidents_view(session)}

@router.get("/cameras")
def cameras(session: DashboardSession = Depends(get_dashboard_session)):
    return {
        "count": len(session.pois),
        "count_text": camera_count_text(session),
        "updated_at": session.cameras_updated_at,
    }

@router.get("/weather")
def weather(session: DashboardSession = Depends(get_dashboard_session)):
    return session.weather.model_dump() if session.weather else {"conditions": "Unknown"}

@router.get("/history")
def history(session: DashboardSession = Depends(get_dashboard_session)):
    return {"history": [s.model_dump() for s in session.history()]}

@router.get("/settings")
def get_settings(session: DashboardSession = Depends(get_dashboard_session)):
    return _settings_view(session)

@router.put("/settings")
def put_settings(body: SettingsInput, session: DashboardSession = Depends(get_dashboard_session)):
    if body.alerts_enabled is not None:
        session.alerts_enabled = body.alerts_enabled
    if body.suppress_maintenance_like is not None:
        session.suppress_maintenance_like = body.suppress_maintenance_like
        rerun_incidents(session)
    return _settings_view(session)

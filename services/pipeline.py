# services/pipeline.py
import logging
from typing import Any, List, Optional

from pydantic import BaseModel

from models.incidents import IncidentRecord
from parsers.incidents_parser import parse_events_payload
from services.alerts import AlertCallback, check_new_incidents, incident_ids
from services.enrichment import enrich_incidents
from services.filters import filter_incidents
from services.session import DashboardSession

class PipelineResult(BaseModel):
    items: List[IncidentRecord] = []
    count: int = 0
    new_incident: bool = False

def run_pipeline(payload: Any, session: DashboardSession,
                 alert: Optional[AlertCallback] = None) -> PipelineResult:
    """
    Ingestion → Filter → Geo-enrichment → Change detection。
    只讀取 session 的忽略清單與 POI 快照；寫回的只有上一輪 id。
    """
    records = parse_events_payload(payload)
    ignored = session.ignored_snapshot()
    pois = session.pois

    kept = filter_incidents(records, ignored, session.suppress_maintenance_like)
    items = enrich_incidents(kept, pois)

    current = incident_ids(items)
    fired = check_new_incidents(session.previous_ids, current, session.alerts_enabled, alert)
    session.previous_ids = current

    logging.debug(f"[incidents] ingest={len(records)} kept={len(items)} "
                  f"ignored={len(ignored)} pois={len(pois)} new={fired}")
    return PipelineResult(items=items, count=len(items), new_incident=fired)

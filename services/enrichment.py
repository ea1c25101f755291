# services/enrichment.py
from typing import List, Optional, Sequence

from core.geo import haversine_miles
from models.incidents import IncidentRecord, Location, NearestPoi, PointOfInterest

def find_nearest_poi(loc: Optional[Location], pois: Sequence[PointOfInterest]) -> Optional[NearestPoi]:
    """線性掃描所有 POI；距離相同時保留先出現者。"""
    if loc is None or not pois:
        return None
    best: Optional[PointOfInterest] = None
    best_d = float("inf")
    for poi in pois:
        if poi.location is None:
            continue
        d = haversine_miles(loc.lat, loc.lon, poi.location.lat, poi.location.lon)
        if d < best_d:
            best, best_d = poi, d
    if best is None:
        return None
    return NearestPoi(poi=best, distance_miles=best_d)

def enrich_incidents(items: List[IncidentRecord], pois: Sequence[PointOfInterest]) -> List[IncidentRecord]:
    # 每次重新計算，不跨輪快取
    return [it.model_copy(update={"nearest_poi": find_nearest_poi(it.location, pois)}) for it in items]

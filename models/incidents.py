# models/incidents.py
from typing import Optional
from pydantic import BaseModel, Field, computed_field

from core.classify import classify_category
from core.config import INCIDENT_MAP_URL

class Location(BaseModel):
    lat: float
    lon: float

class RouteInfo(BaseModel):
    route: str = "--"
    route_type: str = "--"
    lanes_affected: str = "--"
    reporter: str = "ARDOT"

class PointOfInterest(BaseModel):
    id: Optional[str] = None
    name: Optional[str] = None
    location: Optional[Location] = None          # 無座標的攝影機不參與距離比對
    raw: Optional[dict] = None

class NearestPoi(BaseModel):
    poi: PointOfInterest
    distance_miles: float

class IncidentRecord(BaseModel):
    id: Optional[str] = None                     # 來源給的 id，沒有就是 None
    display_key: str                             # 顯示用 key；無 id 時為隨機字串，不能當身分
    category: str = "Unknown"
    description: str = "No description"
    county: str = "--"
    location: Optional[Location] = None
    route_info: RouteInfo = Field(default_factory=RouteInfo)
    nearest_poi: Optional[NearestPoi] = None     # enrichment 產生
    raw: Optional[dict] = None                   # 攤平後的原始欄位（備查）

    @computed_field
    @property
    def display_class(self) -> str:
        return classify_category(self.category)

    @computed_field
    @property
    def camera_text(self) -> str:
        if self.nearest_poi is None:
            return "--"
        return f"{self.nearest_poi.distance_miles:.2f} Miles"

    @computed_field
    @property
    def map_url(self) -> Optional[str]:
        if self.location is None:
            return None
        return INCIDENT_MAP_URL.format(lat=self.location.lat, lon=self.location.lon)

class HistorySample(BaseModel):
    timestamp: float
    count: int

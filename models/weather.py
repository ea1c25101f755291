# models/weather.py
from typing import Optional, Union
from pydantic import BaseModel

Display = Union[int, float, str]

class WeatherReport(BaseModel):
    """已換算好的顯示值；缺值一律 "--"。"""
    temp_f: Display = "--"
    dewpoint_f: Display = "--"
    dewpoint_class: Optional[str] = None         # dewpoint-comfortable / sticky / ...
    conditions: str = "Unknown"
    wind: str = "-- mph"
    gusts: str = "None"
    wind_dir: str = "--"
    humidity: str = "--%"
    visibility: str = "-- mi"
    pressure: str = '--"'
    dew_depression: str = "--"
    feels_like: str = ""
    spc_outlook_url: Optional[str] = None
    radar_url: Optional[str] = None
    last_update: Optional[str] = None            # "Last: 3:05 PM"
    updated_at: Optional[float] = None
    error: Optional[str] = None

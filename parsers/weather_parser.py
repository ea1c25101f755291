# parsers/weather_parser.py
import math
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from zoneinfo import ZoneInfo

from core.config import SPC_OUTLOOK_URL, NWS_RADAR_URL
from core.geo import safe_float
from models.weather import WeatherReport

CENTRAL_TZ = ZoneInfo("America/Chicago")
COMPASS = ["N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
           "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW"]
PLACEHOLDER = "--"

def _value(props: Dict[str, Any], key: str) -> Optional[float]:
    node = props.get(key)
    if isinstance(node, dict):
        return safe_float(node.get("value"))
    return None

def _round(x: float) -> int:
    # .5 一律往正無窮方向進位
    return math.floor(x + 0.5)

def c_to_f(c: Optional[float]):
    return PLACEHOLDER if c is None else _round(c * 9 / 5 + 32)

def kmh_to_mph(k: Optional[float]):
    return PLACEHOLDER if k is None else _round(k * 0.621371)

def degrees_to_compass(deg: Optional[float]) -> str:
    if deg is None:
        return PLACEHOLDER
    return COMPASS[_round(deg / 22.5) % 16]

def dewpoint_class(dp: float) -> str:
    if dp < 55: return "dewpoint-comfortable"
    if dp < 65: return "dewpoint-sticky"
    if dp < 70: return "dewpoint-oppressive"
    return "dewpoint-miserable"

def heat_index(t: float, rh: Optional[float]) -> Optional[int]:
    """Rothfusz regression；T < 80°F 不適用。"""
    if t < 80 or rh is None:
        return None
    return _round(-42.379 + 2.04901523 * t + 10.14333127 * rh - 0.22475541 * t * rh
                  - 0.00683783 * t * t - 0.05481717 * rh * rh + 0.00122874 * t * t * rh
                  + 0.00085282 * t * rh * rh - 0.00000199 * t * t * rh * rh)

def wind_chill(t: float, w: float) -> Optional[int]:
    if t > 50 or w < 3:
        return None
    return _round(35.74 + 0.6215 * t - 35.75 * w ** 0.16 + 0.4275 * t * w ** 0.16)

def feels_like(temp_f, hum_pct, wind_mph) -> str:
    if not isinstance(temp_f, int) or not isinstance(hum_pct, int):
        return ""
    hi = heat_index(temp_f, hum_pct)
    wc = wind_chill(temp_f, wind_mph) if isinstance(wind_mph, int) else None
    if hi is not None and hi != temp_f:
        return f"Heat Index: {hi}°F"
    if wc is not None and wc != temp_f:
        return f"Wind Chill: {wc}°F"
    return ""

def central_time_label(ts: datetime) -> str:
    ct = ts.astimezone(CENTRAL_TZ)
    h = ct.hour % 12 or 12
    ampm = "PM" if ct.hour >= 12 else "AM"
    return f"Last: {h}:{ct.minute:02d} {ampm}"

def parse_observation(data: Any, now: Optional[datetime] = None) -> WeatherReport:
    """NWS latest observation（公制）→ 顯示用 WeatherReport；缺欄位只會變成 "--"。"""
    props = (data or {}).get("properties") if isinstance(data, dict) else None
    props = props if isinstance(props, dict) else {}
    now = now or datetime.now(timezone.utc)

    temp_f = c_to_f(_value(props, "temperature"))
    dew_f = c_to_f(_value(props, "dewpoint"))
    wind_mph = kmh_to_mph(_value(props, "windSpeed"))
    gust_mph = kmh_to_mph(_value(props, "windGust"))
    hum = _value(props, "relativeHumidity")
    hum_pct = PLACEHOLDER if hum is None else _round(hum)
    vis_m = _value(props, "visibility")
    vis_mi = PLACEHOLDER if vis_m is None else _round(vis_m / 1609.34 * 10) / 10
    if isinstance(vis_mi, float) and vis_mi.is_integer():
        vis_mi = int(vis_mi)
    press_pa = _value(props, "barometricPressure")
    press_in = PLACEHOLDER if press_pa is None else f"{press_pa / 3386.39:.2f}"

    dew_dep = PLACEHOLDER
    if isinstance(temp_f, int) and isinstance(dew_f, int):
        dew_dep = f"{temp_f - dew_f}°F"

    ts = int(now.timestamp() * 1000)
    return WeatherReport(
        temp_f=temp_f,
        dewpoint_f=dew_f,
        dewpoint_class=dewpoint_class(dew_f) if isinstance(dew_f, int) else None,
        conditions=str(props.get("textDescription") or "Unknown"),
        wind=f"{wind_mph} mph",
        gusts=f"{gust_mph} mph" if gust_mph != PLACEHOLDER else "None",
        wind_dir=degrees_to_compass(_value(props, "windDirection")),
        humidity=f"{hum_pct}%",
        visibility=f"{vis_mi} mi",
        pressure=f'{press_in}"',
        dew_depression=dew_dep,
        feels_like=feels_like(temp_f, hum_pct, wind_mph),
        spc_outlook_url=f"{SPC_OUTLOOK_URL}?t={ts}",
        radar_url=f"{NWS_RADAR_URL}?t={ts}",
        last_update=central_time_label(now),
        updated_at=now.timestamp(),
    )

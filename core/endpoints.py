# core/endpoints.py

ENDPOINTS = {
    # =========================
    # 輪詢資料來源
    # =========================

    # 1. NWS 氣象觀測（最新一筆）
    "weather": {
        "nws_base": "https://api.weather.gov",
        "observation_path": "/stations/{station}/observations/latest",
    },

    # 2. iDriveArkansas 路況事件
    "incidents": "https://www.idrivearkansas.com/api/events",

    # 3. iDriveArkansas 攝影機（POI）
    "cameras": "https://www.idrivearkansas.com/api/cameras",

    # =========================
    # 顯示用連結（不輪詢，只組網址）
    # =========================

    # 4. 事件地圖連結
    "incident_map": "https://www.idrivearkansas.com/map?lat={lat}&lng={lon}&zoom=15",

    # 5. SPC Day 1 展望圖 / NWS 雷達（加 ?t= 避免快取）
    "spc_outlook": "https://www.spc.noaa.gov/products/outlook/day1otlk.gif",
    "nws_radar": "https://radar.weather.gov/ridge/standard/KSRX_0.gif",
}

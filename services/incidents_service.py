# services/incidents_service.py
import time, logging
from typing import Optional

from core.config import INCIDENTS_URL
from core.errors import DashboardError
from core.http_client import http_get_json
from services.alerts import AlertCallback
from services.pipeline import PipelineResult, run_pipeline
from services.session import DashboardSession

def log_alert(ids) -> None:
    """預設的提醒出口：寫 log（前端播放音效由顯示層處理）。"""
    logging.warning(f"[incidents] 偵測到新事件：{', '.join(sorted(ids))}")

def _store_result(session: DashboardSession, res: PipelineResult) -> PipelineResult:
    session.incidents = res
    session.incidents_error = None
    session.incidents_updated_at = time.time()
    return res

# -----------------------------
# 抓取事件並跑 pipeline
# -----------------------------
def refresh_incidents(session: DashboardSession,
                      alert: Optional[AlertCallback] = log_alert) -> Optional[PipelineResult]:
    """
    一次輪詢：抓事件 → pipeline → 記錄歷史。
    網路錯誤不往外拋：保留上一次成功的結果，並設定顯示用錯誤字串。
    """
    try:
        payload = http_get_json(INCIDENTS_URL)
    except DashboardError as e:
        logging.error(f"[incidents] 抓取失敗：{e}")
        session.incidents_error = f"Error loading: {e}"
        return session.incidents

    session.last_payload = payload
    res = run_pipeline(payload, session, alert=alert)
    session.record_history(res.count)
    logging.info(f"[incidents] Incidents: {res.count}")
    return _store_result(session, res)

def rerun_incidents(session: DashboardSession,
                    alert: Optional[AlertCallback] = log_alert) -> Optional[PipelineResult]:
    """使用者操作（忽略 / 清除 / 改設定）後，以最後一份原始資料重跑，不重抓。"""
    if session.last_payload is None:
        return session.incidents
    return _store_result(session, run_pipeline(session.last_payload, session, alert=alert))

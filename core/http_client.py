# core/http_client.py
from typing import Any, Dict, Optional

import requests
from urllib3.util.retry import Retry
from requests.adapters import HTTPAdapter
from .config import DEFAULT_TIMEOUT, RETRY_TOTAL, USER_AGENT
from .errors import NetworkFailure

_session = None

def get_session():
    global _session
    if _session is None:
        _session = requests.Session()
        retries = Retry(
            total=RETRY_TOTAL, backoff_factor=0.5,
            status_forcelist=(429, 500, 502, 503, 504),
            allowed_methods=frozenset(['GET'])
        )
        _session.headers.update({"User-Agent": USER_AGENT})
        _session.mount("http://", HTTPAdapter(max_retries=retries))
        _session.mount("https://", HTTPAdapter(max_retries=retries))
    return _session

def http_get(url: str, timeout: float = DEFAULT_TIMEOUT,
             headers: Optional[Dict[str, str]] = None) -> requests.Response:
    return get_session().get(url, timeout=timeout, headers=headers)

def http_get_json(url: str, timeout: float = DEFAULT_TIMEOUT,
                  headers: Optional[Dict[str, str]] = None) -> Any:
    """GET + JSON 解析；任何傳輸/狀態/解碼錯誤一律轉成 NetworkFailure。"""
    try:
        r = http_get(url, timeout=timeout, headers=headers)
    except requests.RequestException as e:
        raise NetworkFailure(url, f"{type(e).__name__}: {e}") from e
    if not r.ok:
        raise NetworkFailure(url, r.reason or "HTTP error", status=r.status_code)
    try:
        return r.json()
    except ValueError as e:
        raise NetworkFailure(url, f"invalid JSON: {e}") from e

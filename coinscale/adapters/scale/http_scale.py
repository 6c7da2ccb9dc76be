"""
HTTP adapter for a balance scale service.

Translates WeighingOracle calls into HTTP requests against the scale server
(see scripts/fake_scale_server.py for a reference implementation).
Contract:
  POST /reset                                   -> {"ok": true}
  POST /weigh   {"left": [0, 1], "right": [2, 3]} -> {"ok": true, "result": "<"}
  POST /select  {"coin": 4}                     -> {"ok": true, "message": "..."}
  GET  /weighings                               -> {"ok": true, "weighings": ["..."]}
  GET  /status                                  -> {"ok": true, ...}
Errors come back as {"ok": false, "error": "..."} or a non-2xx status.
"""

from typing import List

import httpx

from coinscale.adapters.scale.base import WeighingOracle
from coinscale.locator.contracts import ComparisonOutcome
from coinscale.locator.errors import OracleFailure


class HttpScale(WeighingOracle):
    def __init__(self, status_store, base_url: str = "http://127.0.0.1:9100", timeout: float = 30.0,
                 client: httpx.Client | None = None):
        self.status = status_store
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = client or httpx.Client(timeout=timeout)

    def _request(self, method: str, path: str, payload: dict | None = None) -> dict:
        url = f"{self.base_url}{path}"
        try:
            if method == "GET":
                resp = self._client.get(url, timeout=self.timeout)
            else:
                resp = self._client.post(url, json=payload or {}, timeout=self.timeout)
            resp.raise_for_status()
            data = resp.json()
        except httpx.TimeoutException as e:
            raise OracleFailure(f"scale timed out on {path}") from e
        except (httpx.HTTPError, ValueError) as e:
            raise OracleFailure(f"scale request {method} {path} failed: {e}") from e
        if not isinstance(data, dict):
            raise OracleFailure(f"scale sent a non-object reply on {path}: {data!r}")
        if not data.get("ok", True):
            raise OracleFailure(f"scale error on {path}: {data.get('error', 'unknown')}")
        return data

    def compare(self, left: List[int], right: List[int]) -> ComparisonOutcome:
        self.status.log(f"http_scale: POST /weigh {left} vs {right}")
        data = self._request("POST", "/weigh", {"left": list(left), "right": list(right)})
        outcome = ComparisonOutcome.parse(data.get("result", ""))
        self.status.log(f"http_scale: result {outcome.value}")
        return outcome

    def reset(self):
        self.status.log("http_scale: POST /reset")
        self._request("POST", "/reset")

    def select(self, coin: int) -> str:
        self.status.log(f"http_scale: POST /select {coin}")
        data = self._request("POST", "/select", {"coin": coin})
        return data.get("message", "")

    def weighings(self) -> List[str]:
        return list(self._request("GET", "/weighings").get("weighings", []))

    def get_status(self) -> dict:
        return self._request("GET", "/status")

    def close(self):
        self._client.close()

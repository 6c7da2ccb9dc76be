import os
from fastapi import FastAPI
from dotenv import load_dotenv
from coinscale.services.models import (
    LocateRequestModel, LocateResponse, WeighingOut, StatusResponse, WeighingsResponse,
)
from coinscale.services.status_store import StatusStore
from coinscale.locator.contracts import LocateRequest
from coinscale.locator.errors import OracleFailure
from coinscale.locator.search import is_resolvable, max_weighings
from coinscale.locator.session import LocateSession
from coinscale.adapters.scale.mock_scale import MockScale
from coinscale.adapters.scale.http_scale import HttpScale

load_dotenv(dotenv_path="coinscale/.env", override=False)

app = FastAPI(title="coinscale")

status = StatusStore()

coin_count = int(os.getenv("COIN_COUNT", "9"))

# Scale adapter: read from SCALE_ADAPTER env var (default: mock)
scale_adapter = os.getenv("SCALE_ADAPTER", "mock")
if scale_adapter == "http":
    scale_url = os.getenv("SCALE_HTTP_BASE_URL", "http://127.0.0.1:9100")
    scale = HttpScale(status, base_url=scale_url, timeout=float(os.getenv("SCALE_HTTP_TIMEOUT", "30")))
    status.log(f"scale adapter: http -> {scale_url}")
else:
    _fake = os.getenv("MOCK_FAKE_COIN")
    scale = MockScale(status, fake=int(_fake) if _fake else None, coins=coin_count)
    status.log(f"scale adapter: mock ({coin_count} coins)")

session = LocateSession(scale, status)


@app.get("/status", response_model=StatusResponse)
def get_status():
    return StatusResponse(
        busy=status.busy,
        adapter=scale_adapter,
        coin_count=coin_count,
        last_coin=status.last_coin,
        last_message=status.last_message,
        last_error=status.last_error,
        logs=status.logs,
    )


@app.post("/locate", response_model=LocateResponse)
def locate(req: LocateRequestModel):
    """Find the fake coin among `coins` (default: every coin on the scale)."""
    coins = req.coins if req.coins is not None else list(range(coin_count))
    rr = session.run(LocateRequest(coins=coins, select=req.select))
    return LocateResponse(
        ok=rr.ok,
        coin=rr.coin,
        weighings=[WeighingOut(left=w.left, right=w.right, result=w.outcome.value) for w in rr.weighings],
        message=rr.message,
        duration_ms=rr.duration_ms,
        error_code=rr.error_code,
        error=rr.error,
    )


@app.get("/weighings", response_model=WeighingsResponse)
def weighings():
    """Weighing history as recorded by the scale itself."""
    try:
        return WeighingsResponse(ok=True, weighings=scale.weighings())
    except OracleFailure as e:
        status.log(f"WEIGHINGS: error: {e}")
        return WeighingsResponse(ok=False, error=str(e))


@app.post("/reset")
def reset():
    status.log("RESET")
    try:
        scale.reset()
    except OracleFailure as e:
        return {"ok": False, "error": str(e)}
    return {"ok": True}


@app.get("/health")
def health():
    """Check connectivity to the scale."""
    checks = {"api": True, "scale_adapter": scale_adapter}

    try:
        scale.get_status()
        checks["scale_reachable"] = True
    except OracleFailure as e:
        checks["scale_reachable"] = False
        checks["scale_error"] = str(e)

    checks["coin_count"] = coin_count
    checks["resolvable"] = is_resolvable(coin_count)
    if checks["resolvable"]:
        checks["max_weighings"] = max_weighings(coin_count)

    checks["all_ok"] = checks["scale_reachable"] and checks["resolvable"]
    return checks

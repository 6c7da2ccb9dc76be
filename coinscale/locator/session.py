import time
from typing import List

from coinscale.adapters.scale.base import WeighingOracle
from coinscale.locator import errors
from coinscale.locator.contracts import LocateRequest, LocateResult, Weighing, ComparisonOutcome
from coinscale.locator.search import CounterfeitLocator


class _RecordingScale(WeighingOracle):
    """Clears the pans before every weighing and keeps a record of each one."""

    def __init__(self, scale: WeighingOracle, status_store):
        self.scale = scale
        self.status = status_store
        self.record: List[Weighing] = []

    def compare(self, left, right) -> ComparisonOutcome:
        self.scale.reset()
        outcome = self.scale.compare(left, right)
        if isinstance(outcome, ComparisonOutcome):
            w = Weighing(left=list(left), right=list(right), outcome=outcome)
            self.record.append(w)
            self.status.log(f"locate: weighing {len(self.record)}: {w.describe()}")
        return outcome


class LocateSession:
    def __init__(self, scale: WeighingOracle, status_store):
        self.scale = scale
        self.status = status_store

    def run(self, req: LocateRequest) -> LocateResult:
        if self.status.busy:
            return LocateResult(ok=False, duration_ms=0, error_code=errors.ERR_BUSY, error="busy")

        self.status.set_busy(True)
        self.status.last_error = None
        t0 = time.time()
        recorder = _RecordingScale(self.scale, self.status)
        try:
            self.status.log(f"locate: start coins={list(req.coins)} select={req.select}")
            coin = CounterfeitLocator(recorder).locate(req.coins)
            self.status.log(f"locate: fake coin is {coin} after {len(recorder.record)} weighings")

            message = None
            if req.select:
                message = self.scale.select(coin)
                self.status.log(f"locate: select {coin} -> {message}")

            self.status.last_coin = coin
            self.status.last_message = message
            dt = int((time.time() - t0) * 1000)
            self.status.log(f"locate: done dt={dt}ms")
            return LocateResult(ok=True, duration_ms=dt, coin=coin, weighings=recorder.record, message=message)

        except errors.LocateError as e:
            return self._fail(e.code, e, t0, recorder)
        except TimeoutError as e:
            return self._fail(errors.ERR_TIMEOUT, e, t0, recorder)
        except Exception as e:
            return self._fail(errors.ERR_UNKNOWN, e, t0, recorder)
        finally:
            self.status.set_busy(False)

    def _fail(self, code: str, e: Exception, t0: float, recorder: _RecordingScale) -> LocateResult:
        dt = int((time.time() - t0) * 1000)
        self.status.last_error = code
        self.status.log(f"locate: error {type(e).__name__}: {e}")
        return LocateResult(ok=False, duration_ms=dt, weighings=recorder.record, error_code=code, error=str(e))

"""
Fake balance scale server for testing the HttpScale adapter without the real page.

Simulates the gold-bar challenge on port 9100: nine coins, one of them light.
Each weighing is printed, appended to the history and answered with "<", ">" or "=".

Usage:
    python coinscale/scripts/fake_scale_server.py            # random fake coin
    FAKE_COIN=4 python coinscale/scripts/fake_scale_server.py
"""

import os
import random
import uvicorn
from fastapi import FastAPI, Request

COINS = int(os.getenv("COIN_COUNT", "9"))


def create_app(fake: int | None = None, coins: int = COINS) -> FastAPI:
    app = FastAPI(title="fake-scale-server")
    state = {
        "fake": fake if fake is not None else random.randrange(coins),
        "weighings": [],
    }

    def _bad_ids(group: list) -> bool:
        return any(not isinstance(c, int) or not 0 <= c < coins for c in group)

    @app.post("/reset")
    async def reset():
        print("[scale] reset")
        return {"ok": True}

    @app.post("/weigh")
    async def weigh(request: Request):
        body = await request.json()
        left, right = body.get("left", []), body.get("right", [])
        if _bad_ids(left) or _bad_ids(right):
            return {"ok": False, "error": f"coin id must be in the range [0, {coins})"}
        if len(left) != len(right) or set(left) & set(right):
            return {"ok": False, "error": "pans must hold disjoint groups of equal size"}

        if state["fake"] in left:
            result = "<"
        elif state["fake"] in right:
            result = ">"
        else:
            result = "="
        line = f"{left} {result} {right}"
        state["weighings"].append(line)
        print(f"[scale] weigh #{len(state['weighings'])}: {line}")
        return {"ok": True, "result": result}

    @app.post("/select")
    async def select(request: Request):
        coin = (await request.json()).get("coin")
        if _bad_ids([coin]):
            return {"ok": False, "error": f"coin id must be in the range [0, {coins})"}
        message = "Yay! You find it!" if coin == state["fake"] else "Oops! Try Again!"
        print(f"[scale] select {coin}: {message}")
        return {"ok": True, "message": message}

    @app.get("/weighings")
    async def weighings():
        return {"ok": True, "weighings": state["weighings"]}

    @app.get("/status")
    async def status():
        return {"ok": True, "coins": coins, "weighings": len(state["weighings"])}

    return app


if __name__ == "__main__":
    _fake = os.getenv("FAKE_COIN")
    print("Fake scale server starting on http://localhost:9100")
    uvicorn.run(create_app(fake=int(_fake) if _fake else None), host="0.0.0.0", port=9100)

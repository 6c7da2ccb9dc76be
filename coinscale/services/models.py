from pydantic import BaseModel
from typing import Literal, Optional


class LocateRequestModel(BaseModel):
    # Defaults to range(COIN_COUNT) when omitted
    coins: Optional[list[int]] = None
    select: bool = True


class WeighingOut(BaseModel):
    left: list[int]
    right: list[int]
    result: Literal["=", "<", ">"]


class LocateResponse(BaseModel):
    ok: bool
    coin: Optional[int] = None
    weighings: list[WeighingOut] = []
    message: Optional[str] = None   # scale verdict after selecting the coin
    duration_ms: int
    error_code: Optional[str] = None
    error: Optional[str] = None


class StatusResponse(BaseModel):
    busy: bool
    adapter: str
    coin_count: int
    last_coin: Optional[int] = None
    last_message: Optional[str] = None
    last_error: Optional[str] = None
    logs: list[str]


class WeighingsResponse(BaseModel):
    ok: bool
    weighings: list[str] = []
    error: Optional[str] = None

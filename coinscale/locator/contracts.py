from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, List

from coinscale.locator.errors import OracleFailure


class ComparisonOutcome(str, Enum):
    BALANCED = "="   # anomaly is in neither pan
    LEFT = "<"       # left pan holds the anomaly
    RIGHT = ">"      # right pan holds the anomaly

    @classmethod
    def parse(cls, text: str) -> "ComparisonOutcome":
        """Turn the result text shown by a balance into an outcome."""
        raw = text.strip() if isinstance(text, str) else ""
        for outcome in cls:
            if raw == outcome.value:
                return outcome
        raise OracleFailure(f"unexpected weighing result {text!r}")


@dataclass
class Weighing:
    left: List[int]
    right: List[int]
    outcome: ComparisonOutcome

    def describe(self) -> str:
        return f"{self.left} {self.outcome.value} {self.right}"


@dataclass
class LocateRequest:
    coins: List[int]
    # report the answer back to the scale once found
    select: bool = True


@dataclass
class LocateResult:
    ok: bool
    duration_ms: int
    coin: Optional[int] = None
    weighings: List[Weighing] = field(default_factory=list)
    message: Optional[str] = None      # verdict text returned by the scale on select
    error_code: Optional[str] = None
    error: Optional[str] = None

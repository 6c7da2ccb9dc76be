from dataclasses import dataclass, field
from typing import Optional, List


@dataclass
class StatusStore:
    busy: bool = False
    last_coin: Optional[int] = None
    last_message: Optional[str] = None
    last_error: Optional[str] = None
    logs: List[str] = field(default_factory=list)

    def set_busy(self, v: bool):
        self.busy = v

    def log(self, msg: str):
        self.logs.append(msg)
        if len(self.logs) > 200:
            self.logs = self.logs[-200:]

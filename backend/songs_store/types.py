import json
from dataclasses import dataclass, field
from typing import Any


@dataclass
class ProxyResponse:
    status: int
    headers: dict[str, str] = field(default_factory=dict)
    payload: Any = None
    empty: bool = False

    def body(self) -> bytes:
        if self.empty:
            return b""
        return json.dumps(self.payload).encode()

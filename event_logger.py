from __future__ import annotations

import json
import pathlib
import time
from typing import Optional

# Path to the global board event log file
LOG_PATH = pathlib.Path("logs") / "board_events.log"


def log_event(action: str, board_id: Optional[str], *, log_file: pathlib.Path = LOG_PATH, **fields) -> None:
    """Append a record of a board operation to the log file.

    Each line is a JSON object with the keys:
      - ts: ISO timestamp (UTC)
      - action: operation name (upload, next, advance, final, ...)
      - board_id: identifier of the board involved
    plus any extra keyword fields (live cell counts, step counts, errors).
    """
    log_file.parent.mkdir(parents=True, exist_ok=True)
    entry = {
        "ts": time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime()),
        "action": action,
        "board_id": board_id,
        **fields,
    }
    with log_file.open("a", encoding="utf-8") as fp:
        fp.write(json.dumps(entry, ensure_ascii=False) + "\n")

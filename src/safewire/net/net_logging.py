from __future__ import annotations

import json
import logging
import time
from typing import Any, Dict, Optional

from safewire.config import default_wire_config

Json = Dict[str, Any]

WIRE_LOGGER = "safewire.wire"


def _now_ms() -> int:
    return int(time.time() * 1000)


def _jsonable(v: Any) -> Any:
    if isinstance(v, (bytes, bytearray)):
        return bytes(v).hex()
    return v


def log_event(logger: logging.Logger, event: str, *, level: int = logging.INFO, **fields: Any) -> None:
    """Emit one JSONL event line. Bytes fields are hex-encoded."""
    if not logger.isEnabledFor(level):
        return
    payload: Json = {"ts_ms": _now_ms(), "event": str(event)}
    payload.update({k: _jsonable(v) for k, v in fields.items()})
    try:
        msg = json.dumps(payload, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    except (TypeError, ValueError):
        msg = " ".join([f"event={event}"] + [f"{k}={fields[k]!r}" for k in sorted(fields)])
    logger.log(level, msg)


def configure_structured_logging(level_name: Optional[str] = None) -> None:
    """Route the safewire loggers to stderr as bare JSONL lines.

    Level: argument, else the loaded WireConfig's log_level. Idempotent.
    """
    if level_name is None:
        level_name = default_wire_config().log_level
    level = logging.getLevelName(level_name.strip().upper())
    if not isinstance(level, int):
        level = logging.INFO

    root = logging.getLogger("safewire")
    root.setLevel(level)
    if getattr(root, "_safewire_configured", False):
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(handler)
    root.propagate = False
    setattr(root, "_safewire_configured", True)

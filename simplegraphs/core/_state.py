import inspect
import json
import threading
import time
from contextlib import contextmanager
from datetime import UTC, datetime
from functools import wraps

import numpy as np
import polars as pl

from ..utils.validation import sorted_if_possible


class _State:
    """Per-store bookkeeping: mutation counter, history log and access lock."""

    def __init__(self, history: bool = True):
        self.version = 0
        self.history_enabled = bool(history)
        self.events = []  # list[dict]
        self._clock0 = time.perf_counter_ns()
        self._lock = threading.RLock()

    @contextmanager
    def exclusive(self):
        with self._lock:
            yield

    # History

    def _utcnow_iso(self) -> str:
        return datetime.now(UTC).isoformat(timespec="microseconds").replace("+00:00", "Z")

    def _jsonify(self, x):
        # Make args/return JSON-safe & compact.
        if x is None or isinstance(x, (bool, int, float, str)):
            return x
        if isinstance(x, (set, frozenset)):
            return sorted_if_possible(self._jsonify(v) for v in x)
        if isinstance(x, (list, tuple)):
            return [self._jsonify(v) for v in x]
        if isinstance(x, dict):
            return {str(k): self._jsonify(v) for k, v in x.items()}
        if isinstance(x, np.generic):
            return x.item()
        return repr(x)

    def log_event(self, op: str, **fields):
        self.version += 1
        if not self.history_enabled:
            return
        evt = {
            "version": self.version,
            "ts_utc": self._utcnow_iso(),  # ISO-8601 with Z
            "mono_ns": time.perf_counter_ns() - self._clock0,
            "op": op,
        }
        for k, v in fields.items():
            evt[k] = self._jsonify(v)
        self.events.append(evt)

    def log_mutation(self, fn, name=None):
        op = name or fn.__name__
        sig = inspect.signature(fn)

        @wraps(fn)
        def wrapper(*args, **kwargs):
            bound = sig.bind(*args, **kwargs)
            bound.apply_defaults()
            result = fn(*args, **kwargs)
            payload = dict(bound.arguments)
            payload["result"] = result
            self.log_event(op, **payload)
            return result

        return wrapper

    def install_hooks(self, owner, names):
        """Wrap the bound mutators of ``owner`` so each call is recorded."""
        for name in names:
            fn = getattr(owner, name, None)
            # Avoid double-wrapping
            if fn is not None and getattr(fn, "__wrapped__", None) is None:
                setattr(owner, name, self.log_mutation(fn, name))

    def as_frame(self) -> pl.DataFrame:
        return pl.from_dicts(self.events, infer_schema_length=None, strict=False)

    def export(self, path: str) -> int:
        if not self.events:
            return 0
        p = str(path).lower()
        if p.endswith(".parquet"):
            self.as_frame().write_parquet(path)
        elif p.endswith(".ndjson") or p.endswith(".jsonl"):
            with open(path, "w", encoding="utf-8") as f:
                for evt in self.events:
                    f.write(json.dumps(evt, ensure_ascii=False) + "\n")
        elif p.endswith(".json"):
            with open(path, "w", encoding="utf-8") as f:
                json.dump(self.events, f, ensure_ascii=False)
        elif p.endswith(".csv"):
            # CSV has no nested types; nested payloads go out as JSON text
            flat = [
                {k: json.dumps(v) if isinstance(v, (list, dict)) else v for k, v in evt.items()}
                for evt in self.events
            ]
            pl.from_dicts(flat, infer_schema_length=None, strict=False).write_csv(path)
        else:
            # Default to Parquet if unknown
            self.as_frame().write_parquet(f"{path}.parquet")
        return len(self.events)

"""Persistence of the user-edited bank rate table.

The table lives in a string-keyed key/value store (the SQLite metadata table
in production) as a JSON array, with an ISO-8601 UTC timestamp stored under a
second key. A missing or unreadable table is never an error for callers: they
get the built-in defaults and the problem is logged.

Metadata keys:
  - bank_rates: JSON array of {name, usd_to_twd_rate, aud_to_twd_rate, in_fee_twd}
  - bank_rates_updated_at: ISO timestamp of the last save
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import List, Optional, Protocol, Sequence, Tuple

from pydantic import TypeAdapter, ValidationError

from fxcalc.models.calculator import BankRate
from fxcalc.models.constants import BANK_RATES_KEY, BANK_RATES_UPDATED_AT_KEY
from fxcalc.models.defaults import default_banks

logger = logging.getLogger("fxcalc.bank_store")

_BANK_LIST = TypeAdapter(List[BankRate])


class KeyValueStore(Protocol):
    def get_value(self, key: str) -> Optional[str]: ...

    def set_value(self, key: str, value: str) -> None: ...

    def delete_value(self, key: str) -> bool: ...


def _load_saved_banks(store: KeyValueStore) -> Optional[List[BankRate]]:
    """Return the saved table, or None when nothing usable is stored."""
    raw = store.get_value(BANK_RATES_KEY)
    if raw is None:
        return None
    try:
        return _BANK_LIST.validate_python(json.loads(raw))
    except (ValueError, ValidationError):
        logger.exception("stored bank table is malformed; using defaults")
        return None


def load_bank_table(store: KeyValueStore) -> Tuple[List[BankRate], bool]:
    """Return (banks, is_default); is_default is True whenever defaults are served."""
    saved = _load_saved_banks(store)
    if saved is None:
        return default_banks(), True
    return saved, False


def load_banks(store: KeyValueStore) -> List[BankRate]:
    banks, _ = load_bank_table(store)
    return banks


def save_banks(
    store: KeyValueStore, banks: Sequence[BankRate], now: Optional[datetime] = None
) -> datetime:
    stamp = now or datetime.now(timezone.utc)
    payload = json.dumps([b.model_dump() for b in banks], ensure_ascii=False)
    store.set_value(BANK_RATES_KEY, payload)
    store.set_value(BANK_RATES_UPDATED_AT_KEY, stamp.isoformat())
    logger.info("saved bank table (%d banks)", len(banks))
    return stamp


def get_last_updated(store: KeyValueStore) -> Optional[datetime]:
    raw = store.get_value(BANK_RATES_UPDATED_AT_KEY)
    if not raw:
        return None
    try:
        return datetime.fromisoformat(raw)
    except ValueError:
        logger.warning("unparseable bank table timestamp %r", raw)
        return None


def reset_banks(store: KeyValueStore) -> None:
    store.delete_value(BANK_RATES_KEY)
    store.delete_value(BANK_RATES_UPDATED_AT_KEY)
    logger.info("bank table reset to defaults")


__all__ = [
    "KeyValueStore",
    "load_bank_table",
    "load_banks",
    "save_banks",
    "get_last_updated",
    "reset_banks",
]

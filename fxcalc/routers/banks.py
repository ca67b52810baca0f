"""Bank table endpoints.

    - GET    /banks -> current table (saved or default) with last-updated stamp
    - PUT    /banks -> replace the saved table
    - DELETE /banks -> drop the saved table, back to defaults
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from fxcalc.db.dal import Database
from fxcalc.models.calculator import BankRate
from fxcalc.services.bank_store import (
    get_last_updated,
    load_bank_table,
    reset_banks,
    save_banks,
)
from .deps import get_db

router = APIRouter(prefix="/banks", tags=["banks"])


class BankTableOut(BaseModel):
    banks: List[BankRate]
    updated_at: Optional[datetime] = None
    is_default: bool

    @classmethod
    def from_store(cls, db: Database) -> "BankTableOut":
        banks, is_default = load_bank_table(db)
        return cls(
            banks=banks,
            updated_at=get_last_updated(db),
            is_default=is_default,
        )


@router.get("", response_model=BankTableOut, summary="Current bank rate table")
async def get_banks(db: Database = Depends(get_db)):
    return BankTableOut.from_store(db)


@router.put("", response_model=BankTableOut, summary="Replace the saved bank table")
async def put_banks(banks: List[BankRate], db: Database = Depends(get_db)):
    save_banks(db, banks)
    return BankTableOut.from_store(db)


@router.delete("", response_model=BankTableOut, summary="Reset to the default bank table")
async def delete_banks(db: Database = Depends(get_db)):
    reset_banks(db)
    return BankTableOut.from_store(db)

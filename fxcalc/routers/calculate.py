from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, Field

from fxcalc.core.config import Settings
from fxcalc.db.dal import Database
from fxcalc.models.calculator import BankRate, CalculationInput, CalculationResult
from fxcalc.services.bank_store import load_banks
from fxcalc.services.calculator import calculate_exchange
from .deps import get_app_settings, get_db

router = APIRouter(prefix="/calculate", tags=["calculate"])


class CalculateRequest(BaseModel):
    input: CalculationInput
    banks: Optional[List[BankRate]] = Field(
        None, description="Bank table to compare; defaults to the saved table"
    )


@router.post(
    "",
    response_model=CalculationResult,
    summary="Compare intermediary vs direct conversion across banks",
)
async def calculate(payload: CalculateRequest, db: Database = Depends(get_db)):
    banks = payload.banks if payload.banks is not None else load_banks(db)
    return calculate_exchange(payload.input, banks)


@router.get(
    "",
    response_model=CalculationResult,
    summary="Compare using the saved bank table",
)
async def calculate_with_saved_banks(
    aud_amount: Optional[float] = Query(None, description="AUD to send"),
    aud_fee: Optional[float] = Query(None, description="Transfer fee in AUD"),
    aud_to_usd_rate: Optional[float] = Query(None, description="USD per 1 AUD"),
    usd_fee: Optional[float] = Query(None, description="Platform fee in USD"),
    settings: Settings = Depends(get_app_settings),
    db: Database = Depends(get_db),
):
    calc_input = CalculationInput(
        aud_amount=settings.default_aud_amount if aud_amount is None else aud_amount,
        aud_fee=settings.default_aud_fee if aud_fee is None else aud_fee,
        aud_to_usd_rate=(
            settings.default_aud_to_usd_rate
            if aud_to_usd_rate is None
            else aud_to_usd_rate
        ),
        usd_fee=settings.default_usd_fee if usd_fee is None else usd_fee,
    )
    return calculate_exchange(calc_input, load_banks(db))

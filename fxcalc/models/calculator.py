from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class BankRate(BaseModel):
    """A bank's posted buy rates and receiving fee."""

    model_config = ConfigDict(frozen=True)

    name: str
    usd_to_twd_rate: float = Field(..., description="TWD per 1 USD")
    aud_to_twd_rate: float = Field(..., description="TWD per 1 AUD")
    in_fee_twd: float = Field(0, description="Receiving fee in TWD")


class CalculationInput(BaseModel):
    aud_amount: float = Field(..., description="AUD the user wants to send")
    aud_fee: float = Field(0, description="Transfer fee in AUD")
    aud_to_usd_rate: float = Field(..., description="Platform rate, USD per 1 AUD")
    usd_fee: float = Field(0, description="Platform fee in USD")


class BankComparison(BaseModel):
    bank_name: str
    usd_to_twd_rate: float
    aud_to_twd_rate: float
    in_fee_twd: float
    usd_to_twd_amount: float
    aud_to_twd_amount: float
    difference: float
    is_best: bool = False
    is_worst: bool = False


class CalculationResult(BaseModel):
    aud_net_amount: float
    usd_amount: float
    usd_fee: float
    usd_net_amount: float
    bank_comparisons: List[BankComparison]
    best_bank: Optional[BankComparison] = None
    worst_bank: Optional[BankComparison] = None

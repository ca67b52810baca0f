"""AUD -> TWD exchange comparison.

Two ways of landing AUD in a Taiwanese bank account are compared for every
bank in the table:

    direct path        AUD net  x bank AUD/TWD rate - receiving fee
    intermediary path  USD net  x bank USD/TWD rate - receiving fee

where the USD leg is obtained on an FX platform:

    AUD net  = AUD amount - AUD fee
    USD      = AUD net x platform AUD/USD rate
    USD net  = USD - USD fee

Fees are always given in the currency of the leg they are charged on (AUD
transfer fee, USD platform fee, TWD receiving fee) and always subtracted.

The function is pure: no I/O, no validation, nothing raised. Garbage in
(NaN, inf) flows straight through to the result.
"""

from __future__ import annotations

from typing import Optional, Sequence

from fxcalc.models.calculator import (
    BankComparison,
    BankRate,
    CalculationInput,
    CalculationResult,
)
from fxcalc.services.money import round2


def compare_bank(aud_net: float, usd_net: float, bank: BankRate) -> BankComparison:
    usd_to_twd = usd_net * bank.usd_to_twd_rate - bank.in_fee_twd
    aud_to_twd = aud_net * bank.aud_to_twd_rate - bank.in_fee_twd
    difference = usd_to_twd - aud_to_twd
    return BankComparison(
        bank_name=bank.name,
        usd_to_twd_rate=bank.usd_to_twd_rate,
        aud_to_twd_rate=bank.aud_to_twd_rate,
        in_fee_twd=bank.in_fee_twd,
        usd_to_twd_amount=round2(usd_to_twd),
        aud_to_twd_amount=round2(aud_to_twd),
        difference=round2(difference),
    )


def pick_best_worst(comparisons: Sequence[BankComparison]) -> tuple[Optional[int], Optional[int]]:
    """Return (best_idx, worst_idx) by direct-path total; first occurrence wins ties."""
    if not comparisons:
        return None, None
    best_idx = worst_idx = 0
    for i in range(1, len(comparisons)):
        amount = comparisons[i].aud_to_twd_amount
        if amount > comparisons[best_idx].aud_to_twd_amount:
            best_idx = i
        if amount < comparisons[worst_idx].aud_to_twd_amount:
            worst_idx = i
    return best_idx, worst_idx


def calculate_exchange(
    calc_input: CalculationInput, banks: Sequence[BankRate]
) -> CalculationResult:
    aud_net = calc_input.aud_amount - calc_input.aud_fee
    usd_amount = aud_net * calc_input.aud_to_usd_rate
    usd_net = usd_amount - calc_input.usd_fee

    comparisons = [compare_bank(aud_net, usd_net, bank) for bank in banks]

    best_idx, worst_idx = pick_best_worst(comparisons)
    best = worst = None
    if best_idx is not None and worst_idx is not None:
        comparisons[best_idx].is_best = True
        comparisons[worst_idx].is_worst = True
        best = comparisons[best_idx]
        worst = comparisons[worst_idx]

    return CalculationResult(
        aud_net_amount=round2(aud_net),
        usd_amount=round2(usd_amount),
        usd_fee=round2(calc_input.usd_fee),
        usd_net_amount=round2(usd_net),
        bank_comparisons=comparisons,
        best_bank=best,
        worst_bank=worst,
    )

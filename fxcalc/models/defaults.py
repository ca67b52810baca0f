"""Built-in bank table used until the user saves an edited one."""

from typing import List, Tuple

from .calculator import BankRate

DEFAULT_BANKS: Tuple[BankRate, ...] = (
    BankRate(name="台新銀行", usd_to_twd_rate=31.553, aud_to_twd_rate=21.883, in_fee_twd=200),
    BankRate(name="台灣銀行", usd_to_twd_rate=31.515, aud_to_twd_rate=21.805, in_fee_twd=200),
    BankRate(name="永豐銀行", usd_to_twd_rate=31.563, aud_to_twd_rate=21.8085, in_fee_twd=200),
    BankRate(name="國泰世華", usd_to_twd_rate=31.54, aud_to_twd_rate=21.86, in_fee_twd=200),
    BankRate(name="遠銀銀行", usd_to_twd_rate=31.54, aud_to_twd_rate=21.805, in_fee_twd=50),
)


def default_banks() -> List[BankRate]:
    return list(DEFAULT_BANKS)

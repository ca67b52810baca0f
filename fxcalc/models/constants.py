"""Currency roles and storage keys.

The calculator only ever deals with one fixed triple: money leaves in AUD,
optionally passes through USD on an FX platform, and lands in TWD.
"""

SOURCE_CURRENCY = "AUD"
INTERMEDIARY_CURRENCY = "USD"
LOCAL_CURRENCY = "TWD"

# Key-value store keys for the edited bank table
BANK_RATES_KEY = "bank_rates"
BANK_RATES_UPDATED_AT_KEY = "bank_rates_updated_at"

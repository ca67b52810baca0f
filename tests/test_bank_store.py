import logging
from datetime import datetime, timezone

from fxcalc.models import BankRate, DEFAULT_BANKS
from fxcalc.models.constants import BANK_RATES_KEY, BANK_RATES_UPDATED_AT_KEY
from fxcalc.services.bank_store import (
    get_last_updated,
    load_bank_table,
    load_banks,
    reset_banks,
    save_banks,
)


def test_database_key_value_roundtrip(db):
    assert db.get_value("missing") is None
    db.set_value("k", "v1")
    db.set_value("k", "v2")
    assert db.get_value("k") == "v2"
    assert db.delete_value("k") is True
    assert db.delete_value("k") is False
    assert db.get_value("k") is None


def test_schema_version_recorded(db):
    assert db.get_value("schema_version") == "1"


def test_load_defaults_when_nothing_saved(db):
    banks = load_banks(db)
    assert banks == list(DEFAULT_BANKS)
    assert load_bank_table(db)[1] is True
    assert get_last_updated(db) is None


def test_loaded_defaults_are_a_copy(db):
    banks = load_banks(db)
    banks.pop()
    assert len(load_banks(db)) == len(DEFAULT_BANKS)


def test_save_then_load(db):
    edited = [
        BankRate(name="A", usd_to_twd_rate=31.6, aud_to_twd_rate=21.9, in_fee_twd=100),
        BankRate(name="B", usd_to_twd_rate=31.4, aud_to_twd_rate=21.7, in_fee_twd=0),
    ]
    stamp = datetime(2026, 10, 1, 8, 30, tzinfo=timezone.utc)
    assert save_banks(db, edited, now=stamp) == stamp
    assert load_banks(db) == edited
    assert load_bank_table(db) == (edited, False)
    assert get_last_updated(db) == stamp


def test_save_preserves_unicode_names(db):
    save_banks(db, list(DEFAULT_BANKS))
    assert "台新銀行" in db.get_value(BANK_RATES_KEY)


def test_save_empty_table(db):
    save_banks(db, [])
    assert load_bank_table(db) == ([], False)


def test_malformed_json_logged_and_defaults_returned(db, caplog):
    db.set_value(BANK_RATES_KEY, "{not json")
    with caplog.at_level(logging.ERROR, logger="fxcalc.bank_store"):
        banks = load_banks(db)
    assert banks == list(DEFAULT_BANKS)
    assert any("malformed" in r.getMessage() for r in caplog.records)


def test_malformed_table_reports_defaults_in_use(db):
    db.set_value(BANK_RATES_KEY, "{not json")
    banks, is_default = load_bank_table(db)
    assert banks == list(DEFAULT_BANKS)
    assert is_default is True


def test_invalid_records_fall_back_to_defaults(db):
    db.set_value(BANK_RATES_KEY, '[{"name": "A"}]')
    assert load_banks(db) == list(DEFAULT_BANKS)


def test_unparseable_timestamp(db):
    db.set_value(BANK_RATES_UPDATED_AT_KEY, "yesterday")
    assert get_last_updated(db) is None


def test_reset(db):
    save_banks(db, [BankRate(name="A", usd_to_twd_rate=1, aud_to_twd_rate=1)])
    reset_banks(db)
    assert load_banks(db) == list(DEFAULT_BANKS)
    assert get_last_updated(db) is None
    assert load_bank_table(db)[1] is True

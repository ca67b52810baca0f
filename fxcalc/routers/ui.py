from pathlib import Path
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from fxcalc.core.config import Settings
from fxcalc.db.dal import Database
from fxcalc.models.calculator import BankRate, CalculationInput
from fxcalc.models.constants import (
    INTERMEDIARY_CURRENCY,
    LOCAL_CURRENCY,
    SOURCE_CURRENCY,
)
from fxcalc.services.bank_store import (
    get_last_updated,
    load_bank_table,
    reset_banks,
    save_banks,
)
from fxcalc.services.calculator import calculate_exchange
from fxcalc.services.formatting import clipboard_text, format_currency, format_rate
from fxcalc.services.input_parsing import parse_number
from .deps import get_app_settings, get_db

router = APIRouter(tags=["ui"])

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))
templates.env.filters["currency"] = format_currency
templates.env.filters["rate"] = format_rate
templates.env.filters["copytext"] = clipboard_text


def _input_from_query(request: Request, settings: Settings) -> CalculationInput:
    """Build calculator input from query string, defaulting absent fields."""
    params = request.query_params

    def _field(name: str, default: float) -> float:
        raw = params.get(name)
        return default if raw is None else parse_number(raw)

    return CalculationInput(
        aud_amount=_field("aud_amount", settings.default_aud_amount),
        aud_fee=_field("aud_fee", settings.default_aud_fee),
        aud_to_usd_rate=_field("aud_to_usd_rate", settings.default_aud_to_usd_rate),
        usd_fee=_field("usd_fee", settings.default_usd_fee),
    )


def _nth(values: List[Any], idx: int) -> Optional[str]:
    return values[idx] if idx < len(values) else None


def _banks_from_form(form) -> List[BankRate]:
    names = form.getlist("name")
    usd_rates = form.getlist("usd_to_twd_rate")
    aud_rates = form.getlist("aud_to_twd_rate")
    fees = form.getlist("in_fee_twd")
    banks: List[BankRate] = []
    for idx, name in enumerate(names):
        name = (name or "").strip()
        if not name:
            continue  # blank rows are how the table drops a bank
        banks.append(
            BankRate(
                name=name,
                usd_to_twd_rate=parse_number(_nth(usd_rates, idx)),
                aud_to_twd_rate=parse_number(_nth(aud_rates, idx)),
                in_fee_twd=parse_number(_nth(fees, idx)),
            )
        )
    return banks


@router.get("/ui", response_class=HTMLResponse)
async def ui_home(
    request: Request,
    settings: Settings = Depends(get_app_settings),
    db: Database = Depends(get_db),
):
    calc_input = _input_from_query(request, settings)
    banks, is_default = load_bank_table(db)
    result = calculate_exchange(calc_input, banks)
    context: Dict[str, Any] = {
        "request": request,
        "app_name": settings.app_name,
        "version": settings.version,
        "input": calc_input,
        "result": result,
        "banks": banks,
        "is_default": is_default,
        "updated_at": get_last_updated(db),
        "source_ccy": SOURCE_CURRENCY,
        "intermediary_ccy": INTERMEDIARY_CURRENCY,
        "local_ccy": LOCAL_CURRENCY,
    }
    return templates.TemplateResponse(request, "calculator.html", context)


@router.post("/ui/banks", response_class=RedirectResponse)
async def ui_save_banks(request: Request, db: Database = Depends(get_db)):
    form = await request.form()
    save_banks(db, _banks_from_form(form))
    return RedirectResponse(url="/ui", status_code=status.HTTP_303_SEE_OTHER)


@router.post("/ui/banks/reset", response_class=RedirectResponse)
async def ui_reset_banks(db: Database = Depends(get_db)):
    reset_banks(db)
    return RedirectResponse(url="/ui", status_code=status.HTTP_303_SEE_OTHER)

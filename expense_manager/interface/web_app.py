"""Mini README: FastAPI service backing the expense manager widget.

Structure:
    * create_application - application factory wiring routes to a session.
    * _validation_detail - flattens pydantic errors into a readable message.

The service keeps a single ``ExpenseSession`` created inside the factory and
returns JSON the browser renders as the calendar, the daily list, and the
monthly bar chart. Form input is validated by ``ExpenseForm`` before the
ledger sees it.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from fastapi import FastAPI, Form, HTTPException
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from ..configuration import ExpenseManagerSettings, get_settings
from ..ledger import category_options, payment_mode_options
from ..logging_utils import get_logger
from .forms import ExpenseForm
from .session import ExpenseSession

LOGGER = get_logger(__name__)


def _validation_detail(error: ValidationError) -> str:
    messages = []
    for entry in error.errors():
        location = ".".join(str(part) for part in entry["loc"])
        messages.append(f"{location}: {entry['msg']}" if location else entry["msg"])
    return "; ".join(messages)


def create_application(
    settings: Optional[ExpenseManagerSettings] = None,
    session: Optional[ExpenseSession] = None,
) -> FastAPI:
    """Create the FastAPI application with routes bound to one session."""

    settings = settings or get_settings()
    if session is None:
        session = ExpenseSession.start(
            time_reference=settings.time_reference,
            currency_symbol=settings.currency_symbol,
            seed_demo=settings.seed_demo_expenses,
        )
    app = FastAPI(title="Expense Manager", version="0.1.0")
    app.state.session = session

    @app.get("/calendar")
    async def calendar() -> JSONResponse:
        """Return the grid for the displayed month."""

        view = session.month_view()
        LOGGER.debug("Rendering %s with %s cells", view.month.label, len(view.cells))
        return JSONResponse(view.as_dict())

    @app.post("/navigate-month")
    async def navigate(direction: str = Form(...)) -> JSONResponse:
        """Move the calendar one month backward or forward."""

        try:
            session.navigate(direction)
        except ValueError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        return JSONResponse(session.month_view().as_dict())

    @app.post("/select-day")
    async def select_day(day: str = Form(...)) -> JSONResponse:
        """Select the calendar cell whose expenses the daily list shows."""

        try:
            selected = date.fromisoformat(day)
        except ValueError as error:
            raise HTTPException(status_code=400, detail=f"Invalid date: {day}") from error
        session.select_day(selected)
        return JSONResponse(session.daily_summary())

    @app.get("/daily-expenses")
    async def daily_expenses() -> JSONResponse:
        return JSONResponse(session.daily_summary())

    @app.post("/expenses")
    async def add_expense(
        amount: Optional[str] = Form(None),
        description: Optional[str] = Form(None),
        payment_mode: Optional[str] = Form(None),
        category: Optional[str] = Form(None),
    ) -> JSONResponse:
        """Validate the add-expense form and record it on the selected day."""

        payload = {"amount": amount, "description": description, "category": category}
        if payment_mode:
            payload["payment_mode"] = payment_mode
        try:
            form = ExpenseForm(**payload)
        except ValidationError as error:
            detail = _validation_detail(error)
            LOGGER.info("Rejected expense form: %s", detail)
            raise HTTPException(status_code=400, detail=detail) from error
        expense = session.add_expense(form)
        return JSONResponse(
            {
                "expense": expense.as_dict(),
                "display_amount": expense.display_amount(session.currency_symbol),
            },
            status_code=201,
        )

    @app.get("/expenses/{expense_id}")
    async def get_expense(expense_id: str) -> JSONResponse:
        try:
            expense = session.ledger.get_expense(expense_id)
        except KeyError as error:
            raise HTTPException(status_code=404, detail=str(error)) from error
        return JSONResponse(expense.as_dict())

    @app.delete("/expenses/{expense_id}")
    async def delete_expense(expense_id: str) -> JSONResponse:
        """Delete an expense; unknown identifiers are accepted silently."""

        session.delete_expense(expense_id)
        return JSONResponse({"expense_id": expense_id, "remaining": len(session.ledger)})

    @app.get("/monthly-report")
    async def monthly_report() -> JSONResponse:
        """Return month totals in the order months first appeared."""

        totals = session.ledger.monthly_totals()
        LOGGER.debug("Monthly report covers %s months", len(totals))
        return JSONResponse({"months": [entry.as_dict() for entry in totals]})

    @app.get("/options")
    async def options() -> JSONResponse:
        """List the values the form's select inputs offer."""

        return JSONResponse(
            {"categories": category_options(), "payment_modes": payment_mode_options()}
        )

    return app

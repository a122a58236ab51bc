"""Mini README: Interactive interfaces for the expense manager.

Exports the FastAPI application factory, the session it serves, and the
typed add-expense form.
"""

from .forms import ExpenseForm
from .session import ExpenseSession
from .web_app import create_application

__all__ = ["ExpenseForm", "ExpenseSession", "create_application"]

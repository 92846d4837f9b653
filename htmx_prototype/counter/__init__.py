"""Counter package providing the shared state and its htmx routes."""

from htmx_prototype.counter.routes import router
from htmx_prototype.counter.state import CounterState

__all__ = ["CounterState", "router"]

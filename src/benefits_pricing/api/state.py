"""Shared quote engine instance for the API routers."""
from ..engine.quote_engine import QuoteEngine

engine = QuoteEngine()

"""
Trakr - Personal Finance Ledger Service

A FastAPI-based service that stores transactions, budgets, wallets
and behavioral streaks, and computes financial summaries and
budget progress on demand.
"""

__version__ = "0.1.0"

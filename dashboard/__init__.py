"""Trade Ledger dashboard."""

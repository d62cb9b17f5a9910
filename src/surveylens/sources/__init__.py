"""Response sources - bulk import of survey answers."""

from surveylens.sources.csv import FINGERPRINT_COLUMN, load_responses_csv

__all__ = [
    "FINGERPRINT_COLUMN",
    "load_responses_csv",
]

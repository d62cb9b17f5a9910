"""CLI for surveylens.

Provides commands for submitting answers, importing CSV files and
inspecting correlations.

Usage:
    surveylens submit -a sleepHours=6 -a moodRating=5
    surveylens import-csv responses.csv
    surveylens correlations --top 5

Environment:
    Loads .env file from current directory if present.
    Set SURVEYLENS_DATABASE_URL to choose the response database.
"""

from surveylens.cli.main import app, main

__all__ = ["app", "main"]

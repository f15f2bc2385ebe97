"""Google Sheets API integration."""

from .client import GoogleSheetsClient
from .models import SheetTable

__all__ = [
    "GoogleSheetsClient",
    "SheetTable",
]

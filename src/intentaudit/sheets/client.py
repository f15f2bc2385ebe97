"""Google Sheets API client."""

import logging
from pathlib import Path
from typing import Optional

from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from ..config import settings
from .models import SheetTable

logger = logging.getLogger(__name__)

SCOPES = ["https://www.googleapis.com/auth/spreadsheets.readonly"]


class GoogleSheetsClient:
    """Read-only client for the Google Sheets API."""

    def __init__(
        self,
        credentials_path: Optional[Path] = None,
        token_path: Optional[Path] = None,
    ):
        self.credentials_path = credentials_path or settings.google_credentials_path
        self.token_path = token_path or settings.google_token_path
        self._service = None
        self._credentials = None

    def _get_credentials(self) -> Credentials:
        """Get or refresh OAuth2 credentials."""
        creds = None

        if self.token_path.exists():
            creds = Credentials.from_authorized_user_file(str(self.token_path), SCOPES)

        if not creds or not creds.valid:
            if creds and creds.expired and creds.refresh_token:
                creds.refresh(Request())
            else:
                if not self.credentials_path.exists():
                    raise FileNotFoundError(
                        f"Google credentials file not found at {self.credentials_path}. "
                        "Please download it from Google Cloud Console."
                    )
                flow = InstalledAppFlow.from_client_secrets_file(
                    str(self.credentials_path), SCOPES
                )
                creds = flow.run_local_server(port=0)

            # Save credentials for next run
            self.token_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.token_path, "w") as token:
                token.write(creds.to_json())

        return creds

    @property
    def service(self):
        """Get or create the Sheets API service."""
        if self._service is None:
            self._credentials = self._get_credentials()
            self._service = build("sheets", "v4", credentials=self._credentials)
        return self._service

    def get_spreadsheet_info(self, spreadsheet_id: str) -> dict:
        """Get basic information about a spreadsheet."""
        try:
            result = self.service.spreadsheets().get(spreadsheetId=spreadsheet_id).execute()
            return {
                "id": result["spreadsheetId"],
                "title": result["properties"]["title"],
                "sheets": [
                    {
                        "id": sheet["properties"]["sheetId"],
                        "title": sheet["properties"]["title"],
                        "row_count": sheet["properties"]["gridProperties"]["rowCount"],
                        "col_count": sheet["properties"]["gridProperties"]["columnCount"],
                    }
                    for sheet in result.get("sheets", [])
                ],
            }
        except HttpError as e:
            raise RuntimeError(f"Failed to get spreadsheet info: {e}")

    def read_values(self, spreadsheet_id: str, sheet_name: str) -> list[list]:
        """Read the formatted values of a whole sheet as a list of rows."""
        range_notation = "'{}'".format(sheet_name.replace("'", "''"))
        try:
            result = (
                self.service.spreadsheets()
                .values()
                .get(spreadsheetId=spreadsheet_id, range=range_notation)
                .execute()
            )
        except HttpError as e:
            raise RuntimeError(f"Failed to read sheet '{sheet_name}': {e}")

        values = result.get("values", [])
        logger.debug(f"Read {len(values)} rows from sheet '{sheet_name}'")
        return values

    def read_table(self, spreadsheet_id: str, sheet_name: str) -> SheetTable:
        """Read a sheet as a header row plus data rows."""
        return SheetTable.from_values(sheet_name, self.read_values(spreadsheet_id, sheet_name))

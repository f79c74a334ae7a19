"""
Export component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass

HISTORY_HEADER = ("日付", "施術内容")
DIRECTORY_HEADER = ("お客様ID", "お名前", "フリガナ", "電話番号", "来店回数")

HISTORY_FILENAME = "{name}_施術記録.csv"
DIRECTORY_FILENAME = "全顧客リスト_{date}.csv"

# --- Configuration ---


@dataclass(frozen=True)
class CsvConfig:
    """CSV output configuration."""

    line_terminator: str = "\n"
    # UTF-8 BOM so spreadsheet tools detect the encoding
    encoding: str = "utf-8-sig"


DEFAULT_CSV_CONFIG = CsvConfig()


# --- Input Models ---


@dataclass(frozen=True)
class ExportHistoryInput:
    """Input for exporting one customer's visit history."""

    customer_id: str


# --- Output Models ---


@dataclass(frozen=True)
class CsvExport:
    """A rendered CSV payload and the filename to offer for it."""

    filename: str
    payload: bytes
    rows: int

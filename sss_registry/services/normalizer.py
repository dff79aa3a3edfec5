"""Normalization helpers for submitted applicant form values"""
from datetime import date, datetime
from dateutil import parser
from typing import Any, Optional
import re


class DataNormalizer:
    """Cleans raw form values into the shapes stored in the database"""

    @staticmethod
    def clean_text(value: Any) -> str:
        """Trim a submitted value; None becomes an empty string"""
        if value is None:
            return ""
        return str(value).strip()

    @staticmethod
    def parse_date(date_value: Any) -> datetime:
        """
        Parse a submitted date into a datetime
        Raises ValueError when the value cannot be read as a date
        """
        if isinstance(date_value, datetime):
            return date_value
        if isinstance(date_value, date):
            return datetime(date_value.year, date_value.month, date_value.day)

        text = DataNormalizer.clean_text(date_value)
        if not text:
            raise ValueError("empty date")

        try:
            return parser.parse(text)
        except (ValueError, OverflowError) as e:
            raise ValueError(str(e)) from e

    @staticmethod
    def normalize_date(date_value: Any) -> Optional[date]:
        """Parse a date for a DATE column (YYYY-MM-DD); empty or unreadable input becomes None"""
        if not DataNormalizer.clean_text(date_value):
            return None

        try:
            return DataNormalizer.parse_date(date_value).date()
        except ValueError:
            return None

    @staticmethod
    def normalize_phone(phone: Any) -> str:
        """
        Strip separators from a phone number
        Keeps digits and a leading '+', so '+63 917-123-4567' becomes '+639171234567'
        """
        text = DataNormalizer.clean_text(phone)
        digits = re.sub(r"\D", "", text)
        if text.startswith("+"):
            return "+" + digits
        return digits

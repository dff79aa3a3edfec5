"""Validation rules for applicant submissions"""
from datetime import datetime
from email_validator import validate_email, EmailNotValidError
from typing import Any, List
import re

from sss_registry.schemas.applicant_schema import ApplicantForm
from sss_registry.schemas.summary_schema import QuickEntryForm
from sss_registry.services.normalizer import DataNormalizer

PHONE_PATTERN = re.compile(r"^(09\d{9}|\+639\d{9})$")
PHONE_FORMAT_ERROR = "Invalid phone number format (must be 09XXXXXXXXX or +639XXXXXXXXX)"

# column, label used in "<label> is required"
REQUIRED_FIELDS = (
    ("ssnum", "SS Number"),
    ("lname", "Last Name"),
    ("fname", "First Name"),
    ("dbirth", "Date of Birth"),
    ("sex", "Sex"),
    ("cvstatus", "Civil Status"),
    ("nation", "Nationality"),
    ("pbirth", "Place of Birth"),
    ("address_6", "Address (City)"),
    ("address_7", "Address (Province)"),
    ("cphone", "Mobile Number"),
    ("email", "Email"),
)

OPTIONAL_DATE_FIELDS = (
    ("cert_date", "Certification Date"),
    ("fbirth", "Father's Date of Birth"),
    ("mbirth", "Mother's Date of Birth"),
    ("sbirth", "Spouse's Date of Birth"),
)


class FormValidator:
    """Field-level checks; each returns True when the value is acceptable"""

    @staticmethod
    def required(value: Any) -> bool:
        return bool(DataNormalizer.clean_text(value))

    @staticmethod
    def email(value: str) -> bool:
        try:
            validate_email(value, check_deliverability=False)
        except EmailNotValidError:
            return False
        return True

    @staticmethod
    def phone(value: str) -> bool:
        """Accepts 09XXXXXXXXX or +639XXXXXXXXX once spaces and dashes are removed"""
        return bool(PHONE_PATTERN.match(DataNormalizer.normalize_phone(value)))

    @staticmethod
    def date(value: Any) -> bool:
        try:
            DataNormalizer.parse_date(value)
        except ValueError:
            return False
        return True

    @staticmethod
    def past_date(value: Any) -> bool:
        """True when the date lies strictly before now"""
        moment = DataNormalizer.parse_date(value)
        now = datetime.now(moment.tzinfo) if moment.tzinfo else datetime.now()
        return moment < now


def validate_applicant(form: ApplicantForm, partial: bool = False) -> List[str]:
    """
    Collect every validation message for an intake form submission.
    With partial=True (updates) a required field is only checked when it was submitted.
    """
    errors = []

    for column, label in REQUIRED_FIELDS:
        if partial and not form.is_submitted(column):
            continue
        if not FormValidator.required(getattr(form, column)):
            errors.append(f"{label} is required")

    if form.dbirth:
        if not FormValidator.date(form.dbirth):
            errors.append("Date of Birth is not a valid date")
        elif not FormValidator.past_date(form.dbirth):
            errors.append("Date of Birth must be in the past")

    if form.email and not FormValidator.email(form.email):
        errors.append("Invalid email format")

    if form.cphone and not FormValidator.phone(form.cphone):
        errors.append(PHONE_FORMAT_ERROR)

    for column, label in OPTIONAL_DATE_FIELDS:
        value = getattr(form, column)
        if value and not FormValidator.date(value):
            errors.append(f"{label} is not a valid date")

    for position, child in enumerate(form.named_children(), start=1):
        if child.dbirth and not FormValidator.date(child.dbirth):
            errors.append(f"Child {position} Date of Birth is not a valid date")

    return errors


def validate_quick_entry(form: QuickEntryForm, require_id: bool = False) -> List[str]:
    """Checks for the table page's add/edit modal"""
    errors = []

    if require_id and not form.id:
        errors.append("ID is required for update")
    if not form.first:
        errors.append("First name is required")
    if not form.last:
        errors.append("Last name is required")
    if not form.email:
        errors.append("Email is required")
    elif not FormValidator.email(form.email):
        errors.append("Invalid email format")

    return errors

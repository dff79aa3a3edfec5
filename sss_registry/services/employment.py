"""Employment type derivation for the intake form"""
from enum import Enum
from typing import Optional

from sss_registry.schemas.applicant_schema import ApplicantForm


class EmploymentType(str, Enum):
    SELF_EMPLOYED = "Self-Employed"
    OFW = "OFW"
    NON_WORKING_SPOUSE = "Non-Working Spouse"


# Evaluated top to bottom; the first non-empty trigger field wins
EMPLOYMENT_RULES = (
    ("profession", EmploymentType.SELF_EMPLOYED),
    ("faddress", EmploymentType.OFW),
    ("spouse_ssnum", EmploymentType.NON_WORKING_SPOUSE),
)


def resolve_employment_type(form: ApplicantForm) -> Optional[EmploymentType]:
    """
    Derive the employment type from which section of the form was filled in
    Returns None when no section applies, in which case no employment row is written
    """
    for field, employment_type in EMPLOYMENT_RULES:
        if getattr(form, field):
            return employment_type
    return None

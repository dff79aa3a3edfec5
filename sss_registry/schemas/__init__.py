from sss_registry.schemas.applicant_schema import ApplicantForm, ChildEntry
from sss_registry.schemas.summary_schema import QuickEntryForm, ApplicantSummary
from sss_registry.schemas.result_schema import ActionResult

__all__ = [
    "ApplicantForm",
    "ChildEntry",
    "QuickEntryForm",
    "ApplicantSummary",
    "ActionResult",
]

from sss_registry.models.applicant import Applicant
from sss_registry.models.address import ApplicantAddress
from sss_registry.models.parents import ApplicantParents
from sss_registry.models.spouse import ApplicantSpouse
from sss_registry.models.child import ApplicantChild
from sss_registry.models.employment import ApplicantEmployment

__all__ = [
    "Applicant",
    "ApplicantAddress",
    "ApplicantParents",
    "ApplicantSpouse",
    "ApplicantChild",
    "ApplicantEmployment",
]

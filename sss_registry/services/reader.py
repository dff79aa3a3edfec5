"""Read side of the applicant aggregate"""
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import Any, Dict, List
import logging

from sss_registry.models import (
    Applicant,
    ApplicantAddress,
    ApplicantParents,
    ApplicantSpouse,
    ApplicantChild,
    ApplicantEmployment,
)
from sss_registry.schemas.summary_schema import ApplicantSummary
from sss_registry.services.errors import NotFoundError, StorageError
from sss_registry.services.repository import TableRepository

logger = logging.getLogger(__name__)


def row_to_dict(row) -> Dict[str, Any]:
    """Column name -> value for a mapped row; a missing row becomes {}"""
    if row is None:
        return {}
    return {column.name: getattr(row, column.name) for column in row.__table__.columns}


class ApplicantRecordReader:
    """Assembles applicants and their dependents by applicant_id"""

    def __init__(self, db: Session):
        self.applicants = TableRepository(db, Applicant)
        self.addresses = TableRepository(db, ApplicantAddress)
        self.parents = TableRepository(db, ApplicantParents)
        self.spouses = TableRepository(db, ApplicantSpouse)
        self.children = TableRepository(db, ApplicantChild)
        self.employment = TableRepository(db, ApplicantEmployment)

    def read_applicant(self, applicant_id: int) -> Dict[str, Any]:
        """
        Return {applicant, address, parents, spouse, children, employment}
        Missing dependents come back as {} (children as []); only a missing
        applicant row raises NotFoundError
        """
        try:
            applicant = self.applicants.first({"applicant_id": applicant_id})
            if applicant is None:
                raise NotFoundError(applicant_id)

            where = {"applicant_id": applicant_id}
            return {
                "applicant": row_to_dict(applicant),
                "address": row_to_dict(self.addresses.first(where)),
                "parents": row_to_dict(self.parents.first(where)),
                "spouse": row_to_dict(self.spouses.first(where)),
                "children": [
                    row_to_dict(child)
                    for child in self.children.all(where, order_by="child_id", direction="ASC")
                ],
                "employment": row_to_dict(self.employment.first(where)),
            }
        except SQLAlchemyError as e:
            logger.error(f"Read applicant {applicant_id} failed: {e}")
            raise StorageError(f"Database error: {e}") from e

    def list_applicants(self, order_by: str = "applicant_id", direction: str = "DESC") -> List[ApplicantSummary]:
        """All applicants in the table page's summary shape"""
        try:
            rows = self.applicants.all(order_by=order_by, direction=direction)
        except SQLAlchemyError as e:
            logger.error(f"List applicants failed: {e}")
            raise StorageError(f"Database error: {e}") from e
        return [
            ApplicantSummary(
                id=row.applicant_id,
                first=row.fname,
                last=row.lname,
                email=row.email,
                phone=row.cphone,
                location=row.nation,
                hobby=row.religion,
            )
            for row in rows
        ]

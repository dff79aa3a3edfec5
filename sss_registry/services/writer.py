"""Transactional writes of the applicant aggregate"""
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import Any, Optional
import logging

from sss_registry.config import get_settings
from sss_registry.models import (
    Applicant,
    ApplicantAddress,
    ApplicantParents,
    ApplicantSpouse,
    ApplicantChild,
    ApplicantEmployment,
)
from sss_registry.schemas.applicant_schema import (
    ApplicantForm,
    APPLICANT_COLUMNS,
    ADDRESS_COLUMNS,
    PARENTS_COLUMNS,
    SPOUSE_COLUMNS,
    EMPLOYMENT_COLUMNS,
)
from sss_registry.schemas.summary_schema import QuickEntryForm
from sss_registry.services.employment import resolve_employment_type
from sss_registry.services.errors import ValidationError, StorageError, NotFoundError
from sss_registry.services.repository import TableRepository
from sss_registry.services.validator import validate_applicant, validate_quick_entry

logger = logging.getLogger(__name__)


def parse_applicant_id(value: Any, missing_message: str) -> int:
    """Turn a submitted id into an int, raising ValidationError when absent or malformed"""
    if value is None or str(value).strip() == "":
        raise ValidationError([missing_message])
    try:
        return int(str(value).strip())
    except ValueError:
        raise ValidationError([f"Invalid applicant ID '{value}'"])


class ApplicantRecordWriter:
    """
    Writes an applicant and its dependents (address, parents, spouse,
    children, employment) as one unit of work.
    Every public method either commits everything or rolls back everything.
    """

    def __init__(self, db: Session, enforce_unique_email: Optional[bool] = None):
        self.db = db
        self.applicants = TableRepository(db, Applicant)
        self.addresses = TableRepository(db, ApplicantAddress)
        self.parents = TableRepository(db, ApplicantParents)
        self.spouses = TableRepository(db, ApplicantSpouse)
        self.children = TableRepository(db, ApplicantChild)
        self.employment = TableRepository(db, ApplicantEmployment)

        if enforce_unique_email is None:
            enforce_unique_email = get_settings().enforce_unique_email
        self.enforce_unique_email = enforce_unique_email

    def _exists(self, where: dict) -> bool:
        try:
            return self.applicants.exists(where)
        except SQLAlchemyError as e:
            raise self._fail("Applicant lookup", e) from e

    def _check_unique_email(self, email: str, errors: list):
        if self.enforce_unique_email and email and self._exists({"email": email}):
            errors.append("Email already exists")

    def _ensure_exists(self, applicant_id: int):
        if not self._exists({"applicant_id": applicant_id}):
            raise NotFoundError(applicant_id)

    def _fail(self, action: str, error: Exception) -> StorageError:
        self.db.rollback()
        logger.error(f"{action} failed, transaction rolled back: {error}")
        return StorageError(f"Database error: {error}")

    def create_applicant(self, form: ApplicantForm) -> int:
        """
        Validate, then insert the applicant followed by its dependents:
        1. Applicant row (generated applicant_id)
        2. Address and parents rows, always
        3. Spouse row when a spouse last or first name was given
        4. One row per child with a last or first name
        5. Employment row when an employment type can be derived
        Returns the new applicant_id
        """
        errors = validate_applicant(form)
        self._check_unique_email(form.email, errors)
        if errors:
            raise ValidationError(errors)

        try:
            applicant = self.applicants.create(form.column_values(APPLICANT_COLUMNS))
            applicant_id = applicant.applicant_id

            address_values = form.column_values(ADDRESS_COLUMNS)
            address_values["same_as_pbirth"] = form.same_as_pbirth
            self.addresses.create({"applicant_id": applicant_id, **address_values})

            self.parents.create({"applicant_id": applicant_id, **form.column_values(PARENTS_COLUMNS)})

            if form.has_spouse:
                self.spouses.create({"applicant_id": applicant_id, **form.column_values(SPOUSE_COLUMNS)})

            for child in form.named_children():
                self.children.create({"applicant_id": applicant_id, **child.column_values()})

            employment_type = resolve_employment_type(form)
            if employment_type:
                self.employment.create({
                    "applicant_id": applicant_id,
                    "employment_type": employment_type.value,
                    **form.column_values(EMPLOYMENT_COLUMNS),
                })

            self.db.commit()
        except Exception as e:
            raise self._fail("Create applicant", e) from e

        logger.info(f"Created applicant {applicant_id} ({form.fname} {form.lname})")
        return applicant_id

    def update_applicant(self, applicant_id: Any, form: ApplicantForm) -> None:
        """
        UPDATE each table WHERE applicant_id matches, writing only submitted columns.
        Dependent rows that do not exist are left absent; spouse and employment
        are only touched when their trigger fields are filled in. A submitted
        children list replaces the applicant's children.
        """
        errors = []
        try:
            applicant_id = parse_applicant_id(applicant_id, "Applicant ID is required for update")
        except ValidationError as e:
            errors.extend(e.errors)
        errors.extend(validate_applicant(form, partial=True))
        if errors:
            raise ValidationError(errors)

        self._ensure_exists(applicant_id)
        where = {"applicant_id": applicant_id}

        try:
            self.applicants.update(form.column_values(APPLICANT_COLUMNS, submitted_only=True), where)

            address_values = form.column_values(ADDRESS_COLUMNS, submitted_only=True)
            if form.is_submitted("same_as_pbirth"):
                address_values["same_as_pbirth"] = form.same_as_pbirth
            self.addresses.update(address_values, where)

            self.parents.update(form.column_values(PARENTS_COLUMNS, submitted_only=True), where)

            if form.has_spouse:
                self.spouses.update(form.column_values(SPOUSE_COLUMNS, submitted_only=True), where)

            employment_type = resolve_employment_type(form)
            if employment_type:
                self.employment.update({
                    "employment_type": employment_type.value,
                    **form.column_values(EMPLOYMENT_COLUMNS, submitted_only=True),
                }, where)

            if form.is_submitted("children"):
                self.children.delete(where)
                for child in form.named_children():
                    self.children.create({"applicant_id": applicant_id, **child.column_values()})

            self.db.commit()
        except Exception as e:
            raise self._fail(f"Update applicant {applicant_id}", e) from e

        logger.info(f"Updated applicant {applicant_id}")

    def delete_applicant(self, applicant_id: Any) -> None:
        """Delete the applicant and every dependent row in one transaction"""
        applicant_id = parse_applicant_id(applicant_id, "ID is required for deletion")
        self._ensure_exists(applicant_id)
        where = {"applicant_id": applicant_id}

        try:
            # dependents first so foreign keys never point at a missing applicant
            for repository in (self.children, self.employment, self.spouses, self.parents, self.addresses):
                repository.delete(where)
            self.applicants.delete(where)
            self.db.commit()
        except Exception as e:
            raise self._fail(f"Delete applicant {applicant_id}", e) from e

        logger.info(f"Deleted applicant {applicant_id}")

    def create_summary(self, form: QuickEntryForm) -> int:
        """Insert an applicant row from the table page's quick-entry fields"""
        errors = validate_quick_entry(form)
        self._check_unique_email(form.email, errors)
        if errors:
            raise ValidationError(errors)

        try:
            applicant = self.applicants.create(form.column_values())
            applicant_id = applicant.applicant_id
            self.db.commit()
        except Exception as e:
            raise self._fail("Create record", e) from e

        logger.info(f"Created applicant {applicant_id} from quick entry")
        return applicant_id

    def update_summary(self, form: QuickEntryForm) -> None:
        errors = validate_quick_entry(form, require_id=True)
        if errors:
            raise ValidationError(errors)

        applicant_id = parse_applicant_id(form.id, "ID is required for update")
        self._ensure_exists(applicant_id)

        try:
            self.applicants.update(form.column_values(), {"applicant_id": applicant_id})
            self.db.commit()
        except Exception as e:
            raise self._fail(f"Update record {applicant_id}", e) from e

        logger.info(f"Updated applicant {applicant_id} from quick entry")

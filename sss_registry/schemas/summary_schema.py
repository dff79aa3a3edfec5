from pydantic import BaseModel, model_validator
from typing import Any, Optional

# quick-entry field -> applicants column
SUMMARY_COLUMNS = {
    "first": "fname",
    "last": "lname",
    "email": "email",
    "phone": "cphone",
    "location": "nation",
    "hobby": "religion",
}


class QuickEntryForm(BaseModel):
    """Fields posted by the table page's add/edit modal"""
    id: str = ""
    first: str = ""
    last: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    hobby: str = ""

    class Config:
        str_strip_whitespace = True
        coerce_numbers_to_str = True

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data

    def column_values(self):
        return {column: getattr(self, field) for field, column in SUMMARY_COLUMNS.items()}


class ApplicantSummary(BaseModel):
    id: int
    first: Optional[str]
    last: Optional[str]
    email: Optional[str]
    phone: Optional[str]
    location: Optional[str]
    hobby: Optional[str]

    class Config:
        from_attributes = True

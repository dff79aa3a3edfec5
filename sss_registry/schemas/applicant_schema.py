"""Request model for the applicant intake form"""
from pydantic import BaseModel, Field, field_validator, model_validator
from typing import Any, Dict, Iterable, List, Mapping
import re

from sss_registry.services.normalizer import DataNormalizer

APPLICANT_COLUMNS = (
    "ssnum", "lname", "fname", "mname", "sfx", "dbirth", "sex", "cvstatus",
    "cvstatus_other", "taxid", "nation", "religion", "pbirth", "cphone",
    "email", "tphone", "printed_name", "cert_date",
)
ADDRESS_COLUMNS = tuple(f"address_{n}" for n in range(1, 10))
PARENTS_COLUMNS = (
    "lfather", "ffather", "mfather", "sfxfather", "fbirth",
    "lmother", "fmother", "mmother", "sfxmother", "mbirth",
)
SPOUSE_COLUMNS = ("lspouse", "fspouse", "mspouse", "sfxspouse", "sbirth")
EMPLOYMENT_COLUMNS = (
    "profession", "ystart", "mearning", "faddress", "ofw_monthly_earnings",
    "spouse_ssnum", "ffprogram", "ffp",
)
DATE_COLUMNS = {"dbirth", "cert_date", "fbirth", "mbirth", "sbirth"}

CHILD_KEY = re.compile(r"^children\[(\d+)\]\[(\w+)\]$")


class ChildEntry(BaseModel):
    lname: str = ""
    fname: str = ""
    mname: str = ""
    sfx: str = ""
    dbirth: str = ""

    class Config:
        str_strip_whitespace = True
        coerce_numbers_to_str = True

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data

    @property
    def has_name(self) -> bool:
        return bool(self.lname or self.fname)

    def column_values(self) -> Dict[str, Any]:
        return {
            "lname": self.lname,
            "fname": self.fname,
            "mname": self.mname,
            "sfx": self.sfx,
            "dbirth": DataNormalizer.normalize_date(self.dbirth),
        }


class ApplicantForm(BaseModel):
    """
    Flat intake form submission.
    Attribute names are the column names; aliases are the form field names
    used by the browser form (address-1, printed-name, cert-date, spouse-ssnum).
    """
    # Personal information
    ssnum: str = ""
    lname: str = ""
    fname: str = ""
    mname: str = ""
    sfx: str = ""
    dbirth: str = ""
    sex: str = ""
    cvstatus: str = ""
    cvstatus_other: str = ""
    taxid: str = ""
    nation: str = ""
    religion: str = ""
    pbirth: str = ""
    cphone: str = ""
    email: str = ""
    tphone: str = ""
    printed_name: str = Field("", alias="printed-name")
    cert_date: str = Field("", alias="cert-date")

    # Address
    address_1: str = Field("", alias="address-1")
    address_2: str = Field("", alias="address-2")
    address_3: str = Field("", alias="address-3")
    address_4: str = Field("", alias="address-4")
    address_5: str = Field("", alias="address-5")
    address_6: str = Field("", alias="address-6")
    address_7: str = Field("", alias="address-7")
    address_8: str = Field("", alias="address-8")
    address_9: str = Field("", alias="address-9")
    same_as_pbirth: bool = False

    # Parents
    lfather: str = ""
    ffather: str = ""
    mfather: str = ""
    sfxfather: str = ""
    fbirth: str = ""
    lmother: str = ""
    fmother: str = ""
    mmother: str = ""
    sfxmother: str = ""
    mbirth: str = ""

    # Spouse
    lspouse: str = ""
    fspouse: str = ""
    mspouse: str = ""
    sfxspouse: str = ""
    sbirth: str = ""

    # Employment
    profession: str = ""
    ystart: str = ""
    mearning: str = ""
    faddress: str = ""
    ofw_monthly_earnings: str = ""
    spouse_ssnum: str = Field("", alias="spouse-ssnum")
    ffprogram: str = ""
    ffp: str = ""

    children: List[ChildEntry] = []

    class Config:
        populate_by_name = True
        str_strip_whitespace = True
        coerce_numbers_to_str = True

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data

    @field_validator("same_as_pbirth", mode="before")
    @classmethod
    def checkbox(cls, value: Any) -> Any:
        # an HTML checkbox is sent as "on" when ticked and omitted otherwise
        if isinstance(value, str):
            return value.strip().lower() not in ("", "0", "false", "off", "no")
        return value

    @classmethod
    def from_submission(cls, data: Mapping[str, Any], html_form: bool = False) -> "ApplicantForm":
        """
        Build a form from a JSON body or url-encoded form, collecting children[N][field] keys.
        With html_form=True an address section without the same_as_pbirth checkbox
        counts as an unticked checkbox.
        """
        fields: Dict[str, Any] = {}
        children: Dict[int, Dict[str, Any]] = {}

        for key, value in data.items():
            match = CHILD_KEY.match(key)
            if match:
                children.setdefault(int(match.group(1)), {})[match.group(2)] = value
            else:
                fields[key] = value

        if children and "children" not in fields:
            fields["children"] = [children[index] for index in sorted(children)]

        if html_form and "same_as_pbirth" not in fields:
            address_keys = {column.replace("_", "-") for column in ADDRESS_COLUMNS} | set(ADDRESS_COLUMNS)
            if address_keys & fields.keys():
                fields["same_as_pbirth"] = False

        return cls.model_validate(fields)

    def is_submitted(self, column: str) -> bool:
        return column in self.model_fields_set

    def column_values(self, columns: Iterable[str], submitted_only: bool = False) -> Dict[str, Any]:
        """Map form attributes to column values; dates become date objects or None"""
        values = {}
        for column in columns:
            if submitted_only and not self.is_submitted(column):
                continue
            value = getattr(self, column)
            if column in DATE_COLUMNS:
                value = DataNormalizer.normalize_date(value)
            values[column] = value
        return values

    def named_children(self) -> List[ChildEntry]:
        """Child entries worth persisting; rows without a last or first name are skipped"""
        return [child for child in self.children if child.has_name]

    @property
    def has_spouse(self) -> bool:
        return bool(self.lspouse or self.fspouse)

'''Tests for form value normalization and the request field mapping.'''

from __future__ import annotations

from datetime import date

import pytest

from sss_registry.schemas import ApplicantForm
from sss_registry.schemas.applicant_schema import ADDRESS_COLUMNS, APPLICANT_COLUMNS
from sss_registry.services.normalizer import DataNormalizer


@pytest.mark.parametrize(
    "value,expected",
    [
        ("1990-01-01", date(1990, 1, 1)),
        ("01/15/1990", date(1990, 1, 15)),
        ("March 5, 2001", date(2001, 3, 5)),
        ("", None),
        (None, None),
        ("   ", None),
        ("garbage", None),
    ],
)
def test_normalize_date(value, expected):
    assert DataNormalizer.normalize_date(value) == expected


@pytest.mark.parametrize(
    "value,expected",
    [
        ("0917-123-4567", "09171234567"),
        ("+63 (917) 123 4567", "+639171234567"),
        ("  09171234567 ", "09171234567"),
        (None, ""),
    ],
)
def test_normalize_phone(value, expected):
    assert DataNormalizer.normalize_phone(value) == expected


def test_form_aliases_map_to_columns():
    form = ApplicantForm.from_submission({
        "address-6": " Manila ",
        "printed-name": "JOHN DOE",
        "cert-date": "2024-03-15",
        "spouse-ssnum": "3-4567890-1",
    })
    assert form.address_6 == "Manila"
    assert form.spouse_ssnum == "3-4567890-1"

    values = form.column_values(APPLICANT_COLUMNS)
    assert values["printed_name"] == "JOHN DOE"
    assert values["cert_date"] == date(2024, 3, 15)
    assert values["dbirth"] is None


def test_column_values_can_skip_unsubmitted_fields():
    form = ApplicantForm.from_submission({"address_6": "Quezon City", "address-7": "NCR"})
    assert form.column_values(ADDRESS_COLUMNS, submitted_only=True) == {
        "address_6": "Quezon City",
        "address_7": "NCR",
    }


def test_bracketed_child_keys_become_children():
    form = ApplicantForm.from_submission({
        "children[1][fname]": "BEN",
        "children[0][fname]": "ANNA",
        "children[0][lname]": "DOE",
        "children[1][dbirth]": "2018-07-12",
    })
    assert [child.fname for child in form.children] == ["ANNA", "BEN"]
    assert form.children[1].column_values()["dbirth"] == date(2018, 7, 12)


def test_nameless_children_are_skipped():
    form = ApplicantForm.from_submission({
        "children": [{"lname": "", "fname": "", "dbirth": "2015-01-01"}, {"fname": "ANNA"}],
    })
    assert [child.fname for child in form.named_children()] == ["ANNA"]


@pytest.mark.parametrize("value,expected", [("on", True), ("1", True), ("", False), ("off", False)])
def test_same_as_pbirth_checkbox(value, expected):
    assert ApplicantForm.from_submission({"same_as_pbirth": value}).same_as_pbirth is expected


def test_missing_checkbox_on_html_address_post_reads_as_unticked():
    form = ApplicantForm.from_submission({"address-7": "Cavite"}, html_form=True)
    assert form.is_submitted("same_as_pbirth")
    assert form.same_as_pbirth is False


def test_missing_checkbox_on_json_post_is_not_submitted():
    form = ApplicantForm.from_submission({"address-7": "Cavite"})
    assert not form.is_submitted("same_as_pbirth")

    form = ApplicantForm.from_submission({"religion": "Islam"}, html_form=True)
    assert not form.is_submitted("same_as_pbirth")


def test_null_values_are_treated_as_absent():
    form = ApplicantForm.from_submission({"mname": None, "ssnum": 123456789})
    assert form.mname == ""
    assert form.ssnum == "123456789"
    assert not form.is_submitted("mname")

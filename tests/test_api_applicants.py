'''Tests for the intake form endpoint and the page routes.'''

from __future__ import annotations

import pytest

from sss_registry.services.validator import PHONE_FORMAT_ERROR
from tests.sample_data import BASIC_FORM, form_with, full_form

BROWSER_HEADERS = {"Accept": "text/html,application/xhtml+xml"}


def read_single(client, applicant_id: int) -> dict:
    response = client.get("/api/crud", params={"action": "read_single", "id": applicant_id})
    assert response.status_code == 200
    return response.json()


@pytest.mark.web
def test_insert_json_submission(client):
    response = client.post("/api/applicants?action=insert", json=full_form())

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Record created successfully"

    record = read_single(client, body["id"])
    assert record["applicant"]["printed_name"] == "JOHN S. DOE"
    assert record["applicant"]["cert_date"] == "2024-03-15"
    assert record["spouse"]["sbirth"] == "1991-05-20"
    assert len(record["children"]) == 2
    assert record["employment"]["profession"] == "Carpenter"


@pytest.mark.web
def test_action_defaults_to_insert(client):
    response = client.post("/api/applicants", json=BASIC_FORM)
    assert response.json()["success"] is True


@pytest.mark.web
def test_insert_form_encoded_submission_with_children(client):
    data = form_with(**{
        "children[0][lname]": "DOE",
        "children[0][fname]": "ANNA",
        "children[0][dbirth]": "2015-03-01",
        "children[1][lname]": "",
        "children[1][fname]": "",
        "same_as_pbirth": "on",
    })

    response = client.post("/api/applicants?action=insert", data=data)

    assert response.status_code == 200
    record = read_single(client, response.json()["id"])
    assert [child["fname"] for child in record["children"]] == ["ANNA"]
    assert record["children"][0]["dbirth"] == "2015-03-01"
    assert record["address"]["same_as_pbirth"] is True


@pytest.mark.web
def test_invalid_json_submission_lists_every_error(client):
    response = client.post("/api/applicants?action=insert", json=form_with(cphone="12345", email="bad"))

    assert response.status_code == 400
    assert response.json() == {
        "success": False,
        "message": f"Invalid email format, {PHONE_FORMAT_ERROR}",
    }
    assert client.get("/api/crud?action=read").json() == []


@pytest.mark.web
def test_malformed_children_is_rejected(client):
    response = client.post("/api/applicants?action=insert", json=form_with(children="ANNA"))
    assert response.status_code == 400
    assert response.json()["success"] is False
    assert "children" in response.json()["message"]


@pytest.mark.web
def test_browser_post_success_redirects(client):
    response = client.post("/api/applicants?action=insert", data=BASIC_FORM, headers=BROWSER_HEADERS)

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "sessionStorage.setItem('formSuccess', 'true')" in response.text
    assert 'window.location.href="/"' in response.text


@pytest.mark.web
def test_browser_post_failure_alerts_and_goes_back(client):
    response = client.post(
        "/api/applicants?action=insert",
        data=form_with(lname="", fname=""),
        headers=BROWSER_HEADERS,
    )

    assert response.status_code == 400
    assert 'alert("Last Name is required\\nFirst Name is required")' in response.text
    assert "window.history.back()" in response.text


@pytest.mark.web
def test_update_submission(client):
    applicant_id = client.post("/api/applicants?action=insert", json=full_form()).json()["id"]

    response = client.post(
        "/api/applicants?action=update",
        json={"applicant_id": applicant_id, "religion": "Aglipayan", "address-7": "Cavite"},
    )

    assert response.json() == {"success": True, "message": "Record updated successfully"}
    record = read_single(client, applicant_id)
    assert record["applicant"]["religion"] == "Aglipayan"
    assert record["applicant"]["fname"] == "JOHN"
    assert record["address"]["address_7"] == "Cavite"
    assert record["spouse"]["fspouse"] == "JANE"


@pytest.mark.web
def test_update_errors(client):
    response = client.post("/api/applicants?action=update", json={"religion": "Aglipayan"})
    assert response.status_code == 400
    assert response.json()["message"] == "Applicant ID is required for update"

    response = client.post("/api/applicants?action=update", json={"applicant_id": 9, "religion": "Aglipayan"})
    assert response.status_code == 404


@pytest.mark.web
def test_unknown_action(client):
    response = client.post("/api/applicants?action=upsert", json=BASIC_FORM)
    assert response.status_code == 400
    assert response.json()["message"] == "Invalid action"


@pytest.mark.web
def test_root_page_and_health(client):
    page = client.get("/")
    assert page.status_code == 200
    assert "/api/crud" in page.text

    assert client.get("/health").json() == {"status": "healthy"}


@pytest.mark.web
def test_browser_failure_message_cannot_close_the_script_tag(client):
    payload = "</script><script>alert(document.domain)</script>"

    response = client.post(
        "/api/applicants?action=update",
        data={"applicant_id": payload, "religion": "Aglipayan"},
        headers=BROWSER_HEADERS,
    )

    assert response.status_code == 400
    assert response.text.count("<script>") == 1
    assert response.text.count("</script>") == 1
    assert "\\u003c/script\\u003e\\u003cscript\\u003ealert(document.domain)" in response.text


@pytest.mark.web
def test_browser_address_update_clears_unticked_checkbox(client):
    applicant_id = client.post("/api/applicants?action=insert", json=full_form()).json()["id"]

    client.post(
        "/api/applicants?action=update",
        json={"applicant_id": applicant_id, "address-7": "Cavite"},
    )
    assert read_single(client, applicant_id)["address"]["same_as_pbirth"] is True

    response = client.post(
        "/api/applicants?action=update",
        data={"applicant_id": str(applicant_id), "address-7": "Laguna"},
        headers=BROWSER_HEADERS,
    )
    assert "formSuccess" in response.text

    address = read_single(client, applicant_id)["address"]
    assert address["address_7"] == "Laguna"
    assert address["same_as_pbirth"] is False

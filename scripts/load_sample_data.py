"""Script to load sample applicants into a running registry server"""
import requests
import json
import sys

API_BASE_URL = "http://localhost:8000/api"
SAMPLE_FILE = "sample_data/applicants.json"


def submit_applicant(record: dict):
    """Submit one intake form record and return the new applicant id"""
    name = f"{record.get('fname', '')} {record.get('lname', '')}".strip()
    print(f"\nSubmitting {name}...")

    response = requests.post(f"{API_BASE_URL}/applicants?action=insert", json=record)
    result = response.json()

    if response.status_code == 200 and result.get("success"):
        print(f"✓ Created applicant {result['id']}")
        return result["id"]

    print(f"✗ Error: {response.status_code}")
    print(f"  {result.get('message', response.text)}")
    return None


def main(sample_file: str = SAMPLE_FILE):
    print("=" * 60)
    print("SSS ONLINE FORM REGISTRY - SAMPLE DATA LOADER")
    print("=" * 60)

    with open(sample_file, "r") as f:
        data = json.load(f)

    applicant_ids = []
    for record in data["records"]:
        applicant_id = submit_applicant(record)
        if applicant_id:
            applicant_ids.append(applicant_id)

    print("\n" + "=" * 60)
    print("REGISTERED APPLICANTS")
    print("=" * 60)

    response = requests.get(f"{API_BASE_URL}/crud", params={"action": "read"})
    if response.status_code == 200:
        for row in response.json():
            print(f"📋 #{row['id']} {row['first']} {row['last']} <{row['email']}> {row['phone']}")

    for applicant_id in applicant_ids:
        response = requests.get(f"{API_BASE_URL}/crud", params={"action": "read_single", "id": applicant_id})
        if response.status_code == 200:
            aggregate = response.json()
            employment = aggregate["employment"].get("employment_type", "none")
            print(f"   #{applicant_id}: {len(aggregate['children'])} children, employment: {employment}")

    print("=" * 60)
    print(f"LOADED {len(applicant_ids)} OF {len(data['records'])} APPLICANTS")
    print("=" * 60)


if __name__ == "__main__":
    main(*sys.argv[1:])

"""
Tests for the company directory.
"""

API = "/api/v1"


async def test_directory_groups_jobs_by_company(client, jobs):
    response = await client.get(f"{API}/companies")

    assert response.status_code == 200
    companies = {company["name"]: company for company in response.json()}
    assert set(companies) == {"Acme", "Brandly", "Numbers Co"}
    assert sum(company["job_count"] for company in companies.values()) == len(jobs)

    acme = companies["Acme"]
    assert acme["job_count"] == 2
    assert set(acme["locations"]) == {"Nairobi, Kenya", "Remote"}
    assert acme["location_summary"].endswith(" +1 more")

    assert companies["Numbers Co"]["location_summary"] == "Nairobi"


async def test_search_by_name_or_location(client, jobs):
    by_name = await client.get(f"{API}/companies", params={"search": "numbers"})
    assert [company["name"] for company in by_name.json()] == ["Numbers Co"]

    by_location = await client.get(f"{API}/companies", params={"search": "kisumu"})
    assert [company["name"] for company in by_location.json()] == ["Brandly"]


async def test_company_jobs_via_listing(client, jobs):
    response = await client.get(f"{API}/jobs", params={"company": "Acme"})

    assert [item["title"] for item in response.json()["items"]] == [
        "Backend Engineer",
        "Frontend Developer",
    ]


async def test_empty_board(client):
    response = await client.get(f"{API}/companies")
    assert response.json() == []

"""
Experiences, educations, skills and certifications over HTTP
"""
from datetime import date, timedelta

import pytest


def experience_payload(**overrides):
    payload = {
        "companyName": "Acme Corp",
        "jobTitle": "Software Engineer",
        "location": "Dublin",
        "startDate": "2019-02-01",
        "endDate": "2021-06-30",
        "current": False,
        "achievements": ["Cut latency by 40%", "Led migration"],
        "technologies": ["Python", "PostgreSQL"],
    }
    payload.update(overrides)
    return payload


def certification_payload(**overrides):
    payload = {
        "name": "AWS Solutions Architect",
        "issuingOrganization": "Amazon Web Services",
        "dateObtained": "2022-01-10",
        "expirationDate": "2099-01-10",
    }
    payload.update(overrides)
    return payload


# Experiences
@pytest.mark.asyncio
async def test_create_experience(client, admin_headers, profile):
    response = await client.post(
        f"/profiles/{profile['id']}/experiences", json=experience_payload(), headers=admin_headers
    )

    assert response.status_code == 201
    body = response.json()
    assert body["profileId"] == profile["id"]
    assert body["displayOrder"] == 1
    assert body["achievements"] == ["Cut latency by 40%", "Led migration"]
    assert body["technologies"] == ["Python", "PostgreSQL"]
    assert body["duration"] == "2 years, 5 months"
    assert body["formattedDateRange"] == "Feb 2019 - Jun 2021"


@pytest.mark.asyncio
@pytest.mark.parametrize("extra", [
    {},
    {"current": True},
    {"endDate": "2021-01-01"},
    {"achievements": ["Shipped v1"]},
    {"technologies": ["Python"]},
])
async def test_create_experience_with_optional_lists_omitted(client, admin_headers, profile, extra):
    payload = {"companyName": "Acme", "jobTitle": "Engineer", "startDate": "2020-01-01", **extra}

    response = await client.post(
        f"/profiles/{profile['id']}/experiences", json=payload, headers=admin_headers
    )

    assert response.status_code == 201, response.text
    body = response.json()
    assert body["achievements"] == extra.get("achievements", [])
    assert body["technologies"] == extra.get("technologies", [])


@pytest.mark.asyncio
async def test_display_order_is_max_plus_one(client, admin_headers, profile):
    url = f"/profiles/{profile['id']}/experiences"
    await client.post(url, json=experience_payload(displayOrder=5), headers=admin_headers)
    response = await client.post(url, json=experience_payload(), headers=admin_headers)

    assert response.json()["displayOrder"] == 6


@pytest.mark.asyncio
async def test_current_experience_drops_end_date(client, admin_headers, profile):
    url = f"/profiles/{profile['id']}/experiences"
    response = await client.post(
        url, json=experience_payload(current=True, endDate="2021-06-30"), headers=admin_headers
    )

    assert response.status_code == 201
    assert response.json()["endDate"] is None

    current = await client.get(f"{url}/current")
    assert [e["id"] for e in current.json()] == [response.json()["id"]]


@pytest.mark.asyncio
async def test_experience_end_before_start_is_rejected(client, admin_headers, profile):
    response = await client.post(
        f"/profiles/{profile['id']}/experiences",
        json=experience_payload(startDate="2021-01-01", endDate="2020-01-01"),
        headers=admin_headers,
    )
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_experience_future_start_is_rejected(client, admin_headers, profile):
    future = (date.today() + timedelta(days=30)).isoformat()
    response = await client.post(
        f"/profiles/{profile['id']}/experiences",
        json=experience_payload(startDate=future, endDate=None),
        headers=admin_headers,
    )
    assert response.status_code == 400
    assert "startDate" in response.json()["validationErrors"]


@pytest.mark.asyncio
async def test_update_experience_revalidates_dates(client, admin_headers, profile):
    url = f"/profiles/{profile['id']}/experiences"
    created = (await client.post(url, json=experience_payload(), headers=admin_headers)).json()

    response = await client.put(
        f"{url}/{created['id']}", json={"endDate": "2018-01-01"}, headers=admin_headers
    )
    assert response.status_code == 400
    assert "endDate" in response.json()["validationErrors"]

    unchanged = await client.get(f"{url}/{created['id']}")
    assert unchanged.json()["endDate"] == "2021-06-30"


@pytest.mark.asyncio
async def test_update_experience_lists(client, admin_headers, profile):
    url = f"/profiles/{profile['id']}/experiences"
    created = (await client.post(url, json=experience_payload(), headers=admin_headers)).json()

    response = await client.put(
        f"{url}/{created['id']}",
        json={"technologies": ["Go"], "jobTitle": "Senior Engineer"},
        headers=admin_headers,
    )

    assert response.status_code == 200
    body = response.json()
    assert body["technologies"] == ["Go"]
    assert body["achievements"] == created["achievements"]
    assert body["jobTitle"] == "Senior Engineer"


@pytest.mark.asyncio
async def test_experience_of_other_profile_is_not_found(client, admin_headers, profile):
    other = await client.post("/profiles", json={
        "firstName": "Other", "lastName": "Person", "email": "other@example.com", "title": "PM",
    }, headers=admin_headers)
    url = f"/profiles/{profile['id']}/experiences"
    created = (await client.post(url, json=experience_payload(), headers=admin_headers)).json()

    response = await client.get(f"/profiles/{other.json()['id']}/experiences/{created['id']}")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_experiences_listed_newest_first(client, admin_headers, profile):
    url = f"/profiles/{profile['id']}/experiences"
    await client.post(url, json=experience_payload(startDate="2015-01-01", endDate="2016-01-01"),
                      headers=admin_headers)
    await client.post(url, json=experience_payload(startDate="2018-01-01", endDate="2019-01-01"),
                      headers=admin_headers)

    response = await client.get(url)
    assert [e["startDate"] for e in response.json()] == ["2018-01-01", "2015-01-01"]


@pytest.mark.asyncio
async def test_delete_experience(client, admin_headers, profile):
    url = f"/profiles/{profile['id']}/experiences"
    created = (await client.post(url, json=experience_payload(), headers=admin_headers)).json()

    assert (await client.delete(f"{url}/{created['id']}", headers=admin_headers)).status_code == 204
    assert (await client.get(f"{url}/{created['id']}")).status_code == 404


@pytest.mark.asyncio
async def test_create_for_missing_profile(client, admin_headers):
    response = await client.post(
        "/profiles/999/experiences", json=experience_payload(), headers=admin_headers
    )
    assert response.status_code == 404


# Reordering
@pytest.mark.asyncio
async def test_reorder_experiences(client, admin_headers, profile):
    url = f"/profiles/{profile['id']}/experiences"
    ids = [
        (await client.post(url, json=experience_payload(), headers=admin_headers)).json()["id"]
        for _ in range(3)
    ]

    response = await client.put(
        f"{url}/reorder", json={"orderedIds": list(reversed(ids))}, headers=admin_headers
    )
    assert response.status_code == 204

    orders = {e["id"]: e["displayOrder"] for e in (await client.get(url)).json()}
    assert orders == {ids[2]: 1, ids[1]: 2, ids[0]: 3}


@pytest.mark.asyncio
async def test_reorder_with_foreign_id_changes_nothing(client, admin_headers, profile):
    url = f"/profiles/{profile['id']}/skills"
    first = (await client.post(url, json={"name": "Python", "category": "PROGRAMMING_LANGUAGE"},
                               headers=admin_headers)).json()
    second = (await client.post(url, json={"name": "SQL", "category": "DATABASE"},
                                headers=admin_headers)).json()

    response = await client.put(
        f"{url}/reorder", json={"orderedIds": [second["id"], first["id"], 12345]},
        headers=admin_headers,
    )
    assert response.status_code == 404

    orders = {s["id"]: s["displayOrder"] for s in (await client.get(url)).json()}
    assert orders == {first["id"]: 1, second["id"]: 2}


@pytest.mark.asyncio
async def test_reorder_with_duplicate_ids(client, admin_headers, profile):
    url = f"/profiles/{profile['id']}/educations"
    created = (await client.post(url, json={"institutionName": "UCD", "degree": "MSc"},
                                 headers=admin_headers)).json()

    response = await client.put(
        f"{url}/reorder", json={"orderedIds": [created["id"], created["id"]]},
        headers=admin_headers,
    )
    assert response.status_code == 400


# Educations
@pytest.mark.asyncio
async def test_educations_ongoing_first(client, admin_headers, profile):
    url = f"/profiles/{profile['id']}/educations"
    await client.post(url, json={
        "institutionName": "UCD", "degree": "BSc",
        "startDate": "2010-09-01", "graduationDate": "2014-06-01", "grade": "2:1",
    }, headers=admin_headers)
    await client.post(url, json={
        "institutionName": "Open University", "degree": "MSc", "startDate": "2022-09-01",
    }, headers=admin_headers)

    response = await client.get(url)
    assert [e["institutionName"] for e in response.json()] == ["Open University", "UCD"]


@pytest.mark.asyncio
async def test_education_graduation_before_start(client, admin_headers, profile):
    response = await client.post(f"/profiles/{profile['id']}/educations", json={
        "institutionName": "UCD", "degree": "BSc",
        "startDate": "2014-09-01", "graduationDate": "2010-06-01",
    }, headers=admin_headers)
    assert response.status_code == 400


# Skills
@pytest.mark.asyncio
async def test_skill_display_names_and_filters(client, admin_headers, profile):
    url = f"/profiles/{profile['id']}/skills"
    created = await client.post(url, json={
        "name": "Python", "category": "PROGRAMMING_LANGUAGE",
        "proficiencyLevel": "EXPERT", "yearsOfExperience": 8, "primary": True,
    }, headers=admin_headers)
    await client.post(url, json={"name": "Scrum", "category": "METHODOLOGY"}, headers=admin_headers)

    body = created.json()
    assert body["categoryDisplayName"] == "Programming Language"
    assert body["proficiencyDisplayName"] == "Expert"

    by_category = await client.get(url, params={"category": "METHODOLOGY"})
    assert [s["name"] for s in by_category.json()] == ["Scrum"]

    primary = await client.get(f"{url}/primary")
    assert [s["name"] for s in primary.json()] == ["Python"]


@pytest.mark.asyncio
async def test_skill_years_out_of_range(client, admin_headers, profile):
    response = await client.post(f"/profiles/{profile['id']}/skills", json={
        "name": "COBOL", "category": "PROGRAMMING_LANGUAGE", "yearsOfExperience": 51,
    }, headers=admin_headers)
    assert response.status_code == 400


# Certifications
@pytest.mark.asyncio
async def test_duplicate_certification(client, admin_headers, profile):
    url = f"/profiles/{profile['id']}/certifications"
    assert (await client.post(url, json=certification_payload(), headers=admin_headers)).status_code == 201

    duplicate = await client.post(url, json=certification_payload(), headers=admin_headers)
    assert duplicate.status_code == 409


@pytest.mark.asyncio
async def test_certification_expiry_queries(client, admin_headers, profile):
    url = f"/profiles/{profile['id']}/certifications"
    today = date.today()
    await client.post(url, json=certification_payload(
        name="Expired", expirationDate=(today - timedelta(days=1)).isoformat()
    ), headers=admin_headers)
    await client.post(url, json=certification_payload(
        name="Soon", expirationDate=(today + timedelta(days=30)).isoformat()
    ), headers=admin_headers)
    await client.post(url, json=certification_payload(
        name="Forever", expirationDate=None, doesNotExpire=True
    ), headers=admin_headers)

    expired = (await client.get(f"{url}/expired")).json()
    assert [c["name"] for c in expired] == ["Expired"]
    assert expired[0]["expired"] is True
    assert expired[0]["expiringSoon"] is False

    soon = (await client.get(f"{url}/expiring-soon")).json()
    assert [c["name"] for c in soon] == ["Soon"]
    assert soon[0]["expiringSoon"] is True
    assert soon[0]["expired"] is False


@pytest.mark.asyncio
async def test_certifications_by_organization(client, admin_headers, profile):
    url = f"/profiles/{profile['id']}/certifications"
    await client.post(url, json=certification_payload(), headers=admin_headers)
    await client.post(url, json=certification_payload(name="CKA", issuingOrganization="CNCF"),
                      headers=admin_headers)

    response = await client.get(f"{url}/organization/CNCF")
    assert [c["name"] for c in response.json()] == ["CKA"]


@pytest.mark.asyncio
async def test_certification_order_takes_plain_list(client, admin_headers, profile):
    url = f"/profiles/{profile['id']}/certifications"
    first = (await client.post(url, json=certification_payload(), headers=admin_headers)).json()
    second = (await client.post(url, json=certification_payload(name="CKA"), headers=admin_headers)).json()

    response = await client.put(f"{url}/order", json=[second["id"], first["id"]], headers=admin_headers)
    assert response.status_code == 204

    listed = (await client.get(url)).json()
    assert [c["id"] for c in listed] == [second["id"], first["id"]]


@pytest.mark.asyncio
async def test_delete_all_certifications(client, admin_headers, profile):
    url = f"/profiles/{profile['id']}/certifications"
    await client.post(url, json=certification_payload(), headers=admin_headers)
    await client.post(url, json=certification_payload(name="CKA"), headers=admin_headers)

    assert (await client.delete(url, headers=admin_headers)).status_code == 204
    assert (await client.get(url)).json() == []


@pytest.mark.asyncio
async def test_marking_certification_permanent_clears_expiration(client, admin_headers, profile):
    url = f"/profiles/{profile['id']}/certifications"
    created = (await client.post(url, json=certification_payload(), headers=admin_headers)).json()
    assert created["expirationDate"] == "2099-01-10"

    response = await client.put(
        f"{url}/{created['id']}", json={"doesNotExpire": True}, headers=admin_headers
    )

    assert response.status_code == 200
    body = response.json()
    assert body["doesNotExpire"] is True
    assert body["expirationDate"] is None

    fetched = (await client.get(f"{url}/{created['id']}")).json()
    assert fetched["expirationDate"] is None


@pytest.mark.asyncio
async def test_permanent_certification_ignores_expiration_on_create(client, admin_headers, profile):
    response = await client.post(
        f"/profiles/{profile['id']}/certifications",
        json=certification_payload(doesNotExpire=True),
        headers=admin_headers,
    )

    assert response.status_code == 201
    assert response.json()["expirationDate"] is None

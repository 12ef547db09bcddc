"""
Integration tests for /jobs and job technology links.
"""


class TestCreateJob:
    """POST /jobs"""

    def test_admin_can_create(self, client, seeded, admin_headers):
        response = client.post(
            "/jobs",
            json={"title": "New", "salary": 10, "equity": 0.2, "companyHandle": "c2"},
            headers=admin_headers,
        )

        assert response.status_code == 201
        job = response.json()["job"]
        assert job["id"] > 0
        assert job == {
            "id": job["id"],
            "title": "New",
            "salary": 10,
            "equity": 0.2,
            "companyHandle": "c2",
        }

    def test_non_admin(self, client, seeded, user_headers):
        response = client.post(
            "/jobs",
            json={"title": "New", "companyHandle": "c2"},
            headers=user_headers,
        )

        assert response.status_code == 400

    def test_unknown_company(self, client, seeded, admin_headers):
        response = client.post(
            "/jobs",
            json={"title": "New", "companyHandle": "nope"},
            headers=admin_headers,
        )

        assert response.status_code == 404

    def test_equity_out_of_range(self, client, seeded, admin_headers):
        response = client.post(
            "/jobs",
            json={"title": "New", "equity": 1.5, "companyHandle": "c2"},
            headers=admin_headers,
        )

        assert response.status_code == 400
        assert isinstance(response.json()["error"]["message"], list)


class TestListJobs:
    """GET /jobs"""

    def test_anonymous_list(self, client, seeded):
        response = client.get("/jobs")

        assert response.status_code == 200
        jobs = response.json()["jobs"]
        assert [j["title"] for j in jobs] == ["J1", "J2", "J3"]
        assert jobs[0]["companyHandle"] == "c1"

    def test_filters(self, client, seeded):
        response = client.get("/jobs", params={"minSalary": 2, "hasEquity": "true"})

        assert [j["title"] for j in response.json()["jobs"]] == ["J2"]

    def test_title_filter(self, client, seeded):
        response = client.get("/jobs", params={"title": "j1"})

        assert [j["title"] for j in response.json()["jobs"]] == ["J1"]


class TestGetJob:
    """GET /jobs/{job_id}"""

    def test_detail(self, client, seeded):
        job_id = seeded["job_ids"][0]
        response = client.get(f"/jobs/{job_id}")

        assert response.status_code == 200
        job = response.json()["job"]
        assert job["title"] == "J1"
        assert job["company"]["handle"] == "c1"
        assert job["company"]["numEmployees"] == 1
        assert job["technologies"] == []

    def test_not_found(self, client, seeded):
        assert client.get("/jobs/0").status_code == 404

    def test_non_numeric_id(self, client, seeded):
        assert client.get("/jobs/abc").status_code == 400


class TestUpdateJob:
    """PATCH /jobs/{job_id}"""

    def test_admin_can_patch(self, client, seeded, admin_headers):
        job_id = seeded["job_ids"][0]
        response = client.patch(f"/jobs/{job_id}", json={"title": "J1-new"}, headers=admin_headers)

        assert response.status_code == 200
        assert response.json()["job"] == {
            "id": job_id,
            "title": "J1-new",
            "salary": 1,
            "equity": 0.1,
            "companyHandle": "c1",
        }

    def test_move_to_other_company(self, client, seeded, admin_headers):
        job_id = seeded["job_ids"][0]
        response = client.patch(f"/jobs/{job_id}", json={"companyHandle": "c2"}, headers=admin_headers)

        assert response.json()["job"]["companyHandle"] == "c2"

    def test_id_cannot_change(self, client, seeded, admin_headers):
        job_id = seeded["job_ids"][0]
        response = client.patch(f"/jobs/{job_id}", json={"id": 999}, headers=admin_headers)

        assert response.status_code == 400

    def test_not_found(self, client, seeded, admin_headers):
        assert client.patch("/jobs/0", json={"title": "x"}, headers=admin_headers).status_code == 404


class TestDeleteJob:
    """DELETE /jobs/{job_id}"""

    def test_admin_can_delete(self, client, seeded, admin_headers):
        job_id = seeded["job_ids"][0]
        response = client.delete(f"/jobs/{job_id}", headers=admin_headers)

        assert response.json() == {"deleted": job_id}
        assert client.get(f"/jobs/{job_id}").status_code == 404

    def test_anonymous(self, client, seeded):
        assert client.delete(f"/jobs/{seeded['job_ids'][0]}").status_code == 401


class TestJobTechnologies:
    """POST/DELETE /jobs/{job_id}/technologies/{tech_id}"""

    def test_link_and_unlink(self, client, seeded, admin_headers):
        job_id = seeded["job_ids"][0]
        tech_id = seeded["tech_ids"][0]

        response = client.post(f"/jobs/{job_id}/technologies/{tech_id}", headers=admin_headers)
        assert response.json() == {"applied": tech_id}
        assert client.get(f"/jobs/{job_id}").json()["job"]["technologies"] == [tech_id]

        response = client.delete(f"/jobs/{job_id}/technologies/{tech_id}", headers=admin_headers)
        assert response.json() == {"removed": tech_id}
        assert client.get(f"/jobs/{job_id}").json()["job"]["technologies"] == []

    def test_duplicate_link(self, client, seeded, admin_headers):
        job_id = seeded["job_ids"][0]
        tech_id = seeded["tech_ids"][0]
        client.post(f"/jobs/{job_id}/technologies/{tech_id}", headers=admin_headers)

        response = client.post(f"/jobs/{job_id}/technologies/{tech_id}", headers=admin_headers)

        assert response.status_code == 400

    def test_unknown_technology(self, client, seeded, admin_headers):
        job_id = seeded["job_ids"][0]
        response = client.post(f"/jobs/{job_id}/technologies/0", headers=admin_headers)

        assert response.status_code == 404

    def test_non_admin(self, client, seeded, user_headers):
        job_id = seeded["job_ids"][0]
        tech_id = seeded["tech_ids"][0]
        response = client.post(f"/jobs/{job_id}/technologies/{tech_id}", headers=user_headers)

        assert response.status_code == 400

def test_add_then_lookup_record_without_section(client):
    response = client.post(
        "/api/admin/add",
        data={"class_name": "Math", "semester": "1", "section": "", "mentor_name": "A"},
    )
    assert response.status_code == 200

    assert client.get("/api/classes").json() == [{"class_name": "Math"}]
    assert client.get("/api/semesters", params={"class": "Math"}).json() == [{"semester": 1}]

    sections = client.get("/api/sections", params={"class": "Math", "semester": "1"})
    assert sections.status_code == 200
    assert sections.json() == []

    details = client.get("/api/details", params={"class": "Math", "semester": "1"})
    assert details.status_code == 200
    record = details.json()
    assert record["class_name"] == "Math"
    assert record["mentor_name"] == "A"
    assert record["section"] == ""


def test_full_admin_lifecycle(client):
    client.post("/api/admin/add", data={"class_name": "CS101", "semester": "3", "section": "A", "mentor_name": "Dr. A"})

    records = client.get("/api/admin/records").json()
    assert len(records) == 1
    record_id = records[0]["id"]

    client.put(f"/api/admin/update/{record_id}", json={"class_name": "CS101", "semester": 3, "section": "B", "mentor_name": "Dr. B"})
    assert client.get("/api/sections", params={"class": "CS101", "semester": "3"}).json() == [{"section": "B"}]
    details = client.get("/api/details", params={"class": "CS101", "semester": "3", "section": "B"}).json()
    assert details["mentor_name"] == "Dr. B"

    client.delete(f"/api/admin/delete/{record_id}")
    assert client.get("/api/admin/records").json() == []
    assert client.get("/api/details", params={"class": "CS101", "semester": "3", "section": "B"}).json() is None


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_startup_creates_upload_directories(make_client, settings, upload_root):
    with make_client(settings):
        assert (upload_root / "syllabus").is_dir()
        assert (upload_root / "mentors").is_dir()

def _school(client) -> dict:
    response = client.post("/api/schools", json={"username": "riverside", "password": "school-pass"})
    assert response.status_code == 201
    return response.json()


def _examination(school_id: int, **overrides) -> dict:
    body = {
        "school": school_id,
        "subject": "Math",
        "className": "3",
        "book": "NCERT",
        "code": "MATH-3",
        "chapters": ["Fractions", "Decimals"],
        "examinationType": "Mid term",
        "totalMark": 50,
        "duration": 90,
        "schoolName": "Riverside School",
        "questions": [
            {"questionType": "Multiple Choice", "question": "1/2+1/2=?", "mark": 1},
            {"section": {"name": "B"}, "question": "Explain decimals", "mark": 5},
        ],
    }
    body.update(overrides)
    return body


def test_create_examination_keeps_raw_payload(client) -> None:
    school = _school(client)
    body = _examination(school["id"], instructions="Answer all questions")

    response = client.post("/api/examinations", json=body)
    assert response.status_code == 201, response.text
    examination = response.json()
    assert examination["school"] == school["id"]
    assert examination["totalMark"] == 50
    assert examination["questions"] == body["questions"]
    assert examination["rawPayload"]["instructions"] == "Answer all questions"
    assert examination["rawPayload"]["schoolName"] == "Riverside School"

    assert client.get(f"/api/examinations/{examination['id']}").json() == examination


def test_create_examination_validation(client) -> None:
    school = _school(client)
    assert client.post("/api/examinations", json=_examination(999)).status_code == 404
    user = client.post("/api/auth/register", json={"username": "pupil", "password": "secret123"}).json()
    assert client.post("/api/examinations", json=_examination(user["id"])).status_code == 404
    assert client.post(
        "/api/examinations", json=_examination(school["id"], chapters=[])
    ).status_code == 422
    body = _examination(school["id"])
    del body["duration"]
    assert client.post("/api/examinations", json=body).status_code == 422


def test_list_and_delete_examinations(client) -> None:
    school = _school(client)
    other = client.post("/api/schools", json={"username": "hilltop", "password": "school-pass"}).json()
    first = client.post("/api/examinations", json=_examination(school["id"])).json()
    client.post("/api/examinations", json=_examination(other["id"], schoolName="Hilltop"))

    assert len(client.get("/api/examinations").json()) == 2
    mine = client.get("/api/examinations", params={"school": school["id"]}).json()
    assert [e["id"] for e in mine] == [first["id"]]

    assert client.delete(f"/api/examinations/{first['id']}").status_code == 200
    assert client.get(f"/api/examinations/{first['id']}").status_code == 404


def test_deleting_school_removes_its_examinations(client) -> None:
    school = _school(client)
    examination = client.post("/api/examinations", json=_examination(school["id"])).json()

    assert client.delete(f"/api/users/{school['id']}").status_code == 200
    assert client.get(f"/api/examinations/{examination['id']}").status_code == 404

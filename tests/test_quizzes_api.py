import copy


def _create(client, payload, **overrides):
    body = copy.deepcopy(payload)
    body.update(overrides)
    response = client.post("/api/quizzes", json=body)
    assert response.status_code == 201, response.text
    return response.json()


def test_create_quiz_applies_defaults(client, quiz_payload) -> None:
    quiz = _create(client, quiz_payload)
    assert quiz["id"] > 0
    assert quiz["title"] == "Quiz for Fractions"
    assert quiz["status"] is True
    assert quiz["className"] == "3"
    assert quiz["createdAt"]
    assert quiz["updatedAt"]
    question = quiz["questions"][0]
    assert question["questionType"] == "mcq"
    assert question["imageUrl"] is None
    assert question["options"] == [
        {"text": "1", "isCorrect": False},
        {"text": "2", "isCorrect": False},
    ]


def test_create_quiz_rejects_invalid_payload(client, quiz_payload) -> None:
    quiz_payload["questions"][0]["marks"] = 0
    response = client.post("/api/quizzes", json=quiz_payload)
    assert response.status_code == 400
    detail = response.json()["detail"]
    assert detail["error"] == "invalid_marks"
    assert detail["index"] == 0

    response = client.post("/api/quizzes", json={**quiz_payload, "questions": []})
    assert response.status_code == 400
    assert response.json()["detail"]["error"] == "empty_question_set"

    quiz_payload["questions"][0]["marks"] = "1e400"
    response = client.post("/api/quizzes", json=quiz_payload)
    assert response.status_code == 400
    assert response.json()["detail"]["error"] == "invalid_marks"

    # Nothing was written
    assert client.get("/api/quizzes").json()["total"] == 0


def test_create_quiz_missing_field(client, quiz_payload) -> None:
    del quiz_payload["className"]
    response = client.post("/api/quizzes", json=quiz_payload)
    assert response.status_code == 400
    assert response.json()["detail"]["field"] == "className"


def test_get_quiz(client, quiz_payload) -> None:
    created = _create(client, quiz_payload)
    response = client.get(f"/api/quizzes/{created['id']}")
    assert response.status_code == 200
    assert response.json() == created

    assert client.get("/api/quizzes/9999").status_code == 404


def test_list_quizzes_filters_and_search(client, quiz_payload) -> None:
    _create(client, quiz_payload)
    _create(client, quiz_payload, chapter="Decimals")
    _create(client, quiz_payload, subject="Science", chapter="Plants", title="Plant parts")

    listing = client.get("/api/quizzes").json()
    assert listing["total"] == 3
    assert listing["page"] == 1
    assert listing["pageSize"] == 10

    math = client.get("/api/quizzes", params={"subject": "Math"}).json()
    assert math["total"] == 2

    decimals = client.get(
        "/api/quizzes", params={"className": "3", "chapter": "Decimals"}
    ).json()
    assert [q["title"] for q in decimals["quizzes"]] == ["Quiz for Decimals"]

    search = client.get("/api/quizzes", params={"search": "plant"}).json()
    assert [q["title"] for q in search["quizzes"]] == ["Plant parts"]

    page = client.get("/api/quizzes", params={"page": 2, "pageSize": 2}).json()
    assert page["total"] == 3
    assert len(page["quizzes"]) == 1


def test_list_quizzes_by_status(client, quiz_payload) -> None:
    active = _create(client, quiz_payload)
    _create(client, quiz_payload, status=False)

    listing = client.get("/api/quizzes", params={"status": "true"}).json()
    assert [q["id"] for q in listing["quizzes"]] == [active["id"]]


def test_replace_quiz_replaces_all_questions(client, quiz_payload) -> None:
    created = _create(client, quiz_payload)
    replacement = copy.deepcopy(quiz_payload)
    replacement["title"] = "Revised"
    replacement["questions"] = [
        {"questionType": "essay", "question": "Explain halves.", "marks": 3},
        {
            "questionType": "image",
            "question": "Label the pie chart",
            "marks": 2,
            "imageUrl": "/api/quizzes/images/pie.png",
            "subQuestions": [{"text": "Top half"}, {"text": "Bottom half"}],
        },
    ]

    response = client.put(f"/api/quizzes/{created['id']}", json=replacement)
    assert response.status_code == 200
    quiz = response.json()
    assert quiz["title"] == "Revised"
    assert [q["questionType"] for q in quiz["questions"]] == ["essay", "image"]
    assert quiz["questions"][1]["subQuestions"] == [{"text": "Top half"}, {"text": "Bottom half"}]
    assert quiz["createdAt"] == created["createdAt"]


def test_replace_quiz_invalid_keeps_stored_quiz(client, quiz_payload) -> None:
    created = _create(client, quiz_payload)
    bad = copy.deepcopy(quiz_payload)
    bad["questions"][0]["options"] = []

    response = client.put(f"/api/quizzes/{created['id']}", json=bad)
    assert response.status_code == 400
    assert response.json()["detail"]["error"] == "missing_options"
    assert client.get(f"/api/quizzes/{created['id']}").json() == created

    assert client.put("/api/quizzes/9999", json=quiz_payload).status_code == 404


def test_toggle_quiz_status(client, quiz_payload) -> None:
    created = _create(client, quiz_payload)
    response = client.patch(f"/api/quizzes/{created['id']}/status")
    assert response.status_code == 200
    assert response.json()["status"] is False
    response = client.patch(f"/api/quizzes/{created['id']}/status")
    assert response.json()["status"] is True


def test_delete_quiz(client, quiz_payload) -> None:
    created = _create(client, quiz_payload)
    response = client.delete(f"/api/quizzes/{created['id']}")
    assert response.status_code == 200
    assert response.json() == {"message": "Quiz deleted successfully", "deletedId": created["id"]}
    assert client.get(f"/api/quizzes/{created['id']}").status_code == 404
    assert client.delete(f"/api/quizzes/{created['id']}").status_code == 404


def test_health(client) -> None:
    assert client.get("/health").json() == {"status": "ok"}

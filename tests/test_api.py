def test_add_and_get_record(client):
    res = client.post(
        "/budget/add",
        json={"year": 2024, "month": 4, "amount": 250, "type": "Расход"},
    )
    assert res.status_code == 200
    body = res.json()
    assert body["authorId"] is None
    assert body["type"] == "Расход"

    res = client.get(f"/budget/{body['id']}")
    assert res.status_code == 200
    assert res.json() == body


def test_add_record_with_author(client, author_id):
    res = client.post(
        "/budget/add",
        json={"year": 2024, "month": 4, "amount": 250, "type": "Приход", "authorId": author_id},
    )
    assert res.status_code == 200
    assert res.json()["authorId"] == author_id


def test_add_record_unknown_author_returns_404(client):
    res = client.post(
        "/budget/add",
        json={"year": 2024, "month": 4, "amount": 250, "type": "Приход", "authorId": 777},
    )
    assert res.status_code == 404


def test_get_missing_record_returns_404(client):
    assert client.get("/budget/999").status_code == 404


def test_year_stats(client):
    for amount, type_ in [(100, "Приход"), (50, "Расход"), (100, "Приход")]:
        client.post("/budget/add", json={"year": 2023, "month": 3, "amount": amount, "type": type_})

    res = client.get("/budget/year/2023/stats", params={"limit": 1, "offset": 0})
    assert res.status_code == 200
    data = res.json()
    assert data["total"] == 3
    assert data["totalByType"] == {"Приход": 200, "Расход": 50}
    assert len(data["items"]) == 1
    assert data["items"][0]["amount"] == 100


def test_year_stats_store_error_returns_500(client, monkeypatch):
    import main

    async def failing_get_year_stats(param):
        raise RuntimeError("connexion perdue")

    monkeypatch.setattr(main.budget_service, "get_year_stats", failing_get_year_stats)

    res = client.get("/budget/year/2024/stats")
    assert res.status_code == 500
    assert "connexion perdue" in res.json()["detail"]

def test_list_all_merchants(client, make_merchant):
    make_merchant("Amazon", "Online Shopping")
    make_merchant("Seven-Eleven", "Convenience Store")

    response = client.get("/api/merchants")

    assert response.status_code == 200
    assert [m["name"] for m in response.json()] == ["Amazon", "Seven-Eleven"]
    assert set(response.json()[0]) == {"id", "name", "logoUrl", "category"}


def test_search_merchants_by_name_ignores_case(client, make_merchant):
    make_merchant("Amazon", "Online Shopping")
    make_merchant("Seven-Eleven", "Convenience Store")

    body = client.get("/api/merchants", params={"name": "ELEVEN"}).json()

    assert [m["name"] for m in body] == ["Seven-Eleven"]


def test_filter_merchants_by_exact_category(client, make_merchant):
    make_merchant("Amazon", "Online Shopping")
    make_merchant("Rakuten", "online shopping")

    body = client.get("/api/merchants", params={"category": "Online Shopping"}).json()

    assert [m["name"] for m in body] == ["Amazon"]

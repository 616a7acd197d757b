"""Tests for schedule maintenance, route search and admin login."""


SCHEDULE = {
    "route_from": "Surabaya",
    "route_to": "Malang",
    "pickup_time": "13.00",
    "category": "Jawa Timur",
    "price": 75000,
}


def test_login_rejects_wrong_password(client, admin_user) -> None:
    response = client.post(
        "/api/v1/auth/login",
        json={"email": admin_user.email, "password": "wrong-password"},
    )

    assert response.status_code == 401


def test_current_admin_profile(client, admin_headers) -> None:
    response = client.get("/api/v1/auth/me", headers=admin_headers)

    assert response.status_code == 200
    assert response.json()["email"] == "admin@obietravel.id"


def test_public_schedule_list_hides_inactive(client, schedules, admin_headers) -> None:
    client.post(f"/api/v1/schedules/{schedules[0].id}/toggle", headers=admin_headers)

    public = client.get("/api/v1/schedules").json()
    assert len(public) == len(schedules) - 1

    everything = client.get("/api/v1/schedules/admin", headers=admin_headers).json()
    assert len(everything) == len(schedules)


def test_create_schedule(client, admin_headers) -> None:
    response = client.post("/api/v1/schedules", json=SCHEDULE, headers=admin_headers)

    assert response.status_code == 201
    assert response.json()["is_active"] is True


def test_create_schedule_validates_pickup_time(client, admin_headers) -> None:
    response = client.post(
        "/api/v1/schedules",
        json=dict(SCHEDULE, pickup_time="24.30"),
        headers=admin_headers,
    )

    assert response.status_code == 422


def test_update_and_delete_schedule(client, schedules, admin_headers) -> None:
    url = f"/api/v1/schedules/{schedules[4].id}"

    response = client.put(url, json={"price": 80000}, headers=admin_headers)
    assert response.status_code == 200
    assert response.json()["price"] == 80000
    assert response.json()["route_from"] == "Malang"

    assert client.delete(url, headers=admin_headers).status_code == 204
    assert client.put(url, json={"price": 1}, headers=admin_headers).status_code == 404


def test_import_skips_existing_departures(client, schedules, admin_headers) -> None:
    existing = dict(SCHEDULE, route_from="Surabaya", route_to="Denpasar", pickup_time="19.00", price=250000)
    response = client.post("/api/v1/schedules/import", json=[existing, SCHEDULE], headers=admin_headers)

    assert response.status_code == 200
    assert response.json() == {"imported": 1, "skipped": 1}


def test_categories(client, schedules) -> None:
    assert client.get("/api/v1/schedules/categories").json() == [
        "Jawa - Bali", "Jawa Tengah - DIY", "Jawa Timur"
    ]


def test_route_search_is_case_insensitive_and_ordered(client, schedules) -> None:
    response = client.get("/api/v1/routes/search", params={"from": "surabaya", "to": "DENPASAR"})

    assert response.status_code == 200
    body = response.json()
    assert body["total_results"] == 2
    assert [result["pickup_time"] for result in body["results"]] == ["16.00", "19.00"]


def test_route_search_includes_waypoint(client, schedules) -> None:
    body = client.get("/api/v1/routes/search", params={"from": "Surabaya", "to": "Jogja"}).json()

    assert body["results"][0]["route_via"] == "Solo"


def test_cities(client, schedules) -> None:
    body = client.get("/api/v1/routes/cities").json()

    assert body["origins"] == ["Malang", "Surabaya"]
    assert body["destinations"] == ["Denpasar", "Jogja", "Surabaya"]


def test_popular_routes_one_per_pair(client, schedules) -> None:
    routes = client.get("/api/v1/routes/popular", params={"limit": 10}).json()
    pairs = [(route["route_from"], route["route_to"]) for route in routes]

    assert len(pairs) == len(set(pairs)) == 4
    assert routes[0]["price"] == 75000

"""Integration tests for earnings reports"""

from fastapi.testclient import TestClient


def test_best_profession(client: TestClient, seeded_db, as_profile):
    response = client.get("/admin/best-profession?start=2020-08-01&end=2020-08-31", headers=as_profile(1))

    assert response.status_code == 200
    assert response.json() == {"profession": "Programmer", "total_earned_cents": 268300}


def test_best_profession_single_day(client: TestClient, seeded_db, as_profile):
    response = client.get("/admin/best-profession?start=2020-08-10&end=2020-08-10", headers=as_profile(1))
    assert response.json() == {"profession": "Musician", "total_earned_cents": 2100}


def test_best_profession_tie_resolves_alphabetically(client: TestClient, seeded_db, as_profile):
    """Musician and Fighter both earned 20000 cents on Aug 17"""
    response = client.get("/admin/best-profession?start=2020-08-17&end=2020-08-17", headers=as_profile(1))
    assert response.json() == {"profession": "Fighter", "total_earned_cents": 20000}


def test_best_profession_no_payments(client: TestClient, seeded_db, as_profile):
    response = client.get("/admin/best-profession?start=2021-01-01&end=2021-12-31", headers=as_profile(1))

    assert response.status_code == 404
    assert response.text == "No profession found in the given date range."


def test_best_profession_requires_dates(client: TestClient, seeded_db, as_profile):
    response = client.get("/admin/best-profession?start=2020-08-01", headers=as_profile(1))

    assert response.status_code == 400
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text == "Start and end dates are required."


def test_best_profession_invalid_date(client: TestClient, seeded_db, as_profile):
    response = client.get("/admin/best-profession?start=soon&end=2020-08-31", headers=as_profile(1))
    assert response.status_code == 400


def test_best_clients_default_limit(client: TestClient, seeded_db, as_profile):
    """Clients 1 and 2 tie at 44200 cents; the lower id comes first"""
    response = client.get("/admin/best-clients?start=2020-08-01&end=2020-08-31", headers=as_profile(1))

    assert response.status_code == 200
    assert response.json() == [
        {"id": 4, "full_name": "Ash Kethcum", "paid_cents": 202000},
        {"id": 1, "full_name": "Harry Potter", "paid_cents": 44200},
    ]


def test_best_clients_with_limit(client: TestClient, seeded_db, as_profile):
    response = client.get(
        "/admin/best-clients?start=2020-08-01&end=2020-08-31&limit=10", headers=as_profile(1)
    )

    data = response.json()
    assert [c["id"] for c in data] == [4, 1, 2, 3]
    assert [c["paid_cents"] for c in data] == sorted((c["paid_cents"] for c in data), reverse=True)


def test_best_clients_end_date_covers_whole_day(client: TestClient, seeded_db, as_profile):
    """Job 14 was paid at 23:11 on Aug 14"""
    response = client.get("/admin/best-clients?start=2020-08-14&end=2020-08-14", headers=as_profile(1))
    assert response.json() == [{"id": 2, "full_name": "Mr Robot", "paid_cents": 12100}]


def test_best_clients_no_payments(client: TestClient, seeded_db, as_profile):
    response = client.get("/admin/best-clients?start=2019-01-01&end=2019-12-31", headers=as_profile(1))

    assert response.status_code == 404
    assert response.text == "No clients found in the given date range."


def test_best_clients_invalid_limit(client: TestClient, seeded_db, as_profile):
    for limit in ["0", "-1", "two"]:
        response = client.get(
            f"/admin/best-clients?start=2020-08-01&end=2020-08-31&limit={limit}", headers=as_profile(1)
        )
        assert response.status_code == 400


def test_best_clients_start_after_end(client: TestClient, seeded_db, as_profile):
    response = client.get("/admin/best-clients?start=2020-09-01&end=2020-08-01", headers=as_profile(1))
    assert response.status_code == 400


def test_reports_include_new_payments(client: TestClient, seeded_db, as_profile):
    """A payment made now shows up in a report covering today"""
    client.post("/jobs/2/pay", headers=as_profile(1))

    response = client.get("/admin/best-clients?start=2020-01-01&end=2100-01-01&limit=1", headers=as_profile(1))
    assert response.json() == [{"id": 4, "full_name": "Ash Kethcum", "paid_cents": 202000}]

    response = client.get("/admin/best-profession?start=2020-01-01&end=2100-01-01", headers=as_profile(1))
    assert response.json() == {"profession": "Programmer", "total_earned_cents": 268300 + 20100}


def test_best_clients_huge_limit_is_clamped(client: TestClient, seeded_db, as_profile):
    response = client.get(
        "/admin/best-clients?start=2020-08-01&end=2020-08-31&limit=99999999999999999999", headers=as_profile(1)
    )

    assert response.status_code == 200
    assert [c["id"] for c in response.json()] == [4, 1, 2, 3]

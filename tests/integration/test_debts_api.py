"""Integration tests for /api/debt, including the periodic accrual pass"""

from fastapi.testclient import TestClient
from collection_gateway.utils.clock import FixedClock


def open_debt(client: TestClient, student_id: str, amount=1000, **extra) -> dict:
    response = client.post("/api/debt", json={"studentId": student_id, "amount": amount, **extra})
    assert response.status_code == 201, response.text
    return response.json()


def test_create_debt_derives_monthly_percent(client: TestClient, create_student):
    student = create_student(age=17, sex=True)

    debt = open_debt(client, student["id"])

    assert debt["id"]
    assert debt["studentId"] == student["id"]
    assert debt["amount"] == 1000
    assert debt["totalAmount"] == 1000
    assert debt["monthlyPercent"] == 30
    assert debt["creationDate"].startswith("2025-01-01T12:00:00")
    assert debt["lastUpdateDate"] == debt["creationDate"]


def test_create_debt_for_adult_man_has_no_interest(client: TestClient, create_student):
    student = create_student(age=25, sex=False)

    debt = open_debt(client, student["id"], lastUpdateDate="2025-02-01")

    assert debt["monthlyPercent"] == 0
    assert debt["totalAmount"] == 1000


def test_create_debt_accrues_until_future_update_date(client: TestClient, create_student):
    student = create_student(age=17, sex=True)

    debt = open_debt(client, student["id"], lastUpdateDate="2025-01-03T12:00:00Z")

    assert debt["totalAmount"] == 1020.1
    assert debt["lastUpdateDate"].startswith("2025-01-01T12:00:00")


def test_create_debt_past_update_date_is_ignored(client: TestClient, create_student):
    student = create_student(age=17, sex=True)
    debt = open_debt(client, student["id"], lastUpdateDate="2024-12-01")
    assert debt["totalAmount"] == 1000


def test_create_debt_unknown_student(client: TestClient):
    response = client.post("/api/debt", json={"studentId": "missing", "amount": 1000})
    assert response.status_code == 404
    assert response.json()["detail"] == "Student not found"


def test_create_debt_invalid_update_date(client: TestClient, create_student):
    student = create_student()
    response = client.post(
        "/api/debt",
        json={"studentId": student["id"], "amount": 1000, "lastUpdateDate": "someday"},
    )
    assert response.status_code == 400


def test_create_debt_requires_positive_amount(client: TestClient, create_student):
    student = create_student()
    for amount in (0, -10, "lots"):
        response = client.post("/api/debt", json={"studentId": student["id"], "amount": amount})
        assert response.status_code == 400


def test_get_list_and_delete_debt(client: TestClient, create_student):
    student = create_student()
    debt = open_debt(client, student["id"])

    assert client.get(f"/api/debt/{debt['id']}").json() == debt
    assert [d["id"] for d in client.get("/api/debt").json()] == [debt["id"]]

    assert client.delete(f"/api/debt/{debt['id']}").status_code == 204
    missing = client.get(f"/api/debt/{debt['id']}")
    assert missing.status_code == 404
    assert missing.json()["detail"] == "Debt not found"
    assert client.delete(f"/api/debt/{debt['id']}").status_code == 404


def test_accrual_pass_same_day_is_noop(client: TestClient, create_student, clock: FixedClock):
    student = create_student(age=17, sex=True)
    debt = open_debt(client, student["id"])

    clock.advance(hours=6)
    response = client.put("/api/debt")

    assert response.status_code == 200
    assert response.json() == [debt]


def test_accrual_pass_applies_daily_interest(client: TestClient, create_student, clock: FixedClock):
    student = create_student(age=17, sex=True)
    debt = open_debt(client, student["id"])

    clock.advance(days=1)
    [updated] = client.put("/api/debt").json()

    assert updated["totalAmount"] == 1010
    assert updated["lastUpdateDate"].startswith("2025-01-02T12:00:00")
    assert updated["monthlyPercent"] == 30
    assert client.get(f"/api/debt/{debt['id']}").json() == updated


def test_accrual_pass_twice_same_day_is_idempotent(client: TestClient, create_student, clock: FixedClock):
    student = create_student(age=17, sex=True)
    open_debt(client, student["id"])

    clock.advance(days=1)
    first = client.put("/api/debt").json()
    clock.advance(hours=3)
    second = client.put("/api/debt").json()

    assert first == second
    assert second[0]["totalAmount"] == 1010


def test_accrual_pass_compounds_across_days(client: TestClient, create_student, clock: FixedClock):
    student = create_student(age=17, sex=True)
    open_debt(client, student["id"])

    clock.advance(days=1)
    client.put("/api/debt")
    clock.advance(days=1)
    [updated] = client.put("/api/debt").json()

    assert updated["totalAmount"] == 1020.1


def test_accrual_rounds_only_at_the_boundary(client: TestClient, create_student, clock: FixedClock):
    """20% a month: one day gives 1006.666..., shown as 1006.67"""
    student = create_student(age=19, sex=True)
    debt = open_debt(client, student["id"])
    assert debt["monthlyPercent"] == 20

    clock.advance(days=1)
    [first_day] = client.put("/api/debt").json()
    clock.advance(days=1)
    [second_day] = client.put("/api/debt").json()

    assert first_day["totalAmount"] == 1006.67
    # 1000 * (1 + 0.2 / 30) ** 2
    assert second_day["totalAmount"] == 1013.38


def test_monthly_percent_is_fixed_at_creation(client: TestClient, create_student, clock: FixedClock):
    student = create_student(age=17, sex=True)
    debt = open_debt(client, student["id"])

    client.put(
        f"/api/student/{student['id']}",
        json={"name": student["name"], "age": 40, "sex": False, "fearFactor": 1},
    )
    clock.advance(days=1)
    [updated] = client.put("/api/debt").json()

    assert updated["id"] == debt["id"]
    assert updated["monthlyPercent"] == 30
    assert updated["totalAmount"] == 1010


def test_debt_survives_student_deletion(client: TestClient, create_student):
    student = create_student()
    debt = open_debt(client, student["id"])

    client.delete(f"/api/student/{student['id']}")

    assert client.get(f"/api/debt/{debt['id']}").status_code == 200

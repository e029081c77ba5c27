import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from booking_app.main import create_app
from booking_app.model.booking import Booking


@pytest.fixture
def client():
    app = create_app(mongo_client=AsyncMongoMockClient())
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def make_movie(client):
    def _make(title="Inception", genre="Sci-Fi", **extra):
        resp = client.post("/movies", json={"title": title, "genre": genre, **extra})
        assert resp.status_code == 200, resp.text
        return resp.json()
    return _make


@pytest.fixture
def make_user(client):
    def _make(name="Alice", **extra):
        resp = client.post("/users", json={"name": name, **extra})
        assert resp.status_code == 200, resp.text
        return resp.json()
    return _make


@pytest.fixture
def book(client):
    def _book(user, movie, seats=1, status="Booked", booking_date="2024-05-01T18:30:00"):
        resp = client.post(
            "/bookings",
            json={
                "userId": user["_id"],
                "movieId": movie["_id"],
                "seats": seats,
                "status": status,
                "bookingDate": booking_date,
            },
        )
        assert resp.status_code == 200, resp.text
        return resp.json()
    return _book


@pytest.fixture
def booking_count(client):
    async def _count():
        return await Booking.find_all().count()

    def _run():
        return client.portal.call(_count)
    return _run

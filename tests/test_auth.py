from dailyjournal.models.user import User


def test_register_then_login(app, client):
    response = client.post("/auth/register", data={"email": " Carol@Example.com ", "password": "password123"})
    assert response.status_code == 302
    assert "/auth/login" in response.headers["Location"]

    with app.app_context():
        user = User.query.filter_by(email="carol@example.com").first()
        assert user is not None
        assert user.password_hash != "password123"

    response = client.post("/auth/login", data={"email": "carol@example.com", "password": "password123"})
    assert response.status_code == 302
    assert client.get("/api/entry").status_code == 200


def test_register_rejects_short_password(app, client):
    response = client.post("/auth/register", data={"email": "dan@example.com", "password": "short"})

    assert response.status_code == 200
    assert b"at least 8 characters" in response.data
    with app.app_context():
        assert User.query.count() == 0


def test_register_rejects_duplicate_email(app, client, make_user):
    make_user("erin@example.com")

    response = client.post("/auth/register", data={"email": "ERIN@example.com", "password": "password123"})

    assert b"Email already registered" in response.data
    with app.app_context():
        assert User.query.count() == 1


def test_login_with_wrong_password(client, make_user):
    make_user("frank@example.com")

    response = client.post("/auth/login", data={"email": "frank@example.com", "password": "nope"})

    assert response.status_code == 200
    assert b"Invalid credentials" in response.data
    assert client.get("/api/entry").status_code == 401


def test_logout(alice):
    assert alice.get("/api/entry").status_code == 200

    response = alice.post("/auth/logout")

    assert response.status_code == 302
    assert alice.get("/api/entry").status_code == 401

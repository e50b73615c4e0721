def register(client, name="A", email="a@a.com", password="secret1") -> str:
    response = client.post(
        "/api/users", json={"name": name, "email": email, "password": password}
    )
    assert response.status_code == 200, response.text
    return response.json()["token"]


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}

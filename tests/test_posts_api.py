from datetime import datetime, timezone

POSTS_URL = "/api/posts"
MISSING_ID = "62056f8cf21b83383a5ae7fa"
USER_ID = "62056f8cf21b83383a5ae7fb"

VALID_POST = {
    "title": "First post",
    "content": "Hello there, this is the first post.",
    "userId": USER_ID,
}


def create_post(client, **overrides) -> str:
    response = client.post(POSTS_URL, json={**VALID_POST, **overrides})
    assert response.status_code == 201, response.text
    return response.json()["id"]


def test_create_and_get_post(client):
    post_id = create_post(client)

    response = client.get(f"{POSTS_URL}/{post_id}")

    today = datetime.now(timezone.utc).strftime("%Y/%m/%d")
    assert response.status_code == 200
    assert response.json() == {
        "id": post_id,
        "title": VALID_POST["title"],
        "content": VALID_POST["content"],
        "userId": USER_ID,
        "createdAt": today,
        "updatedAt": today,
        "comments": [],
    }


def test_create_post_validation(client):
    response = client.post(POSTS_URL, json={"title": "Hi", "content": "Привет, мир!"})

    assert response.status_code == 400
    assert response.json() == {
        "message": (
            "content: must contain ASCII characters only; "
            "title: the length must be between 3 and 200; "
            "userId: cannot be blank."
        ),
        "developerMessage": "input validation failed. please, provide valid values",
        "code": 400,
    }


def test_create_post_unknown_key(client):
    response = client.post(POSTS_URL, json={**VALID_POST, "author": "me"})

    assert response.status_code == 400
    assert response.json()["message"] == 'request body contains unknown key "author"'


def test_update_post(client):
    post_id = create_post(client)

    response = client.patch(f"{POSTS_URL}/{post_id}", json={"title": "Renamed post"})

    assert response.status_code == 200
    post = client.get(f"{POSTS_URL}/{post_id}").json()
    assert post["title"] == "Renamed post"
    assert post["content"] == VALID_POST["content"]


def test_update_post_rejects_id_in_body(client):
    post_id = create_post(client)

    response = client.patch(f"{POSTS_URL}/{post_id}", json={"id": MISSING_ID, "title": "Renamed post"})

    assert response.status_code == 400
    assert response.json()["message"] == 'request body contains unknown key "id"'
    assert client.get(f"{POSTS_URL}/{post_id}").json()["title"] == VALID_POST["title"]


def test_update_post_validation(client):
    post_id = create_post(client)

    response = client.patch(f"{POSTS_URL}/{post_id}", json={"content": "short"})

    assert response.status_code == 400
    assert response.json() == {
        "message": "content: the length must be between 10 and 5000.",
        "developerMessage": "you have provided invalid values",
        "code": 400,
    }


def test_post_not_found_and_invalid_id(client):
    assert client.get(f"{POSTS_URL}/{MISSING_ID}").status_code == 404
    assert client.patch(f"{POSTS_URL}/{MISSING_ID}", json={"title": "Whatever"}).status_code == 404
    response = client.get(f"{POSTS_URL}/invaliduuid")
    assert response.status_code == 400
    assert response.json()["message"] == "invalid uuid"


def test_delete_post(client):
    post_id = create_post(client)

    assert client.delete(f"{POSTS_URL}/{post_id}").status_code == 200
    assert client.get(f"{POSTS_URL}/{post_id}").status_code == 404
    assert client.delete(f"{POSTS_URL}/{post_id}").status_code == 404

import os
from datetime import datetime, timedelta

import pytest

from utils.timezone import ist_now


def test_add_post_with_image_url_round_trips(client):
    r = client.post("/api/add-post", data={
        "pname": "Monsoon diaries",
        "aname": "Ravi",
        "img_alt": "rain",
        "img_title": "Rain over Mumbai",
        "pdesc": "It rained.",
        "cname": "Travel",
        "image": "https://cdn.example.com/rain.jpg",
        "stime": "2024-03-01T04:30:00.000Z",
        "up_date": "",
    })
    assert r.status_code == 200
    created = r.json()["data"]
    assert created["stime"] == "2024-03-01T10:00:00+05:30"
    assert created["up_date"] is None

    r = client.get(f"/api/get-posts/{created['id']}")
    assert r.status_code == 200
    body = r.json()
    for field in ("pname", "aname", "img_alt", "img_title", "pdesc", "cname", "stime"):
        assert body[field] == created[field]
    assert body["pimage"] == "https://cdn.example.com/rain.jpg"
    assert body["views"] == 0
    assert body["likes"] == 0
    assert body["read"] is False


def test_add_post_with_uploaded_file_is_served_back(client):
    r = client.post(
        "/api/add-post",
        data={"pname": "Photo essay", "cname": "Travel"},
        files={"file": ("sunset.jpg", b"jpeg-bytes", "image/jpeg")},
    )
    assert r.status_code == 200
    path = r.json()["data"]["pimage"]
    assert path.startswith("/nativeuploads/")
    assert path.endswith(".jpg")
    assert os.path.exists(os.path.join(os.environ["UPLOAD_DIR"], os.path.basename(path)))

    r = client.get(path)
    assert r.status_code == 200
    assert r.content == b"jpeg-bytes"


def test_add_post_without_schedule_uses_current_ist(client):
    r = client.post("/api/add-post", data={"pname": "Now", "image": "/x.png"})
    assert r.status_code == 200
    stime = r.json()["data"]["stime"]
    assert stime.startswith(ist_now().strftime("%Y-%m-%d"))


def test_add_post_requires_an_image(client):
    r = client.post("/api/add-post", data={"pname": "No image"})
    assert r.status_code == 400
    assert r.json() == {"error": "No file uploaded or image URL provided"}


def test_add_post_requires_title(client):
    r = client.post("/api/add-post", data={"image": "/x.png"})
    assert r.status_code == 400
    assert "pname" in r.json()["error"]


def test_add_post_rejects_bad_schedule(client):
    r = client.post("/api/add-post", data={"pname": "Bad", "image": "/x.png", "stime": "someday"})
    assert r.status_code == 400
    assert r.json()["error"].startswith("Invalid stime")


def test_get_posts_newest_schedule_first(client, make_post):
    older = make_post(pname="Older", stime=datetime(2024, 1, 1, 9, 0))
    newer = make_post(pname="Newer", stime=datetime(2024, 2, 1, 9, 0))

    r = client.get("/api/get-posts")
    assert r.status_code == 200
    assert [p["id"] for p in r.json()] == [newer.id, older.id]


def test_get_missing_post_is_404(client):
    r = client.get("/api/get-posts/999")
    assert r.status_code == 404
    assert r.json() == {"error": "Post not found"}


def test_delete_post_removes_it_from_listing(client, make_post, make_user, make_comment):
    keep_id = make_post(pname="Keep").id
    doomed = make_post(pname="Doomed")
    make_comment(doomed, make_user())
    doomed_id = doomed.id

    r = client.request("DELETE", "/api/delete-post", json={"id": doomed_id})
    assert r.status_code == 200
    assert r.json() == {"message": "Post deleted successfully"}

    ids = [p["id"] for p in client.get("/api/get-posts").json()]
    assert ids == [keep_id]
    assert client.get(f"/api/get-posts/{doomed_id}").status_code == 404
    assert client.get(f"/api/posts/{doomed_id}/comments").json() == []


def test_delete_missing_post_is_404(client):
    r = client.request("DELETE", "/api/delete-post", json={"id": 42})
    assert r.status_code == 404


def test_update_post_json(client, make_post):
    post = make_post()
    r = client.put("/api/update-post", json={
        "id": post.id,
        "pname": "Edited title",
        "image": "https://cdn.example.com/new.jpg",
        "up_date": "2024-05-01T00:00:00Z",
        "stime": "null",
    })
    assert r.status_code == 200
    data = r.json()["data"]
    assert data["pname"] == "Edited title"
    assert data["pimage"] == "https://cdn.example.com/new.jpg"
    assert data["up_date"] == "2024-05-01T05:30:00+05:30"
    assert data["stime"] is None
    # Fields that were not sent keep their values
    assert data["pdesc"] == "First post body"


def test_update_post_keeps_schedule_sent_back_unchanged(client):
    r = client.post("/api/add-post", data={
        "pname": "Scheduled",
        "image": "/x.png",
        "stime": "2024-03-01T04:30:00.000Z",
        "up_date": "2024-02-29T18:30:00.000Z",
    })
    fetched = client.get(f"/api/get-posts/{r.json()['data']['id']}").json()

    # The admin app posts the fetched dates back as they came
    r = client.put("/api/update-post", json={
        "id": fetched["id"],
        "pname": "Scheduled, edited",
        "stime": fetched["stime"],
        "up_date": fetched["up_date"],
    })
    assert r.status_code == 200
    data = r.json()["data"]
    assert data["stime"] == fetched["stime"] == "2024-03-01T10:00:00+05:30"
    assert data["up_date"] == fetched["up_date"] == "2024-03-01T00:00:00+05:30"


def test_update_post_rejects_null_title(client, make_post):
    post = make_post()
    r = client.put("/api/update-post", json={"id": post.id, "pname": None})
    assert r.status_code == 400
    assert r.json() == {"error": "Post title cannot be empty"}
    assert client.get(f"/api/get-posts/{post.id}").json()["pname"] == "Hello world"


@pytest.mark.parametrize("blank", ["null", "undefined", ""])
def test_update_post_ignores_blank_image(client, make_post, blank):
    post = make_post()
    r = client.put("/api/update-post", json={"id": post.id, "image": blank})
    assert r.status_code == 200
    assert r.json()["data"]["pimage"] == "/nativeuploads/cover.jpg"


def test_add_post_treats_blank_image_as_missing(client):
    r = client.post("/api/add-post", data={"pname": "No image", "image": "null"})
    assert r.status_code == 400
    assert r.json() == {"error": "No file uploaded or image URL provided"}


def test_update_post_multipart_replaces_image(client, make_post):
    post = make_post()
    r = client.put(
        "/api/update-post",
        data={"id": str(post.id), "pname": "With new cover"},
        files={"file": ("new.png", b"png-bytes", "image/png")},
    )
    assert r.status_code == 200
    data = r.json()["data"]
    assert data["pname"] == "With new cover"
    assert data["pimage"].startswith("/nativeuploads/")
    assert data["pimage"].endswith(".png")


def test_update_post_requires_known_id(client):
    assert client.put("/api/update-post", json={"pname": "x"}).status_code == 400
    assert client.put("/api/update-post", json={"id": 77, "pname": "x"}).status_code == 404


def test_increment_views(client, make_post):
    post = make_post(views=4)
    r = client.put(f"/api/increment-views/{post.id}")
    assert r.status_code == 200
    assert r.json() == {"message": "Post views incremented successfully", "newViewsCount": 5}
    assert client.put("/api/increment-views/999").status_code == 404


def test_popular_posts_shape_and_limit(client, make_post):
    for views in range(7):
        make_post(pname=f"Post {views}", views=views)

    r = client.get("/api/popular-posts")
    assert r.status_code == 200
    popular = r.json()
    assert len(popular) == 5
    assert [p["visits"] for p in popular] == [6, 5, 4, 3, 2]
    assert set(popular[0]) == {"id", "imageUrl", "title", "excerpt", "time", "visits"}
    assert popular[0]["title"] == "Post 6"


def test_related_posts_exclude_current(client, make_post):
    current = make_post(cname="Food")
    sibling = make_post(cname="Food", pname="Sibling")
    make_post(cname="Travel")

    r = client.get(f"/api/related-posts/Food/{current.id}")
    assert r.status_code == 200
    assert [p["id"] for p in r.json()] == [sibling.id]


def test_search_posts_by_title_and_category(client, make_post):
    make_post(pname="Best chai in town", cname="Food")
    make_post(pname="Chai and trains", cname="Travel")
    make_post(pname="Unrelated", cname="Food")

    r = client.get("/api/search-posts", params={"pname": "chai", "filter": "All"})
    assert r.status_code == 200
    assert sorted(p["title"] for p in r.json()) == ["Best chai in town", "Chai and trains"]

    r = client.get("/api/search-posts", params={"pname": "chai", "filter": "Travel"})
    results = r.json()
    assert [p["title"] for p in results] == ["Chai and trains"]
    assert results[0]["author"] == "Asha"
    assert results[0]["excerpt"] == "First post body"


def test_notifications_only_include_due_posts(client, make_post):
    due = make_post(pname="Due")
    make_post(pname="Later", stime=ist_now() + timedelta(days=1))

    r = client.get("/api/notifications")
    assert r.status_code == 200
    assert [p["id"] for p in r.json()] == [due.id]


def test_mark_notification_read_is_idempotent(client, make_post):
    post = make_post()

    for _ in range(2):
        r = client.post("/api/mark-notification-read", json={"id": post.id})
        assert r.status_code == 200
        assert r.json() == {"message": "Notification marked as read"}

    assert client.post(f"/api/mark-notification-read/{post.id}").status_code == 200
    assert client.get(f"/api/get-posts/{post.id}").json()["read"] is True


def test_mark_notification_read_requires_id(client):
    r = client.post("/api/mark-notification-read", json={})
    assert r.status_code == 400
    assert r.json() == {"error": "Missing notification ID"}

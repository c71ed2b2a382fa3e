def test_tag_lifecycle(client):
    r_create = client.post("/tags/", json={"name": "Sale"})
    assert r_create.status_code == 201, r_create.text
    tag = r_create.json()
    assert tag["store_ids"] == "0"
    assert tag["enabled"] == 1
    assert tag["meta_robots"] == "INDEX,FOLLOW"
    assert tag["created_at"].startswith("2024-05-17T09:30:00")

    r_list = client.get("/tags/")
    assert r_list.status_code == 200
    assert [t["tag_id"] for t in r_list.json()] == [tag["tag_id"]]

    r_update = client.put(f"/tags/{tag['tag_id']}", json={"name": "Clearance"})
    assert r_update.status_code == 200
    assert r_update.json()["name"] == "Clearance"
    assert r_update.json()["store_ids"] == "0"

    r_del = client.delete(f"/tags/{tag['tag_id']}")
    assert r_del.status_code == 200
    assert r_del.json() == {"deleted": True}

    r_del_again = client.delete(f"/tags/{tag['tag_id']}")
    assert r_del_again.json() == {"deleted": False}


def test_create_without_name_is_unprocessable(client):
    for path in ("/tags/", "/topics/", "/categories/"):
        r = client.post(path, json={"name": ""})
        assert r.status_code == 422
        assert r.json()["detail"] == "name is required"


def test_update_unknown_is_404_and_zero_id_is_400(client):
    r_missing = client.put("/topics/555", json={"name": "x"})
    assert r_missing.status_code == 404
    assert "doesn't exist" in r_missing.json()["detail"]

    r_zero = client.put("/categories/0", json={"name": "x"})
    assert r_zero.status_code == 400
    assert "Invalid category id" in r_zero.json()["detail"]


def test_category_create_sets_root_parent(client):
    r = client.post("/categories/", json={"name": "Root child"})
    assert r.status_code == 201
    assert r.json()["parent_id"] == 1


def test_post_create_and_update(client, make_author, make_tag):
    author = make_author()
    tag = make_tag()

    r_create = client.post("/posts/", json={
        "name": "First",
        "author_id": author.user_id,
        "tags_ids": str(tag.tag_id),
    })
    assert r_create.status_code == 201, r_create.text
    post = r_create.json()
    assert post["tags_ids"] == [tag.tag_id]
    assert post["layout"] == "empty"
    assert post["enabled"] == 0

    r_update = client.put(f"/posts/{post['post_id']}", json={"enabled": 1, "tags_ids": ""})
    assert r_update.status_code == 200
    assert r_update.json()["enabled"] == 1
    assert r_update.json()["tags_ids"] == []

    assert client.delete(f"/posts/{post['post_id']}").json() == {"deleted": True}


def test_post_create_rejected_for_unknown_category(client, make_author):
    author = make_author()
    r = client.post("/posts/", json={"name": "Bad", "author_id": author.user_id, "categories_ids": "42"})
    assert r.status_code == 422
    assert "category 42" in r.json()["detail"]
    assert client.get("/posts/").json() == []


def test_author_endpoints(client, make_customer, make_author):
    r_missing = client.post("/authors/customers/9999", json={"name": "Nobody"})
    assert r_missing.status_code == 404

    customer = make_customer()
    r_rejected = client.post(f"/authors/customers/{customer.id}", json={"name": "Writer"})
    assert r_rejected.status_code == 422

    author = make_author("Seeded")
    r_list = client.get("/authors/")
    assert [a["name"] for a in r_list.json()] == ["Seeded"]

    r_update = client.put(f"/authors/{author.user_id}", json={"status": 1})
    assert r_update.status_code == 200
    assert r_update.json()["status"] == 1

    assert client.delete(f"/authors/{author.user_id}").json() == {"deleted": True}


def test_post_update_with_bad_tag_ids_is_400(client, make_author):
    author = make_author()
    post = client.post("/posts/", json={"name": "P", "author_id": author.user_id}).json()

    for tags_ids in ("abc", "999"):
        r = client.put(f"/posts/{post['post_id']}", json={"tags_ids": tags_ids})
        assert r.status_code == 400, r.text

    assert client.get("/posts/").json()[0]["tags_ids"] == []

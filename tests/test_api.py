from animelog.core.exceptions import NOT_AUTHENTICATED
from tests.conftest import make_anime


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_home_anonymous_has_no_recommendations(client, fake_catalog):
    resp = client.get("/")

    assert resp.status_code == 200
    body = resp.json()
    assert len(body["top"]) == 10
    assert len(body["seasonal"]) == 10
    assert body["recommended"] is None
    assert sorted(call[0] for call in fake_catalog.calls) == ["seasonal", "top"]


def test_home_recommends_from_saved_genres(client, fake_catalog, auth_headers):
    client.put("/preferences", json={"genres": ["Action", "UnknownGenre", "Romance"]}, headers=auth_headers)

    body = client.get("/", headers=auth_headers).json()

    assert len(body["recommended"]) == 10
    assert ("by_genre", "1,22", 1) in fake_catalog.calls


def test_home_without_genres_has_no_recommendation_section(client, fake_catalog, auth_headers):
    client.put("/preferences", json={"genres": []}, headers=auth_headers)

    body = client.get("/", headers=auth_headers).json()

    assert body["recommended"] is None
    assert not any(call[0] == "by_genre" for call in fake_catalog.calls)


def test_home_catalog_failure_is_bad_gateway(client, fake_catalog):
    fake_catalog.fail_with = 500

    resp = client.get("/")

    assert resp.status_code == 502


def test_browse_defaults_to_top_anime(client, fake_catalog):
    body = client.get("/browse").json()

    assert fake_catalog.calls == [("top", 1)]
    assert body["page"] == 1
    assert body["previous_page"] is None
    assert body["next_page"] == 2
    assert len(body["data"]) == 15


def test_browse_search_with_genres_and_page(client, fake_catalog):
    body = client.get("/browse", params={"q": "bebop", "genres": "1,24", "page": "3"}).json()

    assert fake_catalog.calls == [("search", "bebop", 3, "1,24")]
    assert body["query"] == "bebop"
    assert body["previous_page"] == 2
    assert body["next_page"] is None


def test_browse_genre_filter_alone_searches(client, fake_catalog):
    client.get("/browse", params={"genres": "4"})

    assert fake_catalog.calls == [("search", "", 1, "4")]


def test_browse_bad_page_falls_back_to_first(client, fake_catalog):
    client.get("/browse", params={"page": "abc"})
    client.get("/browse", params={"page": "0"})

    assert fake_catalog.calls == [("top", 1), ("top", 1)]


def test_anime_detail_anonymous(client, fake_catalog):
    fake_catalog.details[5] = make_anime(5, "Kimetsu no Yaiba", title_english="Demon Slayer")

    body = client.get("/anime/5").json()

    assert body["title"] == "Demon Slayer"
    assert body["image_url"] == "https://cdn.test/5l.webp"
    assert body["is_authenticated"] is False
    assert body["is_favorite"] is False
    assert body["status"] is None


def test_anime_detail_shows_user_entry(client, fake_catalog, auth_headers):
    fake_catalog.details[5] = make_anime(5)
    client.put("/anime/5/status", json={"title": "Anime 5", "status": "watching"}, headers=auth_headers)
    client.post("/anime/5/favorite", json={"title": "Anime 5"}, headers=auth_headers)

    body = client.get("/anime/5", headers=auth_headers).json()

    assert body["is_authenticated"] is True
    assert body["is_favorite"] is True
    assert body["status"] == "watching"


def test_anime_detail_not_found(client):
    resp = client.get("/anime/404404")

    assert resp.status_code == 404


def test_anime_detail_non_numeric_id_is_not_found(client, fake_catalog):
    resp = client.get("/anime/abc")

    assert resp.status_code == 404
    assert resp.json()["detail"] == "Anime abc not found"
    assert fake_catalog.calls == []


def test_favorite_action_requires_authentication(client):
    resp = client.post("/anime/5/favorite", json={"title": "Title"})

    assert resp.status_code == 401
    assert resp.json() == {"success": False, "error": NOT_AUTHENTICATED, "entry": None, "invalidated": []}


def test_favorite_status_and_remove_flow(client, auth_headers):
    fav = client.post("/anime/5/favorite", json={"title": "Title", "image_url": "url"}, headers=auth_headers).json()
    assert fav["success"] is True
    assert fav["entry"]["is_favorite"] is True
    assert fav["invalidated"] == ["/my-list", "/anime/5"]

    status = client.put(
        "/anime/5/status", json={"title": "Title", "image_url": "url", "status": "watched"}, headers=auth_headers
    ).json()
    assert status["entry"]["status"] == "watched"
    assert status["entry"]["is_favorite"] is True

    removed = client.delete("/anime/5", headers=auth_headers).json()
    assert removed["success"] is True
    assert removed["entry"] is None

    assert client.get("/my-list", headers=auth_headers).json()["counts"]["all"] == 0


def test_invalid_status_is_rejected(client, auth_headers):
    resp = client.put("/anime/5/status", json={"title": "Title", "status": "dropped"}, headers=auth_headers)

    assert resp.status_code == 422


def test_my_list_requires_authentication(client):
    assert client.get("/my-list").status_code == 401


def test_my_list_groups_entries(client, auth_headers):
    client.post("/anime/1/favorite", json={"title": "One"}, headers=auth_headers)
    client.put("/anime/2/status", json={"title": "Two", "status": "watching"}, headers=auth_headers)

    body = client.get("/my-list", headers=auth_headers).json()

    assert body["counts"] == {"all": 2, "favorites": 1, "watching": 1, "watched": 0}
    assert [e["mal_id"] for e in body["favorites"]] == [1]
    assert [e["mal_id"] for e in body["watching"]] == [2]


def test_preferences_round_trip(client, auth_headers):
    saved = client.put("/preferences", json={"genres": ["Action", "Comedy"]}, headers=auth_headers)
    assert saved.json()["invalidated"] == ["/", "/preferences"]

    body = client.get("/preferences", headers=auth_headers).json()

    assert set(body["genres"]) == {"Action", "Comedy"}
    assert "Slice of Life" in body["available_genres"]


def test_preferences_require_authentication(client):
    assert client.get("/preferences").status_code == 401
    assert client.put("/preferences", json={"genres": ["Action"]}).status_code == 401


def test_genres_listing(client, fake_catalog):
    body = client.get("/genres").json()

    assert [g["name"] for g in body] == ["Action", "Comedy"]

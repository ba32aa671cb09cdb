from datetime import datetime, timedelta, timezone
from sqlmodel import Session, select
from models import Song, SongLyrics

BASE_TIME = datetime(2024, 3, 1, 9, 0, 0, tzinfo=timezone.utc)


def _seed_songs(session: Session):
    songs = [
        Song(title="Amazing Grace", artist="John Newton", primary_language="English",
             tags=["hymn"], view_count=30, created_at=BASE_TIME),
        Song(title="Cuán Grande Es Él", artist="Carl Boberg", primary_language="Spanish",
             tags=["worship"], view_count=80, created_at=BASE_TIME + timedelta(days=1)),
        Song(title="Stille Nacht", artist="Joseph Mohr", primary_language="German",
             tags=["christmas"], view_count=5, created_at=BASE_TIME + timedelta(days=2)),
    ]
    for s in songs:
        session.add(s)
    session.commit()
    return songs


def test_list_songs_newest_first(client, session: Session):
    _seed_songs(session)

    response = client.get("/api/songs")
    assert response.status_code == 200
    data = response.json()
    assert [s["title"] for s in data] == ["Stille Nacht", "Cuán Grande Es Él", "Amazing Grace"]

    # JSONは camelCase
    first = data[0]
    assert first["primaryLanguage"] == "German"
    assert first["viewCount"] == 5
    assert "createdAt" in first and "updatedAt" in first
    assert "primary_language" not in first


def test_list_songs_paging_and_loose_limits(client, session: Session):
    _seed_songs(session)

    response = client.get("/api/songs", params={"limit": 1, "offset": 1})
    assert [s["title"] for s in response.json()] == ["Cuán Grande Es Él"]

    # 数値でない値はデフォルトに戻る (400 にはならない)
    response = client.get("/api/songs", params={"limit": "abc", "offset": "-3"})
    assert response.status_code == 200
    assert len(response.json()) == 3

    response = client.get("/api/songs", params={"limit": "2abc"})
    assert len(response.json()) == 2


def test_popular_songs(client, session: Session):
    _seed_songs(session)

    response = client.get("/api/songs/popular", params={"limit": 2})
    assert response.status_code == 200
    assert [s["title"] for s in response.json()] == ["Cuán Grande Es Él", "Amazing Grace"]


def test_search_songs(client, session: Session):
    _seed_songs(session)

    response = client.get("/api/songs/search", params={"q": "grace"})
    assert response.status_code == 200
    assert [s["title"] for s in response.json()] == ["Amazing Grace"]

    response = client.get("/api/songs/search", params={"q": "MOHR"})
    assert [s["title"] for s in response.json()] == ["Stille Nacht"]

    response = client.get("/api/songs/search", params={"q": "Christmas"})
    assert [s["title"] for s in response.json()] == ["Stille Nacht"]


def test_search_short_or_missing_query_returns_empty(client, session: Session):
    _seed_songs(session)

    for params in ({"q": "a"}, {"q": "  g  "}, {"q": ""}, {}):
        response = client.get("/api/songs/search", params=params)
        assert response.status_code == 200
        assert response.json() == []


def test_get_song_detail_with_lyrics_and_view_count(client, session: Session):
    song = Song(title="Silent Night", artist="Joseph Mohr", primary_language="German")
    session.add(song)
    session.commit()
    session.refresh(song)
    session.add(SongLyrics(song_id=song.id, language="English", content="Silent night, holy night"))
    session.add(SongLyrics(song_id=song.id, language="German", content="Stille Nacht, heilige Nacht", is_original=True))
    session.commit()

    response = client.get(f"/api/songs/{song.id}")
    assert response.status_code == 200
    data = response.json()
    assert data["title"] == "Silent Night"
    # レスポンスは加算前の値
    assert data["viewCount"] == 0
    assert [l["language"] for l in data["lyrics"]] == ["German", "English"]
    assert data["lyrics"][0]["isOriginal"] is True

    session.refresh(song)
    assert song.view_count == 1

    response = client.get(f"/api/songs/{song.id}")
    assert response.json()["viewCount"] == 1
    session.refresh(song)
    assert song.view_count == 2


def test_get_song_not_found(client):
    response = client.get("/api/songs/9999")
    assert response.status_code == 404
    assert response.json() == {"message": "Song not found"}


def test_get_song_non_numeric_id_is_bad_request(client):
    response = client.get("/api/songs/abc")
    assert response.status_code == 400
    assert response.json()["message"] == "Invalid request data"


def test_create_song_requires_auth(client, session: Session):
    response = client.post("/api/songs", json={
        "title": "Amazing Grace", "artist": "John Newton", "primaryLanguage": "English",
    })
    assert response.status_code == 401
    assert response.json() == {"message": "Unauthorized"}
    assert session.exec(select(Song)).all() == []


def test_create_song(client, session: Session, auth_headers):
    response = client.post("/api/songs", headers=auth_headers(), json={
        "title": "Amazing Grace",
        "artist": "John Newton",
        "primaryLanguage": "English",
        "tags": ["hymn", "grace"],
        "viewCount": 500,
    })
    assert response.status_code == 201
    data = response.json()
    assert data["id"] > 0
    assert data["viewCount"] == 0
    assert data["tags"] == ["hymn", "grace"]
    assert data["createdBy"] == "user-1"

    db_song = session.get(Song, data["id"])
    assert db_song.title == "Amazing Grace"
    assert db_song.created_by == "user-1"


def test_create_song_accepts_snake_case_and_defaults_tags(client, auth_headers):
    response = client.post("/api/songs", headers=auth_headers(), json={
        "title": "Be Thou My Vision",
        "artist": "Traditional",
        "primary_language": "Irish",
    })
    assert response.status_code == 201
    assert response.json()["tags"] == []
    assert response.json()["primaryLanguage"] == "Irish"


def test_create_song_validation_error(client, auth_headers):
    response = client.post("/api/songs", headers=auth_headers(), json={
        "artist": "John Newton",
        "primaryLanguage": "English",
    })
    assert response.status_code == 400
    body = response.json()
    assert body["message"] == "Invalid request data"
    assert any(err["field"] == "title" for err in body["errors"])

    response = client.post("/api/songs", headers=auth_headers(), json={
        "title": "",
        "artist": "John Newton",
        "primaryLanguage": "English",
    })
    assert response.status_code == 400


def test_update_song(client, session: Session, auth_headers):
    song = Song(title="Old", artist="Someone", primary_language="English", tags=["a"])
    session.add(song)
    session.commit()
    session.refresh(song)

    response = client.patch(f"/api/songs/{song.id}", headers=auth_headers(), json={"title": "New", "tags": ["b"]})
    assert response.status_code == 200
    assert response.json()["title"] == "New"
    assert response.json()["artist"] == "Someone"
    assert response.json()["tags"] == ["b"]

    session.refresh(song)
    assert song.title == "New"

    response = client.patch("/api/songs/9999", headers=auth_headers(), json={"title": "x"})
    assert response.status_code == 404


def test_list_songs_huge_offset_is_empty(client, session: Session):
    _seed_songs(session)
    response = client.get("/api/songs", params={"offset": "99999999999999999999"})
    assert response.status_code == 200
    assert response.json() == []


def test_update_song_rejects_explicit_null(client, session: Session, auth_headers):
    song = Song(title="Keep Me", artist="Someone", primary_language="English", tags=["hymn"])
    session.add(song)
    session.commit()
    session.refresh(song)

    for payload in ({"title": None}, {"tags": None}, {"primaryLanguage": None}):
        response = client.patch(f"/api/songs/{song.id}", headers=auth_headers(), json=payload)
        assert response.status_code == 400
        assert response.json()["message"] == "Invalid request data"

    session.refresh(song)
    assert song.title == "Keep Me"
    assert song.tags == ["hymn"]
    assert song.primary_language == "English"


def test_out_of_range_song_id_is_bad_request(client, auth_headers):
    huge = "99999999999999999999"

    response = client.get(f"/api/songs/{huge}")
    assert response.status_code == 400
    assert response.json()["message"] == "Invalid request data"

    assert client.patch(f"/api/songs/{huge}", headers=auth_headers(), json={"title": "x"}).status_code == 400
    assert client.get(f"/api/songs/{huge}/lyrics").status_code == 400
    assert client.get(f"/api/favorites/{huge}/check", headers=auth_headers()).status_code == 400
    assert client.delete(f"/api/favorites/{huge}", headers=auth_headers()).status_code == 400


def test_search_songs_by_accented_tag(client, session: Session):
    session.add(Song(title="Hymne", artist="Anon", primary_language="French", tags=["Église"]))
    session.commit()

    for query in ("Église", "église", "ÉGLISE"):
        response = client.get("/api/songs/search", params={"q": query})
        assert response.status_code == 200
        assert [s["title"] for s in response.json()] == ["Hymne"]


def test_song_timestamps_are_utc(client, session: Session):
    _seed_songs(session)

    response = client.get("/api/songs")
    created_at = datetime.fromisoformat(response.json()[0]["createdAt"].replace("Z", "+00:00"))
    assert created_at == BASE_TIME + timedelta(days=2)
    assert created_at.utcoffset() == timedelta(0)

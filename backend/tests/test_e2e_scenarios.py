from fastapi.testclient import TestClient
from sqlmodel import Session, select
from models import Song, SongLyrics, EditSuggestion

# --- Scenario 1: Catalog a song and read it ---

def test_e2e_create_and_view_song(client: TestClient, session: Session, auth_headers):
    """
    Scenario: Contributor adds a hymn -> Visitor opens it -> View count grows
    """
    headers = auth_headers("contributor-1")

    # 1. 曲の登録
    response = client.post("/api/songs", headers=headers, json={
        "title": "Amazing Grace",
        "artist": "John Newton",
        "primaryLanguage": "English",
        "tags": ["hymn"],
    })
    assert response.status_code == 201
    song = response.json()
    assert song["viewCount"] == 0

    # 2. 原語版と翻訳を追加
    response = client.post(f"/api/songs/{song['id']}/lyrics", headers=headers, json={
        "language": "English", "content": "Amazing grace! How sweet the sound", "isOriginal": True,
    })
    assert response.status_code == 201
    response = client.post(f"/api/songs/{song['id']}/lyrics", headers=headers, json={
        "language": "Spanish", "content": "Sublime gracia del Señor",
    })
    assert response.status_code == 201

    # 3. 未ログインで閲覧 (加算前の値が返る)
    response = client.get(f"/api/songs/{song['id']}")
    assert response.status_code == 200
    detail = response.json()
    assert detail["viewCount"] == 0
    assert [l["language"] for l in detail["lyrics"]] == ["English", "Spanish"]

    db_song = session.get(Song, song["id"])
    session.refresh(db_song)
    assert db_song.view_count == 1

    # 4. 人気順・検索・アクティビティに反映される
    popular = client.get("/api/songs/popular").json()
    assert popular[0]["id"] == song["id"]
    assert popular[0]["viewCount"] == 1

    assert client.get("/api/songs/search", params={"q": "a"}).json() == []
    assert [s["id"] for s in client.get("/api/songs/search", params={"q": "newton"}).json()] == [song["id"]]

    activity = client.get("/api/activity").json()
    assert {item["type"] for item in activity} == {"song", "lyrics"}
    assert all(item["userId"] == "contributor-1" for item in activity)


# --- Scenario 2: Favorites ---

def test_e2e_favorites_flow(client: TestClient, session: Session, auth_headers):
    """
    Scenario: User saves a song -> Sees it in the list -> Removes it
    """
    song = Song(title="How Great Thou Art", artist="Carl Boberg", primary_language="Swedish")
    session.add(song)
    session.commit()
    session.refresh(song)
    song_id = song.id
    headers = auth_headers("listener-1")

    assert client.post("/api/favorites", headers=headers, json={"songId": song_id}).status_code == 201

    favorites = client.get("/api/favorites", headers=headers).json()
    assert len(favorites) == 1
    assert favorites[0]["song"]["title"] == "How Great Thou Art"

    assert client.delete(f"/api/favorites/{song_id}", headers=headers).status_code == 204
    assert client.get("/api/favorites", headers=headers).json() == []
    assert client.get(f"/api/favorites/{song_id}/check", headers=headers).json() == {"isFavorite": False}


# --- Scenario 3: Community correction ---

def test_e2e_edit_suggestion_review(client: TestClient, session: Session, auth_headers):
    """
    Scenario: Reader spots a typo -> Suggests a fix -> Moderator approves -> Lyrics change
    """
    song = Song(title="Stille Nacht", artist="Joseph Mohr", primary_language="German")
    session.add(song)
    session.commit()
    session.refresh(song)
    lyrics = SongLyrics(song_id=song.id, language="German", content="Stille Nacht, heilige Nach", is_original=True)
    session.add(lyrics)
    session.commit()
    session.refresh(lyrics)
    song_id, lyrics_id = song.id, lyrics.id

    reader = auth_headers("reader-1")
    moderator = auth_headers("moderator-1")

    response = client.post("/api/edit-suggestions", headers=reader, json={
        "songId": song_id,
        "lyricsId": lyrics_id,
        "suggestedContent": "Stille Nacht, heilige Nacht",
        "reason": "Missing letter",
    })
    assert response.status_code == 201
    suggestion_id = response.json()["id"]

    pending = client.get("/api/edit-suggestions", headers=moderator, params={"status": "pending"}).json()
    assert [s["id"] for s in pending] == [suggestion_id]

    response = client.patch(f"/api/edit-suggestions/{suggestion_id}", headers=moderator,
                            json={"status": "approved"})
    assert response.status_code == 200
    assert response.json()["reviewedBy"] == "moderator-1"

    detail = client.get(f"/api/songs/{song_id}").json()
    assert detail["lyrics"][0]["content"] == "Stille Nacht, heilige Nacht"

    # 承認済みの提案は再レビューできない
    response = client.patch(f"/api/edit-suggestions/{suggestion_id}", headers=moderator,
                            json={"status": "rejected"})
    assert response.status_code == 400

    stored = session.exec(select(EditSuggestion).where(EditSuggestion.id == suggestion_id)).one()
    session.refresh(stored)
    assert stored.status == "approved"

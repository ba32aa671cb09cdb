from utils.logger import get_logger
from sqlmodel import Session, select
from models import Song, SongLyrics

logger = get_logger(__name__)

# パブリックドメインの讃美歌 (各言語1番のみ)
SAMPLE_SONGS = [
    {
        "title": "Amazing Grace",
        "artist": "John Newton",
        "primary_language": "English",
        "tags": ["hymn", "grace", "classic"],
        "lyrics": [
            {
                "language": "English",
                "is_original": True,
                "content": (
                    "Amazing grace! How sweet the sound\n"
                    "That saved a wretch like me!\n"
                    "I once was lost, but now am found;\n"
                    "Was blind, but now I see."
                ),
            },
            {
                "language": "Spanish",
                "is_original": False,
                "content": (
                    "Sublime gracia del Señor,\n"
                    "que a un infeliz salvó;\n"
                    "fui ciego mas hoy miro yo,\n"
                    "perdido y él me halló."
                ),
            },
        ],
    },
    {
        "title": "Holy, Holy, Holy",
        "artist": "Reginald Heber",
        "primary_language": "English",
        "tags": ["hymn", "trinity", "worship"],
        "lyrics": [
            {
                "language": "English",
                "is_original": True,
                "content": (
                    "Holy, holy, holy! Lord God Almighty!\n"
                    "Early in the morning our song shall rise to Thee;\n"
                    "Holy, holy, holy, merciful and mighty!\n"
                    "God in three Persons, blessed Trinity!"
                ),
            },
        ],
    },
    {
        "title": "Ein feste Burg ist unser Gott",
        "artist": "Martin Luther",
        "primary_language": "German",
        "tags": ["hymn", "reformation", "classic"],
        "lyrics": [
            {
                "language": "German",
                "is_original": True,
                "content": (
                    "Ein feste Burg ist unser Gott,\n"
                    "ein gute Wehr und Waffen.\n"
                    "Er hilft uns frei aus aller Not,\n"
                    "die uns jetzt hat betroffen."
                ),
            },
            {
                "language": "English",
                "is_original": False,
                "content": (
                    "A mighty fortress is our God,\n"
                    "A bulwark never failing;\n"
                    "Our helper He amid the flood\n"
                    "Of mortal ills prevailing."
                ),
            },
        ],
    },
]

def seed_sample_songs(session: Session) -> int:
    """サンプル曲を投入する。タイトル+アーティストが既にあればスキップ (何度実行しても同じ結果)"""
    created = 0
    for data in SAMPLE_SONGS:
        existing = session.exec(
            select(Song).where(Song.title == data["title"], Song.artist == data["artist"])
        ).first()
        if existing:
            continue

        song = Song(
            title=data["title"],
            artist=data["artist"],
            primary_language=data["primary_language"],
            tags=list(data["tags"]),
        )
        session.add(song)
        session.commit()
        session.refresh(song)

        for lyrics in data["lyrics"]:
            session.add(SongLyrics(song_id=song.id, **lyrics))
        session.commit()
        created += 1

    if created:
        logger.info(f"Seeded {created} sample songs.")
    return created

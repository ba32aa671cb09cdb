# Import moved models
from domain.models.user import User
from domain.models.song import Song
from domain.models.lyrics import SongLyrics
from domain.models.favorite import Favorite
from domain.models.edit_suggestion import EditSuggestion

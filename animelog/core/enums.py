import enum
from enum import IntEnum
from typing import List, Optional

class AnimeStatus(str, enum.Enum):
    """Watch progress of a list entry. Absence of a status is stored as NULL."""
    WATCHING = "watching"
    WATCHED = "watched"

class AnimeGenre(IntEnum):
    """Jikan anime genres offered as preferences - https://api.jikan.moe/v4/genres/anime"""
    ACTION = 1
    ADVENTURE = 2
    COMEDY = 4
    DRAMA = 8
    FANTASY = 10
    HORROR = 14
    MYSTERY = 7
    ROMANCE = 22
    SCI_FI = 24
    SLICE_OF_LIFE = 36
    SPORTS = 30
    SUPERNATURAL = 37
    THRILLER = 41

# Labels that don't follow the NAME -> "Name" rule
_LABEL_OVERRIDES = {
    AnimeGenre.SCI_FI: "Sci-Fi",
    AnimeGenre.SLICE_OF_LIFE: "Slice of Life",
}

class GenreHelper:
    """Maps preference labels to Jikan genre ids and back"""
    
    @staticmethod
    def get_genre_label(genre_id: int) -> str:
        """Genre ID'sinden etiket döndür"""
        try:
            genre = AnimeGenre(genre_id)
        except ValueError:
            return "Unknown"
        return _LABEL_OVERRIDES.get(genre, genre.name.replace('_', ' ').title())
    
    @staticmethod
    def get_all_genres() -> dict:
        """Tüm genre'leri Label:ID formatında döndür, tanım sırasıyla"""
        return {GenreHelper.get_genre_label(genre.value): genre.value for genre in AnimeGenre}
    
    @staticmethod
    def get_all_labels() -> List[str]:
        return list(GenreHelper.get_all_genres().keys())
    
    @staticmethod
    def get_genre_id(label: str) -> Optional[int]:
        """Resolve a free-text label; unknown labels give None"""
        return GenreHelper.get_all_genres().get(label)

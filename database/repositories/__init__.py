from database.repositories.base import BaseRepository
from database.repositories.profile import ProfileRepository

__all__ = [
    'BaseRepository',
    'ProfileRepository',
]

"""Court data access."""
from courtbook.models.court import Court
from courtbook.repositories.base import BaseRepository


class CourtRepository(BaseRepository[Court]):
    model = Court

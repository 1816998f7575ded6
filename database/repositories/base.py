from typing import Any, List, Optional

from sqlalchemy.orm import Session
from sqlalchemy.sql import Select


class BaseRepository:
    """Session-bound repository. Transactions are owned by the unit of work."""

    def __init__(self, db: Session):
        self.db = db

    def _all(self, stmt: Select) -> List[Any]:
        return list(self.db.execute(stmt).scalars().all())

    def _one_or_none(self, stmt: Select) -> Optional[Any]:
        return self.db.execute(stmt).scalar_one_or_none()

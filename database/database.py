import os
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

DATABASE_URL = os.environ.get("DATABASE_URL", "sqlite:///skillbridge.db")


def create_session_factory(url: Optional[str] = None) -> sessionmaker:
    """Session factory bound to a new engine for url (default: DATABASE_URL)."""
    engine = create_engine(url or DATABASE_URL)
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


SessionLocal = create_session_factory()

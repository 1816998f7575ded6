import contextlib
from typing import Iterator, Optional

from sqlalchemy.orm import sessionmaker

from database.database import SessionLocal
from database.repositories import ProfileRepository


@contextlib.contextmanager
def profile_uow(session_factory: Optional[sessionmaker] = None) -> Iterator[ProfileRepository]:
    """Scope one ProfileRepository to a single Session and transaction.

    The transaction commits when the block exits cleanly and rolls back when
    it raises; the session is closed either way.

    Usage:
        with profile_uow(ctx.session_factory) as repo:
            results = orchestrator.candidates_for_job_id(repo, job_id)
    """
    factory = session_factory or SessionLocal
    with factory() as session, session.begin():
        yield ProfileRepository(session)

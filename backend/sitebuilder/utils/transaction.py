from contextlib import contextmanager
from sitebuilder.extensions import db

@contextmanager
def transactional(session=None):
    """Context manager for database transactions."""
    session = session if session is not None else db.session
    try:
        yield
        session.commit()
    except Exception:
        session.rollback()
        raise

from contextlib import contextmanager
import logging

from sqlalchemy.exc import SQLAlchemyError

from models import db
from app.services.errors import ShopError, StoreError

logger = logging.getLogger(__name__)


@contextmanager
def transactional(message="DB transaction failed", session=None):
    """Wrap a unit of work in one database transaction.

    Commits when the block exits cleanly. Any exception rolls back every
    write made inside the block. Driver errors are logged with their
    traceback and re-raised as ``StoreError`` so callers never see
    driver text; domain errors pass through unchanged.
    """
    session = session if session is not None else db.session
    try:
        yield session
        session.commit()
    except ShopError:
        session.rollback()
        raise
    except SQLAlchemyError as e:
        logger.error(f"{message}: %s", e, exc_info=True)
        session.rollback()
        raise StoreError(message) from e
    except Exception as e:
        logger.error(f"{message}: %s", e, exc_info=True)
        session.rollback()
        raise

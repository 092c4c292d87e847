from contextlib import contextmanager
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sitecms.extensions import db
from sitecms.storage.base import StorageError, UniqueConstraintError

@contextmanager
def storage_errors(kind=None, key=None, value=None):
    """Translate SQLAlchemy failures into storage errors, rolling back the session."""
    try:
        yield
    except IntegrityError as exc:
        db.session.rollback()
        if kind is not None and key is not None:
            raise UniqueConstraintError(kind.name, key, value) from exc
        raise StorageError("Integrity constraint violated") from exc
    except SQLAlchemyError as exc:
        db.session.rollback()
        raise StorageError("Database operation failed") from exc

@contextmanager
def transactional(kind=None, key=None, value=None):
    """Context manager for database transactions."""
    with storage_errors(kind, key, value):
        try:
            yield
            db.session.commit()
        except SQLAlchemyError:
            raise
        except Exception:
            db.session.rollback()
            raise

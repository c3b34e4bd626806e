"""
Shared repository plumbing: commit with constraint error translation
"""
import logging

from sqlalchemy.exc import StatementError
from sqlalchemy.orm import Session

from order_store.exceptions import is_constraint_error, translate_integrity_error

logger = logging.getLogger(__name__)


class BaseRepository:
    """Base class holding the session every repository works in"""
    
    def __init__(self, db: Session):
        self.db = db
    
    def _commit(self, *instances) -> None:
        """
        Commit the unit of work and refresh the given instances
        
        Raises:
            ConstraintViolationError: If the database rejected the write.
                The session is rolled back first, so nothing is persisted.
        """
        try:
            self.db.commit()
        except StatementError as e:
            self.db.rollback()
            if not is_constraint_error(e):
                raise
            error = translate_integrity_error(e)
            logger.warning("Write rejected by constraint %s: %s", error.constraint, error)
            raise error from e
        
        for instance in instances:
            self.db.refresh(instance)

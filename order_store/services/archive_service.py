"""
Archive Service - moves aged orders and their items to the archive tables
"""
import logging
from datetime import date
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from order_store.exceptions import ArchiveError
from order_store.repositories.archive_repository import ArchiveRepository
from order_store.schemas.archive import ArchiveResult, ArchivedOrderResponse, ArchivedItemResponse

logger = logging.getLogger(__name__)

# Ids per INSERT ... SELECT / DELETE statement; keeps bound parameter counts
# under SQLite's limit
BATCH_SIZE = 500


def default_cutoff(today: date) -> date:
    """One calendar year before today; 29 February maps to 28 February"""
    try:
        return today.replace(year=today.year - 1)
    except ValueError:
        return today.replace(year=today.year - 1, day=28)


def _batches(ids: List[int], size: int):
    for start in range(0, len(ids), size):
        yield ids[start:start + size]


class ArchiveService:
    """Service layer for the order archive"""
    
    def __init__(self, db: Session):
        self.db = db
        self.repository = ArchiveRepository(db)
    
    def archive_orders_before(self, cutoff: date) -> ArchiveResult:
        """
        Move every order dated before the cutoff, with its items, to the archive
        
        Runs as one transaction. For each batch of orders, items are copied and
        deleted before their orders are copied and deleted, so the
        order_items cascade never drops a row that was not archived.
        
        Args:
            cutoff: Orders with order_date strictly before this date are archived
        
        Returns:
            Number of orders and items moved; zero when nothing is eligible
        
        Raises:
            ArchiveError: If any step fails. Nothing is moved in that case.
        """
        logger.info("Archiving orders dated before %s", cutoff)
        try:
            orders_archived, items_archived = self._move(cutoff)
            self.db.commit()
        except ArchiveError:
            self.db.rollback()
            logger.error("Archiving orders before %s aborted; rolled back", cutoff)
            raise
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("Archiving orders before %s failed; rolled back", cutoff)
            raise ArchiveError(f"Archiving orders before {cutoff} failed: {e}") from e
        
        # Bulk statements bypass the identity map
        self.db.expire_all()
        
        logger.info(
            "Archived %s orders and %s items dated before %s",
            orders_archived, items_archived, cutoff
        )
        return ArchiveResult(cutoff=cutoff, orders_archived=orders_archived, items_archived=items_archived)
    
    def _move(self, cutoff: date):
        order_ids = self.repository.lock_orders_before(cutoff)
        orders_archived = 0
        items_archived = 0
        
        for batch in _batches(order_ids, BATCH_SIZE):
            items_copied = self.repository.copy_items(batch)
            items_deleted = self.repository.delete_items(batch)
            if items_copied != items_deleted:
                raise ArchiveError(
                    f"Copied {items_copied} order items but deleted {items_deleted}"
                )
            
            orders_copied = self.repository.copy_orders(batch)
            orders_deleted = self.repository.delete_orders(batch)
            if not orders_copied == orders_deleted == len(batch):
                raise ArchiveError(
                    f"Expected to move {len(batch)} orders, copied {orders_copied} "
                    f"and deleted {orders_deleted}"
                )
            
            orders_archived += orders_deleted
            items_archived += items_deleted
        
        return orders_archived, items_archived
    
    def list_archived_orders(self, skip: int = 0, limit: int = 100) -> List[ArchivedOrderResponse]:
        """Get archived orders with pagination"""
        orders = self.repository.get_orders(skip=skip, limit=limit)
        return [ArchivedOrderResponse.model_validate(o) for o in orders]
    
    def get_archived_order(self, order_id: int) -> Optional[ArchivedOrderResponse]:
        """Get one archived order by its original ID"""
        order = self.repository.get_order(order_id)
        if not order:
            return None
        return ArchivedOrderResponse.model_validate(order)
    
    def get_archived_items(self, order_id: int) -> List[ArchivedItemResponse]:
        """Get the archived items of one archived order"""
        return [ArchivedItemResponse.model_validate(i) for i in self.repository.get_items(order_id)]

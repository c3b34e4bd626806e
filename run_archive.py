#!/usr/bin/env python
"""
Script a job scheduler runs to archive orders older than one year
"""
import sys
from datetime import date

from order_store.config import configure_logging
from order_store.database import SessionLocal
from order_store.exceptions import ArchiveError
from order_store.services.archive_service import ArchiveService, default_cutoff


def main() -> int:
    configure_logging()
    db = SessionLocal()
    try:
        ArchiveService(db).archive_orders_before(default_cutoff(date.today()))
    except ArchiveError:
        return 1
    finally:
        db.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())

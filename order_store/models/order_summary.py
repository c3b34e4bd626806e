"""
Order summary view: one row per order that has items, with its total
"""
from sqlalchemy import Table, Column, Integer, Date, Numeric, Enum, MetaData, DDL, event

from order_store.database import Base
from order_store.models.order import OrderStatus

VIEW_NAME = "v_customers_orders"

_VIEW_SELECT = """
SELECT o.id AS order_id,
       o.order_date AS order_date,
       o.status AS status,
       SUM(oi.quantity * oi.unit_price) AS order_total
FROM orders o
JOIN order_items oi ON oi.order_id = o.id
GROUP BY o.id, o.order_date, o.status
"""

# Views live outside Base.metadata so create_all never emits CREATE TABLE for them
view_metadata = MetaData()

order_summaries = Table(
    VIEW_NAME,
    view_metadata,
    Column("order_id", Integer, primary_key=True),
    Column("order_date", Date),
    Column(
        "status",
        Enum(
            OrderStatus,
            name="order_status",
            values_callable=lambda enum_cls: [m.value for m in enum_cls],
            create_constraint=False,
            native_enum=False,
        ),
    ),
    Column("order_total", Numeric(10, 2)),
)

event.listen(
    Base.metadata,
    "after_create",
    DDL(f"CREATE OR REPLACE VIEW {VIEW_NAME} AS {_VIEW_SELECT}").execute_if(dialect="postgresql"),
)
event.listen(
    Base.metadata,
    "after_create",
    DDL(f"CREATE VIEW IF NOT EXISTS {VIEW_NAME} AS {_VIEW_SELECT}").execute_if(dialect="sqlite"),
)
event.listen(
    Base.metadata,
    "before_drop",
    DDL(f"DROP VIEW IF EXISTS {VIEW_NAME}"),
)

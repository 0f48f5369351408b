"""Account-scoped reads of scored records with their supplier names."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.db.models import Invoice as InvoiceDB
from src.db.models import Shipment as ShipmentDB
from src.db.models import Supplier as SupplierDB
from src.db.models import Transaction as TransactionDB


async def _list_with_supplier(session: AsyncSession, model, account_id: str) -> list[tuple]:
    stmt = (
        select(model, SupplierDB.name)
        .outerjoin(SupplierDB, model.supplier_id == SupplierDB.id)
        .where(model.account_id == account_id)
        .order_by(model.created_at.desc())
    )
    result = await session.execute(stmt)
    return [(row[0], row[1]) for row in result.all()]


async def list_invoices(
    session: AsyncSession, account_id: str
) -> list[tuple[InvoiceDB, str | None]]:
    return await _list_with_supplier(session, InvoiceDB, account_id)


async def list_shipments(
    session: AsyncSession, account_id: str
) -> list[tuple[ShipmentDB, str | None]]:
    return await _list_with_supplier(session, ShipmentDB, account_id)


async def list_transactions(
    session: AsyncSession, account_id: str
) -> list[tuple[TransactionDB, str | None]]:
    return await _list_with_supplier(session, TransactionDB, account_id)

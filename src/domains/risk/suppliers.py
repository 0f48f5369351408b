"""Supplier registry. Suppliers change only through explicit status updates."""

import structlog
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.db.models import Supplier as SupplierDB
from src.db.models import new_id, utcnow

from .errors import SupplierNotFoundError
from .models import SupplierStatus, SupplierSubmission
from .persistence import unit_of_work

logger = structlog.get_logger()


async def register_supplier(
    session: AsyncSession,
    account_id: str,
    submission: SupplierSubmission,
) -> SupplierDB:
    supplier = SupplierDB(
        id=new_id(),
        account_id=account_id,
        created_at=utcnow(),
        name=submission.name,
        contact_email=submission.contact_email,
        phone=submission.phone,
        address=submission.address,
        status=SupplierStatus.ACTIVE.value,
        risk_score=0.0,
    )
    async with unit_of_work(session, "register_supplier", supplier_id=supplier.id):
        session.add(supplier)

    logger.info("supplier_registered", supplier_id=supplier.id, account_id=account_id)
    return supplier


async def list_suppliers(session: AsyncSession, account_id: str) -> list[SupplierDB]:
    stmt = (
        select(SupplierDB)
        .where(SupplierDB.account_id == account_id)
        .order_by(SupplierDB.created_at.desc())
    )
    result = await session.execute(stmt)
    return list(result.scalars().all())


async def update_supplier_status(
    session: AsyncSession,
    account_id: str,
    supplier_id: str,
    status: SupplierStatus | str,
) -> SupplierDB:
    new_status = SupplierStatus(status)

    stmt = select(SupplierDB).where(
        SupplierDB.id == supplier_id,
        SupplierDB.account_id == account_id,
    )
    result = await session.execute(stmt)
    supplier = result.scalar_one_or_none()
    if supplier is None:
        raise SupplierNotFoundError(f"supplier {supplier_id} not found")

    previous = supplier.status
    async with unit_of_work(session, "update_supplier_status", supplier_id=supplier_id):
        supplier.status = new_status.value

    logger.info(
        "supplier_status_updated",
        supplier_id=supplier_id,
        account_id=account_id,
        previous_status=previous,
        status=new_status.value,
    )
    return supplier

"""
storefront/routes/admin.py
Back-office: figures, order and student listings, refunds, CSV downloads.

Every route sits behind the admin role gate.
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, Response

from storefront.config.feature_flags import feature_flags
from storefront.errors import ErrorCode, ForbiddenError
from storefront.schemas.admin import (
    AdminOrderRow,
    AdminOverviewOut,
    AdminStatsOut,
    RefundResponse,
    StudentRow,
)
from storefront.schemas.common import Notice
from storefront.security.session import SessionContext, require_admin
from storefront.services import admin_service, csv_export_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["Admin"])


def _csv_response(body: str, filename: str) -> Response:
    return Response(
        content=body,
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


def _require_export_enabled() -> None:
    if not feature_flags.FEATURE_ADMIN_EXPORT:
        raise ForbiddenError("CSV export is disabled", code=ErrorCode.FEATURE_DISABLED)


@router.get("", response_model=AdminOverviewOut)
async def get_overview(ctx: SessionContext = Depends(require_admin)):
    """Everything the admin dashboard shows in one call."""
    return AdminOverviewOut(
        stats=await admin_service.compute_stats(ctx.db),
        orders=await admin_service.list_order_rows(ctx.db),
        students=await admin_service.list_students(ctx.db),
    )


@router.get("/stats", response_model=AdminStatsOut)
async def get_stats(ctx: SessionContext = Depends(require_admin)):
    return await admin_service.compute_stats(ctx.db)


@router.get("/orders", response_model=List[AdminOrderRow])
async def list_orders(ctx: SessionContext = Depends(require_admin)):
    return await admin_service.list_order_rows(ctx.db)


@router.get("/students", response_model=List[StudentRow])
async def list_students(ctx: SessionContext = Depends(require_admin)):
    return await admin_service.list_students(ctx.db)


@router.post("/orders/{order_id}/refund", response_model=RefundResponse)
async def refund_order(order_id: int, ctx: SessionContext = Depends(require_admin)):
    order = await admin_service.refund_order(ctx.db, order_id, admin_id=ctx.user_id)
    return RefundResponse(
        order_id=order.id,
        payment_status=order.payment_status,
        notice=Notice(title="Success", message="Refund processed successfully"),
    )


@router.get("/orders/export")
async def export_orders(ctx: SessionContext = Depends(require_admin)):
    _require_export_enabled()
    rows = await admin_service.list_order_rows(ctx.db)
    logger.info(f"Admin {ctx.user_id} exported {len(rows)} orders")
    return _csv_response(csv_export_service.orders_csv(rows), "orders.csv")


@router.get("/students/export")
async def export_students(ctx: SessionContext = Depends(require_admin)):
    _require_export_enabled()
    profiles = await admin_service.list_students(ctx.db)
    logger.info(f"Admin {ctx.user_id} exported {len(profiles)} students")
    return _csv_response(csv_export_service.students_csv(profiles), "students.csv")

"""
storefront/routes/__init__.py
Route registration
"""
from fastapi import APIRouter
from storefront.routes import auth, session, courses, cart, checkout, dashboard, admin, contact

router = APIRouter()

# Identity
router.include_router(auth.router)
router.include_router(session.router)

# Storefront
router.include_router(courses.router)
router.include_router(cart.router)
router.include_router(checkout.router)
router.include_router(dashboard.router)
router.include_router(contact.router)

# Back-office
router.include_router(admin.router)

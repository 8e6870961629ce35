"""
API Router.

Aggregates all /api endpoints. Every router except auth's login is
protected by the bearer-token dependency.
"""

from fastapi import APIRouter
from backoffice.app.api.endpoints import auth, customers, transactions, settings

router = APIRouter()

router.include_router(auth.router)
router.include_router(customers.router)
router.include_router(transactions.router)
router.include_router(settings.router)

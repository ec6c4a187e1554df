"""API v1 routers.

Resources:
    /integrations/payable          - Payable + assignor intake (public)
    /integrations/accounts, /auth  - Accounts and access tokens (public)
    /integrations/assignor         - Assignor management (Bearer token)
    /integrations/payable/{id}     - Payable management (Bearer token)
"""

from fastapi import APIRouter

from src.presentation.api.v1.accounts import router as accounts_router
from src.presentation.api.v1.assignors import router as assignors_router
from src.presentation.api.v1.integrations import router as integrations_router
from src.presentation.api.v1.payables import router as payables_router

v1_router = APIRouter()

v1_router.include_router(integrations_router)
v1_router.include_router(accounts_router)
v1_router.include_router(assignors_router)
v1_router.include_router(payables_router)

__all__ = [
    "v1_router",
    "accounts_router",
    "assignors_router",
    "integrations_router",
    "payables_router",
]

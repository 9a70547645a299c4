"""
Bank Accounts API: FastAPI application.

This is the entry point for the application.
All routers and exception handlers are registered here.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bank_accounts.config import get_settings
from bank_accounts.logging_config import setup_logging
from bank_accounts.api.accounts import router as accounts_router
from bank_accounts.api.customers import router as customers_router
from bank_accounts.api.errors import register_exception_handlers
from bank_accounts.api.health import router as health_router
from bank_accounts.api.operations import router as operations_router

settings = get_settings()

setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Customers, current and savings accounts, and the "
                "deposits, withdrawals and transfers between them",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Register routers
app.include_router(health_router)
app.include_router(customers_router, prefix=settings.API_PREFIX)
app.include_router(accounts_router, prefix=settings.API_PREFIX)
app.include_router(operations_router, prefix=settings.API_PREFIX)

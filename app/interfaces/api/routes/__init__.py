from fastapi import FastAPI

from .hello import router as hello_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application.

    Only the greeting router exists; unmatched paths and methods fall through
    to the framework defaults (404 and 405).
    """

    app.include_router(hello_router)

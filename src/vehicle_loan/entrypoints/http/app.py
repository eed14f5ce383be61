from fastapi import FastAPI

from vehicle_loan.entrypoints.http.error_responses import ErrorResponse
from vehicle_loan.entrypoints.http.exception_handlers import register_exception_handlers
from vehicle_loan.entrypoints.http.routes.health import router as health_router
from vehicle_loan.entrypoints.http.routes.installments import router as installments_router


def build_app() -> FastAPI:
    app = FastAPI(
        title="Vehicle Loan API",
        description="""
        Vehicle loan calculator API.

        ## Features
        - Validate car and motorcycle loan inputs
        - Calculate the monthly installment and interest rate for every loan year

        ## Configuration
        Interest rates and the minimum down payment come from LOAN_* environment variables.

        ## Error Handling
        All errors return structured JSON responses with error codes.
        See the error response schemas in the API documentation.
        """,
        version="0.1.0",
        docs_url="/docs",  # Swagger UI
        redoc_url="/redoc",  # ReDoc alternative
        openapi_url="/openapi.json",  # OpenAPI schema
        responses={
            422: {"model": ErrorResponse, "description": "Validation error"},
            500: {"model": ErrorResponse, "description": "Unexpected error"},
        },
    )

    # Register global exception handlers
    register_exception_handlers(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(installments_router, prefix="/v1")

    return app


app = build_app()

"""FastAPI application factory for the storefront domain."""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from storefront.api.errors import register_error_handlers
from storefront.api.routes import order_router
from storefront.order.placement import OrderCoordinator
from storefront.utils.logging import add_context, clear_context


def create_app(domain, coordinator: OrderCoordinator | None = None) -> FastAPI:
    """Build the HTTP app around an initialized domain.

    The order coordinator is created once here and shared by every request;
    pass one in to substitute its unit-of-work factory.
    """
    app = FastAPI(
        title="Storefront API",
        description="Transactional order placement",
    )
    app.state.coordinator = coordinator or OrderCoordinator(domain)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def domain_context_middleware(request: Request, call_next):
        """Push the storefront domain context for each request."""
        clear_context()
        add_context(method=request.method, path=request.url.path)
        try:
            with domain.domain_context():
                response = await call_next(request)
        finally:
            clear_context()
        return response

    register_error_handlers(app)
    app.include_router(order_router)

    @app.get("/health")
    async def health():
        return JSONResponse(content={"status": "ok", "domain": domain.name})

    return app

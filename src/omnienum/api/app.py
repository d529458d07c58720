# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""FastAPI application factory wiring the enum deserializer.

``create_app`` performs the one-time setup a service needs: it installs the
process-wide enum deserializer and the structured error handlers. Routers
using ``ModelWireBase`` request models are mounted by the caller.

Usage:
    >>> app = create_app()
    >>> app.include_router(orders_router)
    >>> # uvicorn omnienum.api.app:create_app --factory
"""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from omnienum.api.exception_handlers import register_exception_handlers
from omnienum.runtime.model_deserializer_settings import (
    ModelEnumDeserializerSettings,
)
from omnienum.runtime.registration import configure_enum_deserializer

logger = logging.getLogger(__name__)


def create_app(
    *,
    settings: ModelEnumDeserializerSettings | None = None,
) -> FastAPI:
    """Create a FastAPI application with enum error translation installed.

    Args:
        settings: Deserializer settings. Falls back to OMNIENUM_* environment
            variables when omitted.

    Returns:
        Configured FastAPI application.
    """
    configure_enum_deserializer(settings)

    app = FastAPI(
        title="OmniEnum",
        description="Typed enum deserialization with structured errors",
        version="0.1.0",
    )
    register_exception_handlers(app)

    @app.get("/health", tags=["infrastructure"])
    async def health_check() -> JSONResponse:
        """Liveness probe for load balancers and orchestrators."""
        return JSONResponse(content={"status": "healthy"})

    return app


__all__ = ["create_app"]

"""Request dispatch: routes each command or query to its handler, validating commands first."""

import logging
from typing import Any, Protocol

from pydantic import BaseModel

from app.repositories.products import ProductStore
from app.schemas.common import validate_model
from app.schemas.products import (
    CreateProductCommand,
    DeleteProductCommand,
    GetProductByIdQuery,
    GetProductsQuery,
    UpdateProductCommand,
)
from app.services.product_commands import (
    CreateProductHandler,
    DeleteProductHandler,
    UpdateProductHandler,
)
from app.services.product_queries import GetProductByIdHandler, GetProductsHandler

logger = logging.getLogger(__name__)


class Handler(Protocol):
    def handle(self, request: Any) -> Any: ...


class Pipeline:
    """
    Maps request types to handlers. Types registered with validate=True are
    re-validated against their model before the handler runs, so instances
    built with model_construct or mutated after creation cannot skip the rules.
    """

    def __init__(self) -> None:
        self._routes: dict[type[BaseModel], tuple[Handler, bool]] = {}

    def register(
        self,
        request_type: type[BaseModel],
        handler: Handler,
        validate: bool = False,
    ) -> None:
        self._routes[request_type] = (handler, validate)

    def send(self, request: BaseModel) -> Any:
        request_type = type(request)
        route = self._routes.get(request_type)
        if route is None:
            raise LookupError(f"No handler registered for {request_type.__name__}")
        handler, validate = route
        if validate:
            request = validate_model(request_type, request.model_dump())
        logger.debug("Dispatching %s", request_type.__name__)
        return handler.handle(request)


def build_product_pipeline(products: ProductStore) -> Pipeline:
    """Wire every product command and query against one store (one request's session)."""
    pipeline = Pipeline()
    pipeline.register(CreateProductCommand, CreateProductHandler(products), validate=True)
    pipeline.register(UpdateProductCommand, UpdateProductHandler(products), validate=True)
    # An unknown id, including 0, is a not-found, never a validation failure.
    pipeline.register(DeleteProductCommand, DeleteProductHandler(products))
    pipeline.register(GetProductByIdQuery, GetProductByIdHandler(products))
    pipeline.register(GetProductsQuery, GetProductsHandler(products))
    return pipeline

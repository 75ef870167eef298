"""Product catalog CRUD. Every route requires a bearer token."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response, status

from app.api.deps import get_current_user, get_product_pipeline
from app.core.exceptions import ApplicationError
from app.schemas.common import ErrorResponse
from app.schemas.products import (
    CreateProductCommand,
    DeleteProductCommand,
    GetProductByIdQuery,
    GetProductsQuery,
    ProductDto,
    UpdateProductCommand,
)
from app.services.pipeline import Pipeline

router = APIRouter(dependencies=[Depends(get_current_user)])

PipelineDep = Annotated[Pipeline, Depends(get_product_pipeline)]


@router.get("", response_model=list[ProductDto])
def list_products(pipeline: PipelineDep) -> list[ProductDto]:
    """All products, newest first."""
    return pipeline.send(GetProductsQuery())


@router.get(
    "/{product_id}",
    response_model=ProductDto,
    name="get_product",
    responses={404: {"model": ErrorResponse}},
)
def get_product(product_id: int, pipeline: PipelineDep) -> ProductDto:
    return pipeline.send(GetProductByIdQuery(id=product_id))


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
def create_product(
    body: CreateProductCommand,
    request: Request,
    pipeline: PipelineDep,
) -> Response:
    """Create a product; the Location header points at the new resource."""
    product_id = pipeline.send(body)
    location = request.url_for("get_product", product_id=product_id)
    return Response(
        status_code=status.HTTP_201_CREATED,
        headers={"Location": str(location)},
    )


@router.put(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def update_product(
    product_id: int,
    body: UpdateProductCommand,
    pipeline: PipelineDep,
) -> Response:
    if product_id != body.id:
        raise ApplicationError("Route id does not match the product id in the body.")
    if not pipeline.send(body):
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}},
)
def delete_product(product_id: int, pipeline: PipelineDep) -> Response:
    if not pipeline.send(DeleteProductCommand(id=product_id)):
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

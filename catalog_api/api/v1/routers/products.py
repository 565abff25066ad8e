# catalog_api/api/v1/routers/products.py

from typing import Optional
from fastapi import APIRouter, Depends, Query
from catalog_api.api.deps import account_directory, assignment_repo, product_repo, settings_dep
from catalog_api.api.v1.schemas.catalog import AssignIn, ProductIn, ProductListOut, ProductOut
from catalog_api.domain.errors import ProductNotFoundError, ValidationError
from catalog_api.domain.services.assignment_svc import assign_product_to_account

import logging
logger = logging.getLogger(__name__)

router = APIRouter(tags=["products"])


@router.post("/products", status_code=201, response_model=ProductOut)
async def create_product(
    payload: Optional[ProductIn] = None,
    products = Depends(product_repo),
):
    if payload is None:
        raise ValidationError("name is required")
    product = products.create(payload.name, payload.price, payload.category)
    logger.info("product created id=%s category=%s", product.id, product.category)
    return {"product": product}


@router.get("/products/{product_id}", response_model=ProductOut)
async def get_product(product_id: str, products = Depends(product_repo)):
    product = products.get_by_id(product_id)
    if product is None:
        raise ProductNotFoundError(product_id)
    return {"product": product}


@router.get("/products", response_model=ProductListOut)
async def list_products(
    category: Optional[str] = Query(None, description="Only products in this category"),
    products = Depends(product_repo),
):
    return {"products": products.list(category)}


@router.post("/products/{product_id}/assign", status_code=201, summary="Assign a product to an external account")
async def assign_product(
    product_id: str,
    payload: Optional[AssignIn] = None,
    products = Depends(product_repo),
    assignments = Depends(assignment_repo),
    directory = Depends(account_directory),
    settings = Depends(settings_dep),
):
    """
    Verifies the account, records the assignment and, when CHARGE_ON_ASSIGN is set,
    debits the account by the product price.
    A failed debit still answers 201: the assignment is kept and `chargeError` is set.
    """
    if payload is None:
        raise ValidationError("accountId is required")

    outcome = await assign_product_to_account(
        products,
        assignments,
        directory,
        product_id=product_id,
        account_id=payload.account_id,
        charge_on_assign=settings.CHARGE_ON_ASSIGN,
    )

    # charge / chargeError only appear when the charge step ran
    response = {"assignment": outcome.assignment}
    if outcome.charge is not None:
        response["charge"] = outcome.charge
    if outcome.charge_error is not None:
        response["chargeError"] = outcome.charge_error
    return response

# api/v1/schemas/catalog.py
from numbers import Real
from typing import Annotated, Any, List, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator
from catalog_api.domain.models.product import Product
from catalog_api.domain.models.assignment import Assignment
from catalog_api.domain.services.constants import DEFAULT_CATEGORY

# JSON number only: ints stay ints, no strings, booleans or NaN
Price = Union[StrictInt, Annotated[float, Field(strict=True, allow_inf_nan=False)]]


class ProductIn(BaseModel):
    """
    Body of POST /products.
    - name: required, non-empty
    - price: JSON number, defaults to 0 when omitted; strings, booleans and NaN are rejected
    - category: defaults to "general" when omitted or null
    """
    name: str = Field(min_length=1)
    price: Price = 0
    category: Optional[str] = DEFAULT_CATEGORY

class AssignIn(BaseModel):
    """
    Body of POST /products/{id}/assign.
    accountId is an opaque id: numbers are accepted and used as their string form,
    0 counts as missing.
    """
    account_id: str = Field(alias="accountId", min_length=1)

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("account_id", mode="before")
    @classmethod
    def _numeric_id_as_string(cls, value: Any) -> Any:
        if isinstance(value, Real) and not isinstance(value, bool):
            return str(value) if value else ""
        return value


class ProductOut(BaseModel):
    product: Product

class ProductListOut(BaseModel):
    products: List[Product]

class AssignmentListOut(BaseModel):
    assignments: List[Assignment]

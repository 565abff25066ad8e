from datetime import datetime
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

_wire = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

class Assignment(BaseModel):
    id: str
    account_id: str
    product_id: str
    created_at: datetime

    model_config = _wire

class ChargeError(BaseModel):
    # status is None when the directory never answered (transport failure)
    status: Optional[int] = None
    error: str

    model_config = _wire

class AssignmentOutcome(BaseModel):
    """
    Result of one run of the assignment workflow.
    The assignment is always present; at most one of charge / charge_error is set,
    and neither is set when the charge step was skipped.
    """
    assignment: Assignment
    charge_status: str = Field(exclude=True)
    charge: Optional[dict[str, Any]] = None
    charge_error: Optional[ChargeError] = None

    model_config = _wire

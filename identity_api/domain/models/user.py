from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

class User(BaseModel):
    id: str
    name: str
    email: str

    model_config = ConfigDict(frozen=True)

class Account(BaseModel):
    """Billing view of a user: same id, plus a signed balance."""
    id: str
    user_id: str
    name: str
    email: str
    balance: float = 0

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

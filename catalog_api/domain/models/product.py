from typing import Union
from pydantic import BaseModel, ConfigDict

class Product(BaseModel):
    id: str
    name: str
    price: Union[int, float] = 0   # keeps 10 as 10 and 2.5 as 2.5 on the wire
    category: str = "general"

    model_config = ConfigDict(frozen=True)  # no update endpoint, products never change

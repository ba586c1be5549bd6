# catalog_api/models.py
from pydantic import BaseModel, Field, StrictInt
from typing import Optional, Union

class Product(BaseModel):
    id: str
    name: str
    description: Optional[str] = None
    price: Union[StrictInt, float]
    category: str
    in_stock: bool = Field(True, alias="inStock")

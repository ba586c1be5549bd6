import math
import re
import uuid
from typing import Annotated, Any, Dict, Optional, Union

from pydantic import BaseModel, BeforeValidator, Field, StrictInt, model_validator

from .models import Product

# ---------------------------
# Field checks
# ---------------------------
# JSON numbers only; pydantic would otherwise coerce "12" or true into a price.
# 1e999 and NaN decode to floats that can never be serialized back out.
def _require_price(value: Any) -> Any:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError("Price must be a number")
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueError("Price must be finite")
    if value <= 0:
        raise ValueError("Price must be positive")
    return value

def _require_text(value: Any) -> Any:
    if not isinstance(value, str):
        raise ValueError("must be a string")
    return value

def _require_bool(value: Any) -> Any:
    if not isinstance(value, bool):
        raise ValueError("inStock must be a boolean")
    return value

# StrictInt first so a price sent as 25 is stored and echoed as 25, not 25.0
Price = Annotated[Union[StrictInt, float], BeforeValidator(_require_price)]
Text = Annotated[str, BeforeValidator(_require_text), Field(min_length=1)]
FreeText = Annotated[str, BeforeValidator(_require_text)]
Flag = Annotated[bool, BeforeValidator(_require_bool)]

# ---------------------------
# Request bodies
# ---------------------------
class ProductIn(BaseModel):
    name: Text
    description: Optional[FreeText] = None
    price: Price
    category: Text
    in_stock: Flag = Field(True, alias="inStock")

class ProductUpdate(BaseModel):
    """Partial update; only fields present in the request body are applied."""

    name: Optional[Text] = None
    description: Optional[FreeText] = None
    price: Optional[Price] = None
    category: Optional[Text] = None
    in_stock: Optional[Flag] = Field(None, alias="inStock")

    @model_validator(mode="after")
    def _reject_nulls(self):
        # description is the only field that may be cleared
        for field in self.model_fields_set:
            if field != "description" and getattr(self, field) is None:
                alias = type(self).model_fields[field].alias or field
                raise ValueError(f"{alias} cannot be null")
        return self

    def changes(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_unset=True)

# ---------------------------
# Helpers
# ---------------------------
def _new_product_id() -> str:
    return uuid.uuid4().hex

def _make_product_dict(product_id: str, p: ProductIn) -> Dict[str, Any]:
    return Product(id=product_id, **p.model_dump(by_alias=True)).model_dump(by_alias=True)

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

def _parse_positive_int(raw: Optional[str], default: int) -> int:
    """Read the integer prefix of a query value ("2abc" -> 2).

    Anything that does not yield a positive integer falls back to ``default``.
    """
    if raw is None:
        return default
    match = _LEADING_INT.match(str(raw))
    if not match:
        return default
    value = int(match.group(1))
    return value if value > 0 else default

"""
Request-options types.

One structured type per operation that takes more than an identifier. Field
defaults are the documented defaults; callers override only what they need:

    CreateChargeRequest(currency="JPY", amount=1080, card="tok_xxx", products=[item])

Each type declares the validation signature of its fields (in order),
validates itself, and knows how to render itself as the form body sent to
the API.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from spike_api.contracts.product import Product
from spike_api.errors import InvalidArgumentsError
from spike_api.validation import ArgSpec, check_args

LineItem = Union[Product, Mapping[str, Any]]

DEFAULT_LIST_LIMIT = 10

ID_SIGNATURE: Tuple[ArgSpec, ...] = (ArgSpec("id", "string"),)
LIST_SIGNATURE: Tuple[ArgSpec, ...] = (ArgSpec("limit", "integer"),)


@dataclass(frozen=True)
class CreateChargeRequest:
    currency: str = ""             # ISO currency of the amount, e.g. "JPY" or "USD"
    amount: Union[int, float] = 0
    card: str = ""                 # token acquired through SPIKE Checkout
    capture: bool = True           # False only authorizes; capture later
    products: Sequence[LineItem] = ()

    signature: ClassVar[Tuple[ArgSpec, ...]] = (
        ArgSpec("currency", "string"),
        ArgSpec("amount", "number"),
        ArgSpec("card", "string"),
        ArgSpec("capture", "boolean"),
        ArgSpec("products", "array"),
    )

    def args(self) -> List[Any]:
        return [self.currency, self.amount, self.card, self.capture, self.products]

    def validate(self) -> Optional[InvalidArgumentsError]:
        error = check_args(self.signature, self.args())
        if error is not None:
            return error
        problems: List[str] = []
        for index, item in enumerate(self.products):
            if not isinstance(item, (Product, Mapping)):
                problems.append(f"products[{index}] must be a Product or a mapping, got {type(item).__name__}")
                continue
            try:
                json.dumps(_line_item_dict(item))
            except (TypeError, ValueError):
                problems.append(f"products[{index}] is not JSON serializable")
        return InvalidArgumentsError(problems=problems) if problems else None

    def form_data(self) -> Dict[str, str]:
        items = [_line_item_dict(item) for item in self.products]
        return {
            "amount": _format_number(self.amount),
            "currency": self.currency,
            "card": self.card,
            "capture": "true" if self.capture else "false",
            "products": json.dumps(items),
        }


@dataclass(frozen=True)
class CreateTokenRequest:
    card_number: Optional[int] = None
    exp_month: Optional[int] = None
    exp_year: Optional[int] = None
    cvc: Optional[str] = None      # string: leading zeros are significant ("012")
    name: str = ""                 # card holder name
    currency: str = "JPY"
    email: str = ""                # optional

    signature: ClassVar[Tuple[ArgSpec, ...]] = (
        ArgSpec("card_number", "integer"),
        ArgSpec("exp_month", "integer"),
        ArgSpec("exp_year", "integer"),
        ArgSpec("cvc", "string"),
        ArgSpec("name", "string"),
        ArgSpec("currency", "string"),
        ArgSpec("email", "string"),
    )
    required: ClassVar[int] = 4

    def args(self) -> List[Any]:
        return [
            self.card_number,
            self.exp_month,
            self.exp_year,
            self.cvc,
            self.name,
            self.currency,
            self.email,
        ]

    def validate(self) -> Optional[InvalidArgumentsError]:
        return check_args(self.signature, self.args(), min_args=self.required)

    def form_data(self) -> Dict[str, str]:
        data = {
            "card[number]": str(self.card_number),
            "card[exp_month]": str(self.exp_month),
            "card[exp_year]": str(self.exp_year),
            "card[cvc]": self.cvc or "",
            "card[name]": self.name or "",
            "currency": self.currency or "",
        }
        if self.email:
            data["email"] = self.email
        return data


def check_request(request: Any, expected: type) -> Optional[InvalidArgumentsError]:
    """Validate ``request``, reporting a wrong request type as a problem too."""
    if not isinstance(request, expected):
        return InvalidArgumentsError(
            problems=[f"request must be {expected.__name__}, got {type(request).__name__}"]
        )
    return request.validate()


def _line_item_dict(item: LineItem) -> Dict[str, Any]:
    return item.to_dict() if isinstance(item, Product) else dict(item)


def _format_number(value: Union[int, float]) -> str:
    # 1080.0 goes out as "1080"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)

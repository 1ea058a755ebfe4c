"""
Quote data models for the Jupiter swap client.

This module defines Pydantic models for the aggregator's quote response:
the priced route, its route plan, and the amounts involved. Wire fields are
camelCase; attributes are snake_case.
"""

import re
from decimal import Decimal
from enum import Enum
from typing import Annotated, Any, Dict, List, Optional

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    PlainSerializer,
    PrivateAttr,
)
from pydantic.alias_generators import to_camel

_AMOUNT_PATTERN = re.compile(r"^[0-9]+\Z")


def _parse_amount(value: Any) -> Any:
    """Parse decimal-string amounts straight to int so they never pass through float."""
    if isinstance(value, str):
        if not _AMOUNT_PATTERN.match(value):
            raise ValueError(f"Amount must be a string of decimal digits, got {value!r}")
        return int(value)
    return value


# Token amount in the smallest unit. Arbitrary precision; sent on the wire as a decimal string.
Amount = Annotated[
    int,
    BeforeValidator(_parse_amount),
    Field(ge=0),
    PlainSerializer(lambda v: str(v), return_type=str, when_used="json"),
]


class WireModel(BaseModel):
    """Base for immutable models decoded from aggregator JSON."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="allow",
    )


class SwapMode(str, Enum):
    """Whether the quoted amount is the exact input or the exact output."""
    EXACT_IN = "ExactIn"
    EXACT_OUT = "ExactOut"


class SwapInfo(WireModel):
    """A single liquidity venue hop."""
    amm_key: str
    label: Optional[str] = None
    input_mint: str
    output_mint: str
    in_amount: Amount
    out_amount: Amount
    fee_amount: Optional[Amount] = None
    fee_mint: Optional[str] = None


class RoutePlanStep(WireModel):
    """One step of the route plan and the share of the amount it handles."""
    swap_info: SwapInfo
    percent: int = Field(ge=0, le=100)


class PlatformFee(WireModel):
    """Platform fee charged on the output."""
    amount: Amount
    fee_bps: int


class SwapQuote(WireModel):
    """
    Model for a priced swap route returned by the aggregator.

    Instances decoded with ``from_wire`` remember the exact JSON document the
    aggregator sent, and ``to_wire`` hands that document back unchanged so the
    swap endpoint receives the quote verbatim.
    """
    input_mint: str
    in_amount: Amount
    output_mint: str
    out_amount: Amount
    other_amount_threshold: Amount
    swap_mode: SwapMode
    slippage_bps: int = Field(ge=0)
    price_impact_pct: Decimal
    route_plan: List[RoutePlanStep] = Field(default_factory=list)
    platform_fee: Optional[PlatformFee] = None
    context_slot: Optional[int] = None
    time_taken: Optional[Decimal] = None

    _wire: Optional[Dict[str, Any]] = PrivateAttr(default=None)

    @classmethod
    def from_wire(cls, document: Any) -> "SwapQuote":
        """Decode a quote response document.

        Args:
            document: Parsed JSON body of the quote response

        Returns:
            The decoded quote

        Raises:
            pydantic.ValidationError: If the document is not a quote
        """
        quote = cls.model_validate(document)
        quote._wire = dict(document)
        return quote

    def to_wire(self) -> Dict[str, Any]:
        """Get the quote as the JSON document to send back to the aggregator."""
        if self._wire is not None:
            return dict(self._wire)
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @property
    def minimum_received(self) -> Optional[int]:
        """Minimum output under slippage, for ExactIn quotes."""
        if self.swap_mode is SwapMode.EXACT_IN:
            return self.other_amount_threshold
        return None

    @property
    def maximum_spent(self) -> Optional[int]:
        """Maximum input under slippage, for ExactOut quotes."""
        if self.swap_mode is SwapMode.EXACT_OUT:
            return self.other_amount_threshold
        return None

    @property
    def venues(self) -> List[str]:
        """Labels of the venues along the route plan, in order."""
        return [step.swap_info.label or step.swap_info.amm_key for step in self.route_plan]

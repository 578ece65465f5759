"""Actions a seat can take on its turn.

The acting seat is never part of an action: it is always the seat that
currently holds the turn.
"""

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field, TypeAdapter

from .card import Card
from .pit import Pit


class Claim(BaseModel, frozen=True):
    """Assertion that a seat holds a card."""

    seat: int
    card: Card


class CardAsk(BaseModel, frozen=True):
    """Ask an opposing seat for one specific card."""

    kind: Literal["card_ask"] = "card_ask"
    target: int
    card: Card


class SetDeclaration(BaseModel, frozen=True):
    """Declare where every card of a pit is.

    Claims for the declarer's own cards may be given explicitly or left out,
    in which case the declarer's hand is taken as the remainder.
    """

    kind: Literal["set_declaration"] = "set_declaration"
    pit: Pit
    claims: tuple[Claim, ...] = ()


Action = Annotated[Union[CardAsk, SetDeclaration], Field(discriminator="kind")]

_ACTION_ADAPTER: TypeAdapter[CardAsk | SetDeclaration] = TypeAdapter(Action)


def parse_action(data: dict[str, Any] | str) -> CardAsk | SetDeclaration:
    """Build an action from its JSON form, dispatching on ``kind``.

    Raises:
        pydantic.ValidationError: If the data matches no action.
    """
    if isinstance(data, str):
        return _ACTION_ADAPTER.validate_json(data)
    return _ACTION_ADAPTER.validate_python(data)

"""
Pydantic schemas for replayer hand history parsing.
Defines data structures for amounts, cards, games, seats, actions and hands.
"""

from decimal import Decimal
from enum import Enum
from typing import Annotated, Dict, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Upper bounds for the fixed-point parts of an Amount
INTEGER_MAX = 2 ** 32 - 1
FRACTION_MAX = 2 ** 8 - 1
SEAT_MAX = 2 ** 8 - 1

# Label carried by a hand that has not seen a header line yet
UNSTARTED_LABEL = "Not Yet Created"

GameType = Literal["NLH", "NLH_HU", "UNKNOWN"]


class Amount(BaseModel):
    """Exact fixed-point money value (whole units + sub-unit digits)."""
    model_config = ConfigDict(frozen=True)

    integer: int = Field(default=0, ge=0, le=INTEGER_MAX)
    fraction: int = Field(default=0, ge=0, le=FRACTION_MAX)
    fraction_digits: int = Field(default=0, ge=0)   # width the fraction was written with

    @model_validator(mode="after")
    def _fraction_fits_width(self):
        if self.fraction >= 10 ** self.fraction_digits:
            raise ValueError(
                f"fraction {self.fraction} does not fit in {self.fraction_digits} digits"
            )
        return self

    def as_decimal(self) -> Decimal:
        if not self.fraction_digits:
            return Decimal(self.integer)
        return Decimal(f"{self.integer}.{self.fraction:0{self.fraction_digits}d}")

    def __str__(self) -> str:
        if not self.fraction_digits:
            return str(self.integer)
        return f"{self.integer}.{self.fraction:0{self.fraction_digits}d}"


class Rank(str, Enum):
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"
    ACE = "A"


class Suit(str, Enum):
    CLUB = "c"
    DIAMOND = "d"
    HEART = "h"
    SPADE = "s"


class Card(BaseModel):
    """A single playing card."""
    model_config = ConfigDict(frozen=True)

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank.value}{self.suit.value}"


class Game(BaseModel):
    """Game variant announced in a stage header."""
    model_config = ConfigDict(frozen=True)

    type: GameType
    label: Optional[str] = None          # Raw header text, kept for UNKNOWN only

    @model_validator(mode="after")
    def _label_only_for_unknown(self):
        if self.type == "UNKNOWN" and self.label is None:
            raise ValueError("UNKNOWN game requires the header label")
        if self.type != "UNKNOWN" and self.label is not None:
            raise ValueError(f"{self.type} game does not carry a label")
        return self

    @classmethod
    def unknown(cls, label: str) -> "Game":
        return cls(type="UNKNOWN", label=label)


class Seat(BaseModel):
    """A table position occupied by one player at hand start."""
    number: int = Field(ge=0, le=SEAT_MAX)
    player_id: str
    stack: Amount


# Player actions

class Bet(BaseModel):
    type: Literal["BET"] = "BET"
    player: str
    amount: Amount


class Call(BaseModel):
    type: Literal["CALL"] = "CALL"
    player: str
    amount: Amount


class Check(BaseModel):
    type: Literal["CHECK"] = "CHECK"
    player: str


class Collect(BaseModel):
    type: Literal["COLLECT"] = "COLLECT"
    player: str
    amount: Amount


class Fold(BaseModel):
    type: Literal["FOLD"] = "FOLD"
    player: str


class Muck(BaseModel):
    type: Literal["MUCK"] = "MUCK"
    player: str


class Post(BaseModel):
    type: Literal["POST"] = "POST"
    player: str
    amount: Amount


class Raise(BaseModel):
    type: Literal["RAISE"] = "RAISE"
    player: str
    raise_amount: Amount                 # Increment over the call
    total_amount: Amount                 # Total after the raise


class Show(BaseModel):
    type: Literal["SHOW"] = "SHOW"
    player: str
    cards: Tuple[Card, Card]


# Dealer actions

class PreFlop(BaseModel):
    type: Literal["PREFLOP"] = "PREFLOP"


class Flop(BaseModel):
    type: Literal["FLOP"] = "FLOP"
    cards: Tuple[Card, Card, Card]


class Turn(BaseModel):
    type: Literal["TURN"] = "TURN"
    card: Card


class River(BaseModel):
    type: Literal["RIVER"] = "RIVER"
    card: Card


Action = Annotated[
    Union[Bet, Call, Check, Collect, Fold, Muck, Post, Raise, Show,
          PreFlop, Flop, Turn, River],
    Field(discriminator="type"),
]

ActionType = Literal[
    "BET", "CALL", "CHECK", "COLLECT", "FOLD", "MUCK", "POST", "RAISE", "SHOW",
    "PREFLOP", "FLOP", "TURN", "RIVER",
]


class Hand(BaseModel):
    """Complete hand history record."""
    game: Game = Field(default_factory=lambda: Game.unknown(UNSTARTED_LABEL))
    stake: Amount = Field(default_factory=Amount)
    stage_id: Optional[int] = None

    seats: List[Seat] = []               # Declaration order
    actions: List[Action] = []           # Occurrence order

    # 1-based source line numbers for click-through
    raw_offsets: Dict[str, int] = {}     # {"hand_start": i, "hand_end": j}

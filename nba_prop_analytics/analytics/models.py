"""Pydantic models for player game logs and prop analytics results.

Game logs are ordered newest-first: index 0 is the most recent game.
Every metric model is derived data, recomputed on each query and never stored.
"""

from enum import Enum, IntEnum
from typing import Any, Sequence

from pydantic import BaseModel, ConfigDict, Field, model_validator


class PropType(str, Enum):
    """Statistic (or sum of statistics) a prop line is set on."""

    POINTS = "Points"
    REBOUNDS = "Rebounds"
    ASSISTS = "Assists"
    THREE_POINTERS_MADE = "3-Pointers Made"
    STEALS = "Steals"
    BLOCKS = "Blocks"
    PTS_REB_AST = "Pts+Reb+Ast"
    PTS_REB = "Pts+Reb"
    PTS_AST = "Pts+Ast"
    REB_AST = "Reb+Ast"

    @property
    def components(self) -> tuple[str, ...]:
        """GameStatRecord fields summed to evaluate this prop."""
        return _PROP_COMPONENTS[self]

    @property
    def is_composite(self) -> bool:
        return len(self.components) > 1


_PROP_COMPONENTS: dict[PropType, tuple[str, ...]] = {
    PropType.POINTS: ("pts",),
    PropType.REBOUNDS: ("reb",),
    PropType.ASSISTS: ("ast",),
    PropType.THREE_POINTERS_MADE: ("three_pm",),
    PropType.STEALS: ("stl",),
    PropType.BLOCKS: ("blk",),
    PropType.PTS_REB_AST: ("pts", "reb", "ast"),
    PropType.PTS_REB: ("pts", "reb"),
    PropType.PTS_AST: ("pts", "ast"),
    PropType.REB_AST: ("reb", "ast"),
}


class Period(IntEnum):
    """Window of most recent games analysed."""

    LAST_5 = 5
    LAST_10 = 10
    LAST_20 = 20

    @property
    def label(self) -> str:
        return f"Last {self.value}"

    @classmethod
    def parse(cls, value: "Period | int | str") -> "Period":
        """Parse a period from an int, "20" or a dashboard label like "Last 20".

        Raises:
            ValueError: If the value does not name one of the supported windows
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            text = value.strip()
            if text.lower().startswith("last"):
                text = text[4:].strip()
            try:
                value = int(text)
            except ValueError:
                raise ValueError(f"Unrecognized period: {value!r}") from None
        try:
            return cls(value)
        except ValueError:
            supported = ", ".join(str(p.value) for p in cls)
            raise ValueError(
                f"Period must be one of {supported} games. Got {value}."
            ) from None

    def truncate(self, games: Sequence["GameStatRecord"]) -> list["GameStatRecord"]:
        """Keep the most recent games of the window (fewer if the log is shorter)."""
        return list(games[: self.value])


class GameStatRecord(BaseModel):
    """One played game for one player.

    Attributes:
        date: Date label as shown on the game log (e.g., "4/13")
        opponent: Opponent label, "vs CLE" for home games or "@ MIA" for away
        pts: Points scored
        reb: Total rebounds
        ast: Assists
        three_pm: Three-pointers made (accepts "threePM" on input)
        stl: Steals
        blk: Blocks
        is_home: True for home, False for away, None when unknown. Derived from
            the opponent label when the producer does not supply it.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    date: str
    opponent: str = ""
    pts: int = Field(default=0, ge=0)
    reb: int = Field(default=0, ge=0)
    ast: int = Field(default=0, ge=0)
    three_pm: int = Field(default=0, ge=0, alias="threePM")
    stl: int = Field(default=0, ge=0)
    blk: int = Field(default=0, ge=0)
    is_home: bool | None = Field(default=None, alias="isHome")

    @model_validator(mode="before")
    @classmethod
    def derive_home_flag(cls, data: Any) -> Any:
        """Fill is_home from the "vs "/"@ " opponent convention if missing."""
        if not isinstance(data, dict):
            return data
        if data.get("is_home") is not None or data.get("isHome") is not None:
            return data
        opponent = str(data.get("opponent") or "").strip()
        if opponent.startswith("vs"):
            return {**data, "is_home": True}
        if opponent.startswith("@"):
            return {**data, "is_home": False}
        return data


class OddsAssumptions(BaseModel):
    """Fixed odds model behind edge and expected value.

    The defaults describe a standard -110 line: a 50% break-even baseline and
    0.91 units won per unit staked. Neither is derived from live market odds.

    Attributes:
        break_even_pct: Hit rate (0-100) treated as zero edge
        payout: Profit per unit staked on a winning bet
    """

    model_config = ConfigDict(frozen=True)

    break_even_pct: float = Field(default=50.0, ge=0.0, le=100.0)
    payout: float = Field(default=0.91, gt=0.0)


DEFAULT_ODDS = OddsAssumptions()


class _Payload(BaseModel):
    """Base for result models serialised with dashboard (camelCase) keys."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class HitRate(_Payload):
    """Games over the line out of games played."""

    hits: int = 0
    total: int = 0
    percentage: int = 0

    @property
    def misses(self) -> int:
        return self.total - self.hits


class StreakType(str, Enum):
    HIT = "hit"
    MISS = "miss"
    NONE = "none"


class Streak(_Payload):
    """Current run of same-outcome games counted back from the latest game."""

    type: StreakType = StreakType.NONE
    count: int = 0


class RecentForm(_Payload):
    """Hit rate and trend over the last few games."""

    hits: int = 0
    total: int = 0
    percentage: int = 0
    trend: int = 0


class SplitStats(_Payload):
    hit_rate: HitRate = Field(default_factory=HitRate, alias="hitRate")
    average: float = 0.0
    games: int = 0


class HomeAwaySplit(_Payload):
    home: SplitStats = Field(default_factory=SplitStats)
    away: SplitStats = Field(default_factory=SplitStats)


class Confidence(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class Recommendation(str, Enum):
    """Categorical betting recommendation.

    NO_DATA is only produced for an empty game log.
    """

    STRONG_OVER = "Strong Over"
    OVER = "Over"
    STRONG_UNDER = "Strong Under"
    UNDER = "Under"
    TRENDING_UP = "Trending Up"
    TRENDING_DOWN = "Trending Down"
    NO_EDGE = "No Edge"
    NO_DATA = "No Data"


class MetricsRecord(_Payload):
    """Full analytics bundle for one player, prop, line and period.

    Percent-valued fields (consistency, trend, volatility, edge, percentile)
    are rounded integers on a 0-100 scale; probability is 0.0-1.0 and
    expected_value is in units per unit staked.
    """

    hit_rate: HitRate = Field(default_factory=HitRate, alias="hitRate")
    average: float = 0.0
    median: float = 0.0
    standard_deviation: float = Field(default=0.0, alias="standardDeviation")
    consistency: int = 0
    trend: int = 0
    volatility: int = 0
    edge: float = 0.0
    confidence: Confidence = Confidence.LOW
    recommendation: Recommendation = Recommendation.NO_DATA
    streak: Streak = Field(default_factory=Streak)
    recent_form: RecentForm = Field(default_factory=RecentForm, alias="recentForm")
    home_away_split: HomeAwaySplit = Field(
        default_factory=HomeAwaySplit, alias="homeAwaySplit"
    )
    percentile: int = 0
    probability: float = 0.0
    expected_value: float = Field(default=0.0, alias="expectedValue")


class InsightType(str, Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    WARNING = "warning"
    NEUTRAL = "neutral"


class Insight(_Payload):
    """Human-readable note derived from a metrics threshold rule."""

    type: InsightType
    title: str
    message: str

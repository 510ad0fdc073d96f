"""
Time-of-day cost model for road segments.

During rush hour residential streets are favoured (their cost is scaled
down) because arterial roads are congested; outside rush hour they are
penalized. Without a point in time the cost is returned unchanged.

A* optimality is only guaranteed when no point in time is supplied: the
rush-hour multiplier can push a cost below the straight-line distance used
as the heuristic.
"""

from dataclasses import dataclass
from datetime import datetime, time
from typing import FrozenSet, Optional, Tuple, Union

from roadgraph.core.config import settings
from roadgraph.core.errors import ConfigurationError
from roadgraph.core.roads.graph import RoadType


@dataclass(frozen=True)
class RushHourPolicy:
    """
    Rush-hour windows and residential cost multipliers.

    Attributes:
        windows: (start, end) time-of-day windows; both bounds are exclusive
        rush_hour_multiplier: Factor applied to affected roads inside a window
        off_peak_multiplier: Factor applied to affected roads outside windows
        affected_road_types: Road types the multipliers apply to
        weekdays_only: Restrict rush hour to Monday-Friday. False treats
            every day as a potential rush-hour day.
    """

    windows: Tuple[Tuple[time, time], ...] = ((time(6, 0), time(9, 0)), (time(16, 0), time(19, 0)))
    rush_hour_multiplier: float = 0.5
    off_peak_multiplier: float = 1.5
    affected_road_types: FrozenSet[RoadType] = frozenset({RoadType.RESIDENTIAL})
    weekdays_only: bool = True

    def __post_init__(self) -> None:
        """Validate configuration."""
        for start, end in self.windows:
            if start >= end:
                raise ConfigurationError(
                    f"Rush-hour window must start before it ends, got {start}-{end}",
                    config_key="windows",
                )
        if self.rush_hour_multiplier <= 0:
            raise ConfigurationError(
                "rush_hour_multiplier must be positive",
                config_key="rush_hour_multiplier",
            )
        if self.off_peak_multiplier <= 0:
            raise ConfigurationError(
                "off_peak_multiplier must be positive",
                config_key="off_peak_multiplier",
            )

    @classmethod
    def from_settings(cls) -> "RushHourPolicy":
        """Build a policy from the ROADGRAPH_ settings."""
        return cls(
            windows=settings.rush_hour_windows,
            rush_hour_multiplier=settings.rush_hour_multiplier,
            off_peak_multiplier=settings.off_peak_multiplier,
            weekdays_only=settings.rush_hour_weekdays_only,
        )

    def is_rush_hour(self, at: datetime) -> bool:
        """
        Check whether a moment falls inside a rush-hour window.

        Args:
            at: Point in time to check

        Returns:
            True if it is a rush-hour day and the time of day is strictly
            inside one of the windows
        """
        if self.weekdays_only and at.weekday() >= 5:
            return False

        time_of_day = at.time()
        return any(start < time_of_day < end for start, end in self.windows)

    def adjust(
        self,
        base_cost: float,
        road_type: Union[RoadType, str],
        at: Optional[datetime] = None,
    ) -> float:
        """
        Compute the effective cost of reaching a node over a road type.

        Args:
            base_cost: Unadjusted cost
            road_type: Classification of the road being used
            at: Point in time; None disables the adjustment

        Returns:
            Adjusted cost
        """
        if at is None:
            return base_cost

        if RoadType.from_value(road_type) not in self.affected_road_types:
            return base_cost

        if self.is_rush_hour(at):
            return base_cost * self.rush_hour_multiplier
        return base_cost * self.off_peak_multiplier


def adjust_cost(
    base_cost: float,
    road_type: Union[RoadType, str],
    at: Optional[datetime] = None,
    policy: Optional[RushHourPolicy] = None,
) -> float:
    """
    Apply the rush-hour cost adjustment.

    Args:
        base_cost: Unadjusted cost
        road_type: Classification of the road being used
        at: Point in time; None returns base_cost unchanged
        policy: Policy to apply (built from settings when omitted)

    Returns:
        Adjusted cost
    """
    if at is None:
        return base_cost

    policy = policy or RushHourPolicy.from_settings()
    return policy.adjust(base_cost, road_type, at)

"""
Configuration accessor module.

Provides the typed configuration produced by a successful check, and the
lookup used by the per-meet checks.
"""

import datetime
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional, Tuple

from meetcheck.primitives import Age, Equipment, PrimitiveParseError, Sex, WeightClassKg


class Exemption(Enum):
    """Checks a specific meet may be exempted from."""

    # Exempts the meet from having only known divisions.
    EXEMPT_DIVISION = 'ExemptDivision'

    # Exempts the meet from requiring monotonically ascending attempts.
    EXEMPT_LIFT_ORDER = 'ExemptLiftOrder'

    # Allows lifters of any bodyweight to compete in any weightclass.
    EXEMPT_WEIGHTCLASS_CONSISTENCY = 'ExemptWeightClassConsistency'

    @classmethod
    def parse(cls, raw: Any) -> 'Exemption':
        if not isinstance(raw, str):
            raise PrimitiveParseError(f"invalid type {type(raw).__name__}, expected a String")
        try:
            return cls(raw)
        except ValueError:
            raise PrimitiveParseError(f"invalid Exemption '{raw}'") from None

    def __str__(self) -> str:
        return self.value


@dataclass
class DivisionConfig:
    """Custom division declared by the archive."""
    name: str
    min: Age  # inclusive
    max: Age  # inclusive
    sex: Optional[Sex] = None  # None allows any sex
    equipment: Optional[List[Equipment]] = None  # None allows any equipment
    tested: Optional[bool] = None  # default, may be overridden per lifter


@dataclass
class WeightClassConfig:
    """
    Weight classes in force for one sex over a date range.

    ``name`` is the TOML table member, so ``[weightclasses.default_M]`` has
    the name ``default_M``.
    """
    name: str
    classes: List[WeightClassKg]
    date_min: datetime.date
    date_max: datetime.date
    sex: Sex
    # Indices into Config.divisions; None applies to every division.
    divisions: Optional[List[int]] = None


@dataclass
class ExemptionConfig:
    """Exemptions for one meet, keyed by folder name relative to the CONFIG.toml."""
    meet_folder: str
    exemptions: List[Exemption] = field(default_factory=list)


@dataclass
class Config:
    """Validated CONFIG.toml contents."""
    divisions: List[DivisionConfig] = field(default_factory=list)
    weightclasses: List[WeightClassConfig] = field(default_factory=list)
    exemptions: List[ExemptionConfig] = field(default_factory=list)

    def exemptions_for(self, meet_folder: str) -> Optional[Tuple[Exemption, ...]]:
        """
        Get the exemptions for a meet.

        Args:
            meet_folder: Meet folder name, like "9804"

        Returns:
            Tuple of exemptions, or None if the meet has no entry
        """
        for exemption_config in self.exemptions:
            if exemption_config.meet_folder == meet_folder:
                return tuple(exemption_config.exemptions)
        return None

    def divisions_of(self, weightclass: WeightClassConfig) -> Optional[List[DivisionConfig]]:
        """
        Resolve the division restriction of a weight class scheme.

        Returns:
            The restricted divisions, or None if the scheme applies to all
        """
        if weightclass.divisions is None:
            return None
        return [self.divisions[i] for i in weightclass.divisions]

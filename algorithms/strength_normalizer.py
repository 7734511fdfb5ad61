from exceptions import PreconditionError
from scoring_schema import ScoringConfig


class RelativeStrengthNormalizer:
    """Scale a 1RM by body mass and age so lifters of any size compare fairly."""

    # (inclusive lower bound, band key), highest first. Ages below 18 use
    # the youngest band.
    AGE_BAND_BOUNDS: tuple[tuple[int, str], ...] = (
        (65, "65+"),
        (56, "56-65"),
        (46, "46-55"),
        (36, "36-45"),
        (25, "25-35"),
    )
    YOUNGEST_BAND: str = "18-24"

    def __init__(self, config: ScoringConfig) -> None:
        self.config = config

    def relative_strength(
        self, one_rm_kg: float, bodyweight_kg: float, exponent: float | None = None
    ) -> float:
        """Return ``one_rm_kg / bodyweight_kg ** exponent``.

        Body weight must be positive; there is no meaningful fallback, so a
        non-positive value raises :class:`PreconditionError`.
        """
        if bodyweight_kg is None or bodyweight_kg <= 0:
            raise PreconditionError(
                f"body weight must be positive, got {bodyweight_kg}", field="bodyweight_kg"
            )
        if exponent is None:
            exponent = self.config.scoring.allometric_exponent
        return one_rm_kg / bodyweight_kg**exponent

    @classmethod
    def age_band(cls, age: float) -> str:
        for lower, band in cls.AGE_BAND_BOUNDS:
            if age >= lower:
                return band
        return cls.YOUNGEST_BAND

    def age_adjustment_factor(self, age: float) -> float:
        return self.config.age_adjustment_factors[self.age_band(age)]

    def adjusted_relative_strength(
        self, one_rm_kg: float, bodyweight_kg: float, age: float
    ) -> float:
        return self.relative_strength(one_rm_kg, bodyweight_kg) * self.age_adjustment_factor(age)

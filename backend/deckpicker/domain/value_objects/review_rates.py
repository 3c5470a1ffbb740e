"""Review rates value object used for study time estimates."""

from dataclasses import dataclass

from deckpicker.domain.constants import (
    DEFAULT_LEARN_SECONDS,
    DEFAULT_LEARN_SUCCESS_RATE,
    DEFAULT_REVIEW_SECONDS,
    DEFAULT_REVIEW_SUCCESS_RATE,
)


@dataclass(frozen=True)
class ReviewRates:
    """Historical answer rates for a collection.

    Attributes:
        review_success_rate: Share of review answers that were not 'Again' (0.0-1.0)
        review_seconds: Average seconds spent on a review answer
        learn_success_rate: Share of learning answers that were not 'Again' (0.0-1.0)
        learn_seconds: Average seconds spent on a learning step
    """

    review_success_rate: float = DEFAULT_REVIEW_SUCCESS_RATE
    review_seconds: float = DEFAULT_REVIEW_SECONDS
    learn_success_rate: float = DEFAULT_LEARN_SUCCESS_RATE
    learn_seconds: float = DEFAULT_LEARN_SECONDS

    def __post_init__(self) -> None:
        """Validate rate ranges."""
        if not 0.0 <= self.review_success_rate <= 1.0:
            raise ValueError(
                f"review_success_rate must be 0.0-1.0, got {self.review_success_rate}"
            )
        if not 0.0 < self.learn_success_rate <= 1.0:
            raise ValueError(
                f"learn_success_rate must be above 0.0 and at most 1.0, "
                f"got {self.learn_success_rate}"
            )

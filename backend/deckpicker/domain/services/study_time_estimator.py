"""Study time estimator based on historical answer rates."""

from deckpicker.domain.value_objects.review_rates import ReviewRates


class StudyTimeEstimator:
    """Estimates minutes needed to clear due cards.

    Implements the EtaEstimator port. New cards cost one learning pass per
    successful answer; learning cards and failed reviews each cost one
    learning step; reviews cost one review answer.
    """

    def __init__(self, rates: ReviewRates | None = None):
        self._rates = rates or ReviewRates()

    @property
    def rates(self) -> ReviewRates:
        return self._rates

    def eta(self, counts: tuple[int, int, int]) -> int:
        """Estimate study time.

        Args:
            counts: Due counts as (new, learn, review)

        Returns:
            Estimated minutes, rounded to the nearest whole minute
        """
        new, learn, review = counts
        rates = self._rates

        new_seconds = new * rates.learn_seconds / rates.learn_success_rate
        relearn_seconds = (learn + review * (1 - rates.review_success_rate)) * rates.learn_seconds
        review_seconds = review * rates.review_seconds

        return round((new_seconds + relearn_seconds + review_seconds) / 60)

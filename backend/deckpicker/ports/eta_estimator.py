"""Port interface for study time estimation."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class EtaEstimator(Protocol):
    """Estimates time needed to study a set of due cards."""

    def eta(self, counts: tuple[int, int, int]) -> int:
        """Estimate study time.

        Args:
            counts: Due counts as (new, learn, review)

        Returns:
            Estimated minutes to finish all due cards
        """
        ...

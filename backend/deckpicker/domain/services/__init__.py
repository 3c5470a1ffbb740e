"""Domain services - orchestration and business logic."""

from .deck_list_projector import (
    DeckListProjector,
    ProjectionListener,
)
from .deck_tree_builder import (
    build_deck_tree,
    deck_sort_key,
)
from .study_time_estimator import StudyTimeEstimator

__all__ = [
    "DeckListProjector",
    "ProjectionListener",
    "build_deck_tree",
    "deck_sort_key",
    "StudyTimeEstimator",
]

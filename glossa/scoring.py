"""Common interface of the scoring methods feeding the confidence estimator."""

from abc import ABC, abstractmethod
from typing import Sequence

from glossa.lang import Lang
from glossa.models import Outcome


class ScoringMethod(ABC):
    """Produce an Outcome ranking candidate languages for a text."""

    def __init__(self, name: str) -> None:
        self.name = name

    @abstractmethod
    def score(self, text: str, candidates: Sequence[Lang]) -> Outcome:
        raise NotImplementedError

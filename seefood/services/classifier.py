"""Hot dog classification over detected labels."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from .vision_service import ObjectLabel

HOT_DOG_TEXT = "Hot dog"


class Verdict(Enum):
    """The two possible outcomes and how each one is shown."""

    HOT_DOG = ("Hot Dog", "green", "top")
    NOT_HOT_DOG = ("Not Hot Dog", "red", "bottom")

    def __init__(self, text: str, color: str, position: str):
        self.text = text
        self.color = color
        self.position = position


@dataclass(frozen=True)
class Classification:
    """Verdict plus the index of the label that decided it."""

    verdict: Verdict
    match_index: Optional[int] = None

    @property
    def is_hot_dog(self) -> bool:
        return self.verdict is Verdict.HOT_DOG


def find_match(labels: Sequence[ObjectLabel], needle: str = HOT_DOG_TEXT) -> Optional[int]:
    """Return the index of the first label containing ``needle``.

    Matching is case-sensitive and partial.
    """
    for index, label in enumerate(labels):
        if needle in label.label:
            return index
    return None


def classify(labels: Sequence[ObjectLabel], needle: str = HOT_DOG_TEXT) -> Classification:
    """Decide whether the labels describe a hot dog.

    Args:
        labels: Labels in service-response order.
        needle: Substring that marks a hot dog label.

    Returns:
        HOT_DOG with the first matching index, otherwise NOT_HOT_DOG.
    """
    index = find_match(labels, needle)
    if index is None:
        return Classification(Verdict.NOT_HOT_DOG)
    return Classification(Verdict.HOT_DOG, index)

"""Services module for SeeFood."""

from .credentials import find_credentials_file, load_credentials
from .vision_service import LabelClient, ObjectLabel, is_url
from .classifier import Classification, Verdict, classify, find_match
from .annotator import annotate, load_image, save_annotated

__all__ = [
    "find_credentials_file",
    "load_credentials",
    "LabelClient",
    "ObjectLabel",
    "is_url",
    "Classification",
    "Verdict",
    "classify",
    "find_match",
    "annotate",
    "load_image",
    "save_annotated",
]

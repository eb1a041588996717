"""Google Cloud Vision Label Client

Sends one image to the Vision API label detection feature and returns
the labels it reports.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import requests
from google.api_core.exceptions import GoogleAPIError
from google.auth.exceptions import GoogleAuthError
from google.cloud import vision

from ..exceptions import DetectionInterruptedError, ImageFetchError, VisionServiceError
from .credentials import DEFAULT_PATTERN, find_credentials_file, load_credentials

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ObjectLabel:
    """A label detected in an image, with the service's confidence."""

    label: str
    score: float

    def __str__(self) -> str:
        return f"{self.label} ({self.score:.2f})"


def is_url(source: Union[str, Path]) -> bool:
    """Check whether a source names a URL rather than a local file.

    Args:
        source: File path or URL.

    Returns:
        True if the source starts with ``http``.
    """
    return str(source).startswith("http")


class LabelClient:
    """Detects image labels with Google Cloud Vision."""

    def __init__(
        self,
        credentials_dir: Optional[Path] = None,
        credentials_pattern: str = DEFAULT_PATTERN,
        session: Optional[requests.Session] = None,
    ):
        """Initialize the label client.

        Args:
            credentials_dir: Folder holding the service account key.
            credentials_pattern: Glob pattern for the key file.
            session: HTTP session used to download URL images.
        """
        self.credentials_dir = credentials_dir
        self.credentials_pattern = credentials_pattern
        self.session = session or requests.Session()

    def _create_client(self) -> vision.ImageAnnotatorClient:
        """Create a Vision API client from the credentials file.

        The key file is looked up again on every call.

        Returns:
            Vision API client instance.
        """
        path = find_credentials_file(self.credentials_dir, self.credentials_pattern)
        credentials = load_credentials(path)
        return vision.ImageAnnotatorClient(credentials=credentials)

    def read_image(self, source: Union[str, Path]) -> bytes:
        """Read the raw bytes of an image from a file or a URL.

        Args:
            source: File path or http(s) URL.

        Returns:
            Image content.

        Raises:
            ImageFetchError: If the URL could not be downloaded.
            DetectionInterruptedError: If the download was interrupted.
            OSError: If the local file could not be read.
        """
        if not is_url(source):
            with open(source, "rb") as f:
                return f.read()

        url = str(source)
        try:
            response = self.session.get(url)
            response.raise_for_status()
        except KeyboardInterrupt as e:
            raise DetectionInterruptedError(f"Interrupted while fetching {url}") from e
        except requests.RequestException as e:
            raise ImageFetchError(f"Failed to fetch {url}: {e}") from e

        logger.debug(f"Fetched {len(response.content)} bytes from {url}")
        return response.content

    def detect(self, source: Union[str, Path]) -> list[ObjectLabel]:
        """Return the labels detected in an image.

        Args:
            source: File path or http(s) URL of the image.

        Returns:
            Labels in the order the service returned them. Empty if the
            service reported an error for the image.
        """
        with self._create_client() as client:
            content = self.read_image(source)
            return self._annotate(client, content, source)

    def detect_content(self, content: bytes) -> list[ObjectLabel]:
        """Return the labels detected in already loaded image bytes.

        Args:
            content: Raw image content.

        Returns:
            Labels in response order, or an empty list on a service error.
        """
        with self._create_client() as client:
            return self._annotate(client, content, "<bytes>")

    def _annotate(
        self,
        client: vision.ImageAnnotatorClient,
        content: bytes,
        source: Union[str, Path],
    ) -> list[ObjectLabel]:
        image = vision.Image(content=content)
        request = vision.AnnotateImageRequest(
            image=image,
            features=[vision.Feature(type_=vision.Feature.Type.LABEL_DETECTION)],
        )

        # The API batches images; we always send exactly one
        try:
            response = client.batch_annotate_images(requests=[request])
        except (GoogleAPIError, GoogleAuthError) as e:
            raise VisionServiceError(f"Vision API request failed for {source}: {e}") from e

        labels = []
        for res in response.responses:
            if res.error.message:
                # Reported as no labels rather than raised
                logger.error(f"Vision API error for {source}: {res.error.message}")
                return []

            for annotation in res.label_annotations:
                labels.append(ObjectLabel(annotation.description, annotation.score))

        logger.info(f"Detected {len(labels)} labels in {source}")
        return labels

"""Exception types raised while detecting labels."""


class SeeFoodError(Exception):
    """Base class for SeeFood errors."""


class CredentialsNotFoundError(SeeFoodError, FileNotFoundError):
    """No credentials file was found in the search directory."""


class CredentialsError(SeeFoodError, OSError):
    """The credentials file could not be read or is not a valid key."""


class ImageFetchError(SeeFoodError, OSError):
    """The image could not be downloaded from its URL."""


class DetectionInterruptedError(SeeFoodError):
    """Waiting on the network was interrupted."""


class ImageDecodeError(SeeFoodError, OSError):
    """The image bytes could not be decoded for display."""


class VisionServiceError(SeeFoodError, OSError):
    """The Vision API call failed or could not be authorized."""

"""SeeFood

Picks an image, asks Google Cloud Vision for its labels, and shows the
image with a "Hot Dog" or "Not Hot Dog" banner.
"""

__version__ = "1.0.0"
__author__ = "SeeFood"

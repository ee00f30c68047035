"""
Type definitions shared across the unused-assets CLI.

This module contains the enums that describe which files count as media assets
and which filename decorations mark a higher-density rendition of an asset.
"""

from enum import StrEnum


class MediaExtension(StrEnum):
    """
    File extensions recognized as media assets.

    Matching is case-sensitive and only looks at the trailing extension of the
    file name, so `logo.PNG` is not considered an asset.
    """

    PNG = "png"
    JPG = "jpg"
    JPEG = "jpeg"
    SVG = "svg"
    GIF = "gif"
    MP4 = "mp4"


class ResolutionVariant(StrEnum):
    """
    Suffixes that mark a higher pixel-density rendition of a base asset.

    A variant sits right before the extension, e.g. `logo@2x.png` is the `@2x`
    rendition of `logo.png`.
    """

    X2 = "@2x"
    X3 = "@3x"

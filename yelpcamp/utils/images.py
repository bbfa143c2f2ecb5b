# yelpcamp/utils/images.py
"""
Image URL helpers.

Uploaded images are served from a CDN that resizes on the fly when a
transformation segment follows the upload path, e.g.
``https://res.cloudinary.com/demo/image/upload/w_200/v123/abc.jpg``.
"""


class ThumbnailError(ValueError):
    """Raised when a URL does not contain the upload marker."""


def thumbnail_url(url, marker='/upload', transformation='w_200'):
    """
    Derives a thumbnail URL by inserting ``/<transformation>`` right after the
    first occurrence of ``marker``.

    >>> thumbnail_url('https://cdn.test/upload/v123/abc.jpg')
    'https://cdn.test/upload/w_200/v123/abc.jpg'
    """
    if not url or marker not in url:
        raise ThumbnailError(f"Image URL {url!r} does not contain '{marker}'")
    return url.replace(marker, f'{marker}/{transformation}', 1)

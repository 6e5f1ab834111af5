# © Copyright 2025 Stuart Parmenter
# SPDX-License-Identifier: MIT

"""Not-found errors raised when a conversion slug cannot be served.

The catalog, slug codec and enumerator never raise for bad input; they return
``None`` (or nothing) instead. These exceptions exist for the page layer, which
has to turn an absent result into a user-facing not-found response.

Design Pattern:
    The message is meant for end users and is returned verbatim in the HTTP
    response body. Diagnostic detail (the offending slug) lives in attributes
    and is logged by the caller.
"""


class ConversionNotFoundError(Exception):
    """Base exception for conversion slugs that do not map to a page.

    Attributes:
        slug: The conversion identifier that was requested
        status: HTTP status code the caller should respond with
        message: User-facing explanation
    """

    status = 404
    default_message = "Conversion not found."

    def __init__(self, slug: str, message: str | None = None):
        """Initialize conversion not-found error.

        Args:
            slug: The conversion identifier that failed to resolve
            message: User-facing message (defaults to the class message)
        """
        self.slug = slug
        self.message = message or self.default_message
        super().__init__(self.message)


class SlugSyntaxError(ConversionNotFoundError):
    """The identifier does not follow the ``<from>-to-<to>`` grammar.

    Raised for:
    - Missing ``-to-`` separator (``jpegpng``)
    - Extra separators or non-letter characters (``jpeg-to-png-to-gif``)
    - Empty tokens
    """

    default_message = 'Invalid conversion format. Please use a format like "jpeg-to-png".'


class UnsupportedFormatError(ConversionNotFoundError):
    """The slug is well formed but a token does not resolve.

    Raised for:
    - Source token that is neither a catalog value nor a known extension
    - Target token that is unknown or names a format that cannot be encoded

    Which side failed is deliberately not reported.
    """

    default_message = "Unsupported image format."

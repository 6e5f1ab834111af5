# © Copyright 2025 Stuart Parmenter
# SPDX-License-Identifier: MIT

"""Page data for individual conversion routes."""

from .conversion import ConversionPage, load_conversion_page


__all__ = ["ConversionPage", "load_conversion_page"]

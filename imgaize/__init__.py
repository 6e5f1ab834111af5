# © Copyright 2025 Stuart Parmenter
# SPDX-License-Identifier: MIT

"""Imgaize: image format catalog, conversion routes and sitemap service."""

__version__ = "0.1.0"

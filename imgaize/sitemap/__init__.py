# © Copyright 2025 Stuart Parmenter
# SPDX-License-Identifier: MIT

"""Sitemap generation for conversion pages."""

from .builder import CONVERSION_POLICY, HOME_POLICY, SITEMAP_NAMESPACE, SitemapBuilder, UrlPolicy


__all__ = ["CONVERSION_POLICY", "HOME_POLICY", "SITEMAP_NAMESPACE", "SitemapBuilder", "UrlPolicy"]

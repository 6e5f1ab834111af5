# © Copyright 2025 Stuart Parmenter
# SPDX-License-Identifier: MIT

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
from xml.sax.saxutils import escape, quoteattr

from ..formats.slugs import ConversionPair, SlugCodec


SITEMAP_NAMESPACE = "http://www.sitemaps.org/schemas/sitemap/0.9"


@dataclass(frozen=True)
class UrlPolicy:
    """Crawl hints attached to a group of sitemap entries."""

    changefreq: str
    priority: str


HOME_POLICY = UrlPolicy(changefreq="weekly", priority="1.0")
CONVERSION_POLICY = UrlPolicy(changefreq="monthly", priority="0.8")


class SitemapBuilder:
    """Render the site root and every conversion page as a sitemap document.

    Output depends only on the arguments, so equal inputs give byte-identical
    documents. ``lastmod`` is never taken from the clock here.
    """

    def __init__(
        self,
        codec: SlugCodec,
        stylesheet: str | None = None,
        home_policy: UrlPolicy = HOME_POLICY,
        conversion_policy: UrlPolicy = CONVERSION_POLICY,
    ):
        self.codec = codec
        self.stylesheet = stylesheet
        self.home_policy = home_policy
        self.conversion_policy = conversion_policy

    def build(
        self,
        base_url: str,
        conversions: Iterable[ConversionPair],
        lastmod: date | str | None = None,
    ) -> str:
        base = base_url.rstrip("/")
        if isinstance(lastmod, date):
            lastmod = lastmod.isoformat()

        lines = ['<?xml version="1.0" encoding="UTF-8"?>']
        if self.stylesheet:
            lines.append(f"<?xml-stylesheet type=\"text/xsl\" href={quoteattr(self.stylesheet)}?>")
        lines.append(f'<urlset xmlns="{SITEMAP_NAMESPACE}">')

        lines.append(self._url_entry(f"{base}/", lastmod, self.home_policy))
        for pair in conversions:
            slug = self.codec.generate(pair.source, pair.target)
            lines.append(self._url_entry(f"{base}/{slug}", lastmod, self.conversion_policy))

        lines.append("</urlset>")
        return "\n".join(lines) + "\n"

    @staticmethod
    def _url_entry(loc: str, lastmod: str | None, policy: UrlPolicy) -> str:
        # base_url and catalog values are not limited to [a-z-]
        parts = ["\t<url>", f"\t\t<loc>{escape(loc)}</loc>"]
        if lastmod:
            parts.append(f"\t\t<lastmod>{escape(lastmod)}</lastmod>")
        parts.append(f"\t\t<changefreq>{policy.changefreq}</changefreq>")
        parts.append(f"\t\t<priority>{policy.priority}</priority>")
        parts.append("\t</url>")
        return "\n".join(parts)

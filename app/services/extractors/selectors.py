"""Selector tables driving candidate selection and metadata scraping.

Kept as plain ordered data so sites can be tuned without touching the
extraction algorithm. Order matters in every list: earlier entries win.
"""

from __future__ import annotations

# Likely article containers, site-specific patterns first
CONTENT_SELECTORS: tuple[str, ...] = (
    ".afd-article-body",  # ArchDaily
    ".article-body-content",
    '[data-component="ArticleBody"]',
    ".entry-content",  # WordPress
    ".post-content",
    ".article-content",
    ".content-body",
    "article .afd-article-bodytext",
    "article main",
    "main article",
    "article",
    '[role="article"]',
    "main",
    ".main-content",
    ".content",
    "#content",
    ".article-body",
    ".story-body",
    ".post-body",
    ".entry-body",
    "#article-content",
    ".article-detail",
    ".article-text",
    ".article-view",
    ".article-body-wrapper",
    ".article-main-content",
    ".article-wrapper",
    ".main-article",
    ".article-post",
    ".article-content-wrapper",
    ".article-main",
    ".story-content",
)

# Structural, ad, share, comment and consent chrome removed from candidates
UNWANTED_SELECTORS: tuple[str, ...] = (
    "script",
    "style",
    "noscript",
    "nav",
    "footer",
    "header",
    ".ad",
    ".advertisement",
    ".ads",
    ".adsbygoogle",
    ".sidebar",
    ".side-nav",
    ".navigation",
    ".social-share",
    ".share",
    ".sharing",
    ".share-buttons",
    ".comments",
    ".comment-section",
    ".disqus",
    ".related-articles",
    ".related",
    ".recommended",
    ".newsletter",
    ".subscribe",
    ".signup",
    ".image-credit",
    ".caption",
    "figcaption",
    ".breadcrumb",
    ".breadcrumbs",
    "button",
    ".button",
    'a[href*="share"]',
    ".newsletter-signup",
    ".email-signup",
    ".cookie-consent",
    ".gdpr",
    ".privacy-notice",
)

# Substring matches on class/id attributes
UNWANTED_ATTRIBUTE_SELECTORS: tuple[str, ...] = (
    '[class*="share"]',
    '[class*="social"]',
    '[id*="share"]',
    '[id*="social"]',
    '[class*="ad"]',
    '[id*="ad"]',
    '[class*="advert"]',
)

# Reader comment threads (WordPress #comments, .comment-list, comment-author, ...)
COMMENT_SELECTORS: tuple[str, ...] = (
    '[class*="comment"]',
    '[id*="comment"]',
    ".disqus",
)

# Regions preferred inside <body> when falling back to whole-body text
BODY_FALLBACK_SELECTORS: tuple[str, ...] = (
    "main",
    "article",
    ".main",
    ".content",
    "#content",
)

STRUCTURED_TAGS: tuple[str, ...] = ("h1", "h2", "h3", "h4", "h5", "h6", "p", "li")

AUTHOR_META_SELECTORS: tuple[str, ...] = (
    'meta[property="article:author"]',
    'meta[name="author"]',
)

AUTHOR_SELECTORS: tuple[str, ...] = (
    ".author",
    '[class*="author"]',
    ".article-author",
    ".byline",
    '[rel="author"]',
    ".writer",
    ".contributor",
    ".article-authors",
    ".author-name",
    '[itemprop="author"]',
)

DATE_META_SELECTORS: tuple[str, ...] = (
    'meta[property="article:published_time"]',
    'meta[name="date"]',
    'meta[property="article:published"]',
)

DATE_SELECTORS: tuple[str, ...] = (
    ".published-date",
    ".article-date",
    ".post-date",
    ".date",
    '[class*="date"]',
    ".pub-date",
    ".article-meta-date",
    ".publication-date",
)

"""Company website fetching and page text extraction."""

import re
from dataclasses import dataclass
from html.parser import HTMLParser

import httpx
import structlog

log = structlog.get_logger()

USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)


@dataclass
class PageContent:
    """What the enricher reads off a company homepage."""

    title: str = ""
    description: str = ""
    text: str = ""


class PageParser(HTMLParser):
    """Collect the title, meta description and visible body text."""

    def __init__(self):
        super().__init__()
        self.title_parts = []
        self.body_parts = []
        self.loose_parts = []
        self.description = ""
        self.in_title = False
        self.in_body = False
        self.seen_body = False
        self.skip_depth = 0

    def handle_starttag(self, tag, attrs):
        if tag == 'title':
            self.in_title = True
        elif tag == 'body':
            self.in_body = True
            self.seen_body = True
        elif tag in ('script', 'style', 'noscript'):
            self.skip_depth += 1
        elif tag == 'meta':
            attributes = dict(attrs)
            if (attributes.get('name') or '').lower() == 'description' and not self.description:
                self.description = (attributes.get('content') or '').strip()

    def handle_endtag(self, tag):
        if tag == 'title':
            self.in_title = False
        elif tag == 'body':
            self.in_body = False
        elif tag in ('script', 'style', 'noscript') and self.skip_depth:
            self.skip_depth -= 1

    def handle_data(self, data):
        if self.skip_depth:
            return
        if self.in_title:
            self.title_parts.append(data)
        elif self.in_body:
            self.body_parts.append(data)
        else:
            self.loose_parts.append(data)

    def get_content(self) -> PageContent:
        # Fragments without a <body> tag still carry text
        parts = self.body_parts if self.seen_body else self.loose_parts
        title = re.sub(r'\s+', ' ', ''.join(self.title_parts)).strip()
        text = re.sub(r'\s+', ' ', ' '.join(parts)).strip()
        return PageContent(title=title, description=self.description, text=text)


def parse_page(html: str) -> PageContent:
    """Parse homepage markup into title, description and body text."""
    parser = PageParser()
    parser.feed(html)
    parser.close()
    return parser.get_content()


def normalize_url(url: str) -> str:
    """Ensure URL has protocol."""
    url = url.strip()
    if not url.startswith(('http://', 'https://')):
        url = f"https://{url}"
    return url


async def fetch_page(url: str, timeout: float = 10.0) -> PageContent:
    """Fetch a company homepage and parse it.

    Raises httpx errors on network failure or a non-2xx status; the caller
    decides how to degrade.
    """
    url = normalize_url(url)

    async with httpx.AsyncClient(timeout=timeout, follow_redirects=True) as client:
        response = await client.get(url, headers={"User-Agent": USER_AGENT})
        response.raise_for_status()
        html = response.text

    content = parse_page(html)
    log.info("website_fetched", url=url, text_length=len(content.text))
    return content

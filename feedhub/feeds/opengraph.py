import re
from dataclasses import dataclass
from typing import Optional

from bs4 import BeautifulSoup

# Usado no enriquecimento de notícias: busca só a tag, sem montar a árvore
OG_IMAGE_RE = re.compile(
    r"""<meta[^>]+property=["']og:image["'][^>]+content=["']([^"']+)["']""",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class PageMeta:
    title: str
    description: str
    image: str


def _meta_content(soup: BeautifulSoup, **attrs) -> str:
    tag = soup.find("meta", attrs=attrs)
    if tag is None:
        return ""
    return (tag.get("content") or "").strip()


def extract_page_meta(soup: BeautifulSoup) -> PageMeta:
    """Lê título, descrição e imagem (Open Graph com fallbacks) de uma página já parseada."""
    title = (
        _meta_content(soup, property="og:title")
        or _meta_content(soup, name="og:title")
        or (soup.title.get_text(strip=True) if soup.title else "")
    )
    description = (
        _meta_content(soup, property="og:description")
        or _meta_content(soup, name="og:description")
        or _meta_content(soup, name="description")
    )
    image = _meta_content(soup, property="og:image") or _meta_content(soup, name="og:image")
    return PageMeta(title=title, description=description, image=image)


def find_og_image(html: str) -> Optional[str]:
    match = OG_IMAGE_RE.search(html or "")
    return match.group(1) if match else None

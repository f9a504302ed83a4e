"""
Extração de preço por domínio.

Cada domínio tem uma lista ordenada de seletores CSS, do mais específico ao
mais genérico. O primeiro seletor cujo texto contém um marcador de moeda
vence; se nenhum casar, o preço fica com o valor sentinela.
"""
import re
from typing import Optional, Sequence, Tuple

from bs4 import BeautifulSoup

PRICE_NOT_AVAILABLE = "Price not available"

CURRENCY_MARKERS: Tuple[str, ...] = ("৳", "Tk")
PRICE_RE = re.compile(r"৳\s*[\d,]+|Tk\s*[\d,]+")

# chave = trecho do domínio (ex.: "daraz" casa com "www.daraz.com.bd")
PRICE_SELECTORS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("pickaboo", (
        ".price-current",
        ".product-price",
        '[class*="price"]',
        'h2:-soup-contains("৳")',
        'span:-soup-contains("৳")',
    )),
    ("daraz", (
        '[data-testid="price-current"]',
        ".pdp-price",
        "#module_product_price_1 span",
        '[class*="price"]',
        'span:-soup-contains("৳")',
    )),
)


def selectors_for(domain: str) -> Tuple[str, ...]:
    domain = (domain or "").lower()
    for key, selectors in PRICE_SELECTORS:
        if key in domain:
            return selectors
    return ()


def _match_price(text: str) -> Optional[str]:
    if not text or not any(marker in text for marker in CURRENCY_MARKERS):
        return None
    match = PRICE_RE.search(text)
    return match.group(0) if match else text


def extract_price(soup: BeautifulSoup, selectors: Sequence[str]) -> str:
    for selector in selectors:
        element = soup.select_one(selector)
        if element is None:
            continue
        price = _match_price(element.get_text().strip())
        if price:
            return price
    return PRICE_NOT_AVAILABLE

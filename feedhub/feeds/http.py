import logging
from typing import Dict, Optional

import requests
from requests.adapters import HTTPAdapter

logger = logging.getLogger(__name__)

# Cabeçalhos de navegador: algumas lojas bloqueiam user-agents de bots
BROWSER_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
    ),
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.5",
}

FEED_TIMEOUT = 15
SCRAPE_TIMEOUT = 10

# ---------- HTTP session global com pool (sem retry: fonte que falha devolve vazio) ----------
_SESSION = requests.Session()
_ADAPTER = HTTPAdapter(pool_connections=20, pool_maxsize=50, max_retries=0)
_SESSION.mount("https://", _ADAPTER)
_SESSION.mount("http://", _ADAPTER)
_SESSION.headers.update(BROWSER_HEADERS)


def fetch_text(
    url: str,
    timeout: float = FEED_TIMEOUT,
    headers: Optional[Dict[str, str]] = None,
    params: Optional[Dict[str, str]] = None,
) -> Optional[str]:
    """
    Faz um GET e devolve o corpo como texto.

    Nunca levanta exceção: status != 2xx ou erro de rede viram None (com log),
    para que uma fonte ruim não derrube o lote inteiro.
    """
    try:
        response = _SESSION.get(url, params=params, headers=headers, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        logger.warning(f"[fetch] {url} failed: {e}")
        return None
    return response.text

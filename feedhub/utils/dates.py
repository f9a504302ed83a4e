from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Optional


def parse_timestamp(value: Optional[str]) -> Optional[float]:
    """
    Converte a data da fonte (RFC 822 dos feeds RSS ou ISO 8601 do Atom)
    em timestamp UTC. Retorna None quando não dá para interpretar.
    """
    if not value or not value.strip():
        return None
    raw = value.strip()

    dt: Optional[datetime] = None
    try:
        dt = parsedate_to_datetime(raw)
    except (TypeError, ValueError, IndexError):
        dt = None

    if dt is None:
        try:
            # fromisoformat não aceita "Z" antes do Python 3.11
            dt = datetime.fromisoformat(raw.replace("Z", "+00:00"))
        except ValueError:
            return None

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.timestamp()

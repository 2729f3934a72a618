import requests
import logging
from pathlib import Path
from typing import Optional

from .config import get_settings

logger = logging.getLogger(__name__)


def fetch_text(url: str, timeout: Optional[int] = None) -> str:
    """Returns the body of `url`, or an empty string if it can't be fetched."""
    settings = get_settings()
    try:
        logger.info(f"🌐 Downloading training text from {url}...")
        r = requests.get(
            url,
            timeout=timeout or settings.FETCH_TIMEOUT,
            headers={"User-Agent": settings.USER_AGENT},
        )
        if r.status_code == 200:
            logger.info(f"✅ Fetched {len(r.text)} chars from {url}")
            return r.text
        logger.warning(f"⚠️ Failed to download {url} (HTTP {r.status_code})")
    except requests.RequestException as e:
        logger.error(f"❌ Error fetching {url}: {e}")
    return ""


def read_source(source: str) -> str:
    """Training text from an http(s) URL or a local file."""
    if source.startswith(("http://", "https://")):
        return fetch_text(source)
    return Path(source).read_text(encoding="utf-8")

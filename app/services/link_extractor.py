import re
from typing import Optional

# Scheme, then anything up to whitespace, a quote or an angle bracket, ending in .mp4
MP4_URL_PATTERN = re.compile(r"https?://[^\s\"'<>]+\.mp4", re.IGNORECASE)


def extract_media_url(html: Optional[str]) -> Optional[str]:
    """Return the first .mp4 URL found in html, or None."""
    if not html:
        return None
    match = MP4_URL_PATTERN.search(html)
    return match.group(0) if match else None

"""URL fingerprinting and candidate slug windows."""

import hashlib
from typing import Iterator


# MD5 hex digests are always 32 characters, which gives 25 windows of width 8
DIGEST_LENGTH = 32
SLUG_LENGTH = 8


def digest(url: str) -> str:
    """Compute the fingerprint of a URL.
    
    The digest is a non-cryptographic use of MD5: it only has to be
    deterministic and spread distinct URLs evenly over the hex space.
    
    Args:
        url: The URL to fingerprint
        
    Returns:
        32 lowercase hex characters
    """
    return hashlib.md5(url.encode("utf-8")).hexdigest()


def candidate_windows(url_digest: str, width: int = SLUG_LENGTH) -> Iterator[str]:
    """Yield candidate slugs for a digest in increasing offset order.
    
    Args:
        url_digest: Digest returned by digest()
        width: Length of each candidate slug
        
    Yields:
        url_digest[offset:offset + width] for offset 0..len(url_digest) - width
    """
    for offset in range(len(url_digest) - width + 1):
        yield url_digest[offset:offset + width]

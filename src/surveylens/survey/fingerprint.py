"""Per-submission identity token.

A fingerprint is a short SHA-256 digest of client characteristics (screen,
timezone, language, platform). It tags submissions for tracking only;
duplicates are still stored.
"""

import hashlib
from collections.abc import Mapping

FINGERPRINT_LENGTH = 16


def compute_fingerprint(components: Mapping[str, str]) -> str:
    """Hash client components into a 16-character hex token.

    Components are serialized as ``key:value`` joined by ``|`` in the
    order given, so callers must pass them in a stable order.

    Raises:
        ValueError: If no components are given
    """
    if not components:
        raise ValueError("At least one fingerprint component is required")

    fingerprint_string = "|".join(f"{key}:{value}" for key, value in components.items())
    return hashlib.sha256(fingerprint_string.encode()).hexdigest()[:FINGERPRINT_LENGTH]

"""
Common Password Blocklist
Loads the line-delimited list of frequently used passwords.
"""

import logging
from pathlib import Path
from typing import FrozenSet, Union

logger = logging.getLogger(__name__)


def load_common_passwords(path: Union[str, Path]) -> FrozenSet[str]:
    """
    Read the blocklist into an immutable set of lowercase entries.

    Args:
        path: Text file with one password per line.

    Returns:
        The lowercased, non-blank entries. An unreadable or missing file
        yields an empty set so the blocklist check is simply not enforced.
    """
    try:
        content = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Could not load common passwords list from {path}: {e}")
        return frozenset()

    passwords = frozenset(
        line.strip().lower() for line in content.splitlines() if line.strip()
    )
    logger.info(f"Loaded {len(passwords)} common passwords from {path}")
    return passwords

"""Random seed strings.

Randomness is kept out of the pipeline: the core only ever receives a
string. Callers that want an arbitrary identicon draw a seed here and keep
it if they need to reproduce the image.
"""

import base64
import secrets

DEFAULT_SEED_LENGTH = 7


def random_string(length: int = DEFAULT_SEED_LENGTH) -> str:
    """Return ``length`` URL-safe characters derived from fresh random bytes.

    Example:
        >>> len(random_string())
        7
    """
    if length <= 0:
        raise ValueError(f"Seed length must be positive, got {length}")
    return base64.urlsafe_b64encode(secrets.token_bytes(length)).decode("ascii")[
        :length
    ]

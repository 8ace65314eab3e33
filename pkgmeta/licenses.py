"""License expression to license url lookup.

Uses the license-expression library to recognize SPDX license identifiers.
Only expressions consisting of a single license have a public license page,
compound expressions (`MIT OR Apache-2.0`) are not resolved.
"""
from functools import lru_cache
from typing import Optional

from license_expression import ExpressionError, get_spdx_licensing

# Built once, only read afterwards
_licensing = get_spdx_licensing()

SPDX_LICENSE_URL = "https://spdx.org/licenses/{key}.html"


@lru_cache(maxsize=256)
def license_url(expression: Optional[str]) -> Optional[str]:
    """Look up the public url of a license expression.

    Args:
        expression: SPDX license expression (e.g. "MIT") or None.

    Returns:
        The SPDX license page for a recognized single license, or None if
        the expression is empty, unknown or a compound expression.
    """
    if expression is None:
        return None

    expression = expression.strip()
    if not expression:
        return None

    try:
        parsed = _licensing.parse(expression, validate=True)
    except ExpressionError:
        return None

    key = getattr(parsed, "key", None)
    if not key:
        return None

    return SPDX_LICENSE_URL.format(key=key)

"""Tests for the license url lookup."""
from typing import Optional

import pytest

from pkgmeta.licenses import license_url


class TestLicenseUrl:
    """Tests for license_url function."""

    @pytest.mark.parametrize(
        ("expression", "expected"),
        [
            ("MIT", "https://spdx.org/licenses/MIT.html"),
            ("Apache-2.0", "https://spdx.org/licenses/Apache-2.0.html"),
            (" MIT ", "https://spdx.org/licenses/MIT.html"),
        ],
    )
    def test_single_license(self, expression: str, expected: str) -> None:
        """Test recognized single licenses resolve to the SPDX page."""
        assert license_url(expression) == expected

    @pytest.mark.parametrize("expression", [None, "", "   "])
    def test_empty_expression(self, expression: Optional[str]) -> None:
        """Test empty expressions have no url."""
        assert license_url(expression) is None

    def test_unknown_license(self) -> None:
        """Test unknown license keys have no url."""
        assert license_url("Not-A-Real-License-Key") is None

    def test_compound_expression(self) -> None:
        """Test compound expressions are not resolved."""
        assert license_url("MIT OR Apache-2.0") is None

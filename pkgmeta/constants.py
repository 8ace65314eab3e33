"""Constants for pkgmeta."""

# Exit codes
EXIT_SUCCESS = 0  # No requirements failed
EXIT_ISSUES = 1  # Requirement diagnostics found
EXIT_ERROR = 2  # Command failed due to error

# Url used when a url is required but has not been provided.
# Must always be replaced before a package is released.
PLACEHOLDER_URL = "https://example.com/MUST_BE_CHANGED"

# Environment variables
MAINTAINER_ENV_VAR = "PKGMETA_MAINTAINER"
RULE_ENV_VAR = "PKGMETA_RULE"

# Label used for chocolatey specific rule messages
CHOCOLATEY_LABEL = "choco"

# The file mapping that is always part of a chocolatey package
DEFAULT_FILE_SOURCE = "tools/**"
DEFAULT_FILE_TARGET = "tools"

NUSPEC_NAMESPACE = "http://schemas.microsoft.com/packaging/2015/06/nuspec.xsd"

# Comment written at the top of every nuspec file.
NUSPEC_TEST_COMMENT = (
    "Do not remove this test for UTF-8: If “Ω” doesn't appear as "
    "greek uppercase omega letter\n"
    "enclosed in quotation marks, you should use an editor that supports UTF-8, "
    "not this one."
)

"""Basic package tests for pkgmeta."""


def test_package_imports() -> None:
    """Test that the main package can be imported."""
    import pkgmeta

    assert pkgmeta.__version__ == "0.1.0"


def test_cli_imports() -> None:
    """Test that the CLI module can be imported."""
    from pkgmeta.cli import main

    assert main is not None


def test_subpackages_import() -> None:
    """Test that all subpackages can be imported."""
    import pkgmeta.config
    import pkgmeta.generators
    import pkgmeta.models
    import pkgmeta.output
    import pkgmeta.rules

    assert pkgmeta.config is not None
    assert pkgmeta.generators is not None
    assert pkgmeta.models is not None
    assert pkgmeta.output is not None
    assert pkgmeta.rules is not None

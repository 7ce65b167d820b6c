"""Basic package tests to verify installation."""


def test_package_imports() -> None:
    """Verify the main package can be imported."""
    import sitecontent

    assert sitecontent.__version__


def test_config_module_imports() -> None:
    """Verify config module structure is correct."""
    from sitecontent.config import (
        ContentConfig,
        LocaleConfig,
        LoggingConfig,
        ValidationConfig,
        load_config,
    )

    assert ContentConfig is not None
    assert LocaleConfig is not None
    assert LoggingConfig is not None
    assert ValidationConfig is not None
    assert load_config is not None


def test_collections_module_imports() -> None:
    """Verify collections module structure is correct."""
    from sitecontent.collections import (
        CollectionDefinition,
        CollectionName,
        CollectionRegistry,
        ModelSchema,
        StorageKind,
        build_registry,
    )

    assert CollectionDefinition is not None
    assert CollectionName is not None
    assert CollectionRegistry is not None
    assert ModelSchema is not None
    assert StorageKind is not None
    assert build_registry is not None

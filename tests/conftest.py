import pytest

from rulekit.validation import (
    MessageCatalog,
    RootContextData,
    StaticRule,
    ValidationContext,
    ValidatorConfiguration,
)


@pytest.fixture
def configuration():
    """A fresh configuration, independent of environment settings."""
    return ValidatorConfiguration(language_manager=MessageCatalog(), culture="en")


@pytest.fixture
def make_context(configuration):
    """Factory for contexts sharing the test configuration."""

    def _make(value, property_name="Name", display_name=None, *, rule=None, root=None, instance=None,
              config=None):
        return ValidationContext(
            property_value=value,
            property_name=property_name,
            display_name=display_name,
            rule=rule or StaticRule(),
            root=root or RootContextData(),
            instance_to_validate=instance,
            configuration=config or configuration,
        )

    return _make

"""
Tests for accessor configuration.
"""

import math
from collections import namedtuple
import pytest
from chartcap.infrastructure.accessors import (
    AccessorConfiguration,
    default_key_accessor,
    default_value_accessor,
)

Row = namedtuple('Row', ['key', 'value'])


class TestDefaultAccessors:
    """Tests for the default key/value accessors"""

    def test_mapping_items(self):
        item = {'key': 'a', 'value': 3}

        assert default_key_accessor(item) == 'a'
        assert default_value_accessor(item, 0) == 3

    def test_attribute_items(self):
        item = Row('b', 7)

        assert default_key_accessor(item) == 'b'
        assert default_value_accessor(item) == 7

    def test_missing_field_raises(self):
        with pytest.raises(KeyError):
            default_value_accessor({'key': 'a'})


class TestAccessorConfiguration:
    """Tests for AccessorConfiguration"""

    def test_default_ordering_is_negated_value(self):
        """Test that items sort largest value first by default."""
        accessors = AccessorConfiguration()

        assert accessors.ordering({'key': 'a', 'value': 10}) == -10

    @pytest.mark.parametrize('missing', [None, float('nan')])
    def test_default_ordering_puts_missing_values_last(self, missing):
        accessors = AccessorConfiguration()

        assert accessors.ordering({'key': 'a', 'value': missing}) == math.inf

    def test_default_ordering_follows_value_accessor(self):
        """Test that replacing the value accessor moves the default ordering."""
        accessors = AccessorConfiguration()
        accessors.value_accessor = lambda item, index: item['count']

        assert accessors.ordering({'count': 4}) == -4

    def test_custom_ordering(self):
        accessors = AccessorConfiguration(ordering=lambda item: item['key'])

        assert accessors.ordering({'key': 'z', 'value': 1}) == 'z'

    def test_reset_ordering(self):
        """Test that setting ordering to None restores the default."""
        accessors = AccessorConfiguration(ordering=lambda item: 0)
        accessors.ordering = None

        assert accessors.ordering({'key': 'a', 'value': 2}) == -2

    @pytest.mark.parametrize('field', ['key_accessor', 'value_accessor', 'ordering'])
    def test_non_callable_rejected(self, field):
        with pytest.raises(TypeError, match=f'{field} must be callable'):
            AccessorConfiguration(**{field: 'key'})

    def test_non_callable_setter_rejected(self):
        accessors = AccessorConfiguration()

        with pytest.raises(TypeError, match='key_accessor must be callable'):
            accessors.key_accessor = 42

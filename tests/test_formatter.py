import pytest

from grafana_metrics import ValidationError
from grafana_metrics.formatter import (
    escape_label_value,
    format_header_lines,
    format_labels,
    format_sample_line,
)
from grafana_metrics.models import MetricDefinition, MetricType


def test_escape_only_double_quotes():
    """Verify quotes are escaped and backslashes/newlines pass through."""
    assert escape_label_value('Hello "World"') == 'Hello \\"World\\"'
    assert escape_label_value('a\\b\nc') == 'a\\b\nc'
    assert escape_label_value('/api/users?filter=active') == '/api/users?filter=active'


def test_non_string_values_are_stringified():
    """Verify label values go through str()."""
    assert format_labels({'epoch': 123, 'ratio': 0.5}) == '{epoch="123",ratio="0.5"}'


def test_labels_keep_insertion_order():
    """Verify labels are not sorted."""
    assert format_labels({'z': '1', 'a': '2'}) == '{z="1",a="2"}'


def test_labels_accept_pairs():
    """Verify an iterable of pairs works like a mapping."""
    assert format_labels([('method', 'GET'), ('code', 200)]) == '{method="GET",code="200"}'


def test_none_labels_are_dropped():
    """Verify None values are filtered but zero and empty string are kept."""
    assert format_labels({'a': None, 'b': 0, 'c': ''}) == '{b="0",c=""}'


def test_empty_label_block_omitted():
    """Verify no braces are rendered when nothing remains."""
    assert format_labels({}) == ''
    assert format_labels(None) == ''
    assert format_labels({'a': None}) == ''
    assert format_sample_line('name', {'a': None}, 5) == 'name 5'


def test_sample_value_passthrough():
    """Verify value uses its default string form."""
    assert format_sample_line('m', None, 95.5) == 'm 95.5'
    assert format_sample_line('m', None, 'NaN') == 'm NaN'
    assert format_sample_line('m', None, 1e21) == 'm 1e+21'


def test_header_lines():
    """Verify HELP then TYPE, help text verbatim."""
    definition = MetricDefinition('up', 'Is "it" up', MetricType.COUNTER)
    assert format_header_lines(definition) == [
        '# HELP up Is "it" up',
        '# TYPE up counter',
    ]


def test_duplicate_pair_keys_rejected():
    """Verify a repeated key in a pair sequence raises instead of rendering twice."""
    with pytest.raises(ValidationError):
        format_sample_line('m', [('a', 1), ('a', 2)], 1)
    with pytest.raises(ValidationError):
        format_labels([('a', None), ('a', 'x')])


def test_booleans_render_lower_case():
    """Verify booleans in labels and values print as true/false."""
    assert format_labels({'ok': True, 'stale': False}) == '{ok="true",stale="false"}'
    assert format_sample_line('m', None, True) == 'm true'
    assert format_sample_line('m', None, 0) == 'm 0'

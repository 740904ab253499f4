"""Tests for BoundsInfo, method parsing and configuration."""
import logging

import numpy as np
import pytest

import classbreaks
from classbreaks import BoundsInfo, Method, classify_breaks, parse_method
from classbreaks.config import CONFIG, get
from classbreaks.errors import (
    InvalidClassCountError,
    MethodParseError,
    NonFiniteSampleError,
    SampleTooSmallError,
    ValidationError,
)


class TestFixtures:

    def test_head_tail(self, values76):
        b = BoundsInfo.new(4, values76, Method.HEAD_TAIL)
        np.testing.assert_allclose(b.bounds, [1., 7., 9.090909090909092, 11., 12.])
        assert b.class_count == 4

    def test_natural_breaks(self, values76):
        b = BoundsInfo.new(5, values76, 'JenksNaturalBreaks')
        np.testing.assert_array_equal(b.bounds, [1., 2., 4., 7., 9., 12.])
        assert b.class_count == 5

    def test_quantiles(self, values76):
        b = BoundsInfo.new(4, values76, 'Quantiles')
        np.testing.assert_array_equal(b.bounds, [1., 2., 3., 6., 12.])

    def test_equal_interval(self, values76):
        b = BoundsInfo.new(4, values76, 'EqualInterval')
        np.testing.assert_array_equal(b.bounds, [1., 3.75, 6.5, 9.25, 12.])

    def test_arithmetic(self, values76):
        b = BoundsInfo.new(6, values76, Method.ARITHMETIC)
        expected = [1., 1.5238095238095237, 2.571428571428571, 4.142857142857142,
                    6.238095238095237, 8.857142857142856, 12.]
        assert list(b.bounds) == pytest.approx(expected, rel=1e-12)

    def test_class_index(self, values76):
        b = BoundsInfo.new(4, values76, 'EqualInterval')
        assert b.class_index(0.1) is None
        assert b.class_index(2.0) == 0
        assert b.class_index(4.0) == 1
        assert b.class_index(7.0) == 2
        assert b.class_index(10.0) == 3
        assert b.class_index(15.0) is None

    def test_statistics(self, values76):
        b = BoundsInfo.new(4, values76, 'Quantiles')
        assert b.min == 1.0
        assert b.max == 12.0
        assert b.mean == pytest.approx(288.0 / 76.0)


class TestInvariants:

    @pytest.mark.parametrize('method,k', [
        ('EqualInterval', 5), ('Quantiles', 5), ('Arithmetic', 5),
        ('JenksNaturalBreaks', 5), ('HeadTail', 5), ('TailHead', 5),
    ])
    def test_bounds_shape(self, method, k):
        np.random.seed(42)
        values = np.random.lognormal(size=300)
        b = BoundsInfo.new(k, values, method)
        assert np.all(np.diff(b.bounds) >= 0)
        assert b.bounds[0] == values.min()
        assert b.bounds[-1] == values.max()
        assert len(b.bounds) == b.class_count + 1
        assert b.class_index(values.min() - 1.0) is None
        assert b.class_index(values.max() + 1.0) is None

    def test_idempotent(self, values76):
        first = BoundsInfo.new(5, values76, 'JenksNaturalBreaks')
        second = BoundsInfo.new(5, values76, 'JenksNaturalBreaks')
        np.testing.assert_array_equal(first.bounds, second.bounds)

    def test_caller_sample_not_sorted(self, values76):
        original = list(values76)
        arr = np.array(values76)
        BoundsInfo.new(4, values76, 'Quantiles')
        BoundsInfo.new(4, arr, 'JenksNaturalBreaks')
        assert values76 == original
        np.testing.assert_array_equal(arr, original)

    def test_immutable(self, values76):
        b = BoundsInfo.new(4, values76, 'Quantiles')
        with pytest.raises(ValueError):
            b.bounds[0] = 0.0
        with pytest.raises(AttributeError):
            b.class_count = 3


class TestValidation:

    def test_sample_too_small(self):
        with pytest.raises(SampleTooSmallError, match="Sample too small"):
            BoundsInfo.new(2, [1.0], 'Quantiles')

    def test_sample_checked_before_class_count(self):
        with pytest.raises(SampleTooSmallError):
            BoundsInfo.new(0, [], 'Quantiles')

    @pytest.mark.parametrize('k', [0, 1, 6])
    def test_invalid_class_count(self, k):
        with pytest.raises(InvalidClassCountError, match="Invalid class count"):
            BoundsInfo.new(k, [1.0, 2.0, 3.0, 4.0, 5.0], 'EqualInterval')

    def test_class_count_equal_to_size(self):
        b = BoundsInfo.new(5, [1.0, 2.0, 3.0, 4.0, 5.0], 'JenksNaturalBreaks')
        assert b.class_count == 5

    def test_head_tail_ignores_class_count(self, values76):
        b = BoundsInfo.new(100, values76, 'HeadTail')
        assert b.class_count == 4
        assert b.requested_class_count == 100
        assert b.resolved_count_differs is True

    def test_non_finite(self):
        with pytest.raises(NonFiniteSampleError):
            BoundsInfo.new(2, [1.0, np.nan, 3.0], 'Quantiles')

    def test_errors_are_validation_errors(self):
        with pytest.raises(ValidationError):
            BoundsInfo.new(2, [1.0], 'Quantiles')
        with pytest.raises(ValueError):
            BoundsInfo.new(9, [1.0, 2.0], 'Quantiles')


class TestClassLookup:

    def test_min_belongs_to_first_class(self, values76):
        b = BoundsInfo.new(4, values76, 'EqualInterval')
        assert b.class_index(1.0) == 0
        assert b.class_index(12.0) == 3

    def test_upper_inclusive(self, values76):
        b = BoundsInfo.new(4, values76, 'EqualInterval')
        assert b.class_index(3.75) == 0
        assert b.class_index(3.7500001) == 1
        assert b.class_index(6.5) == 1

    def test_nan_probe(self, values76):
        b = BoundsInfo.new(4, values76, 'EqualInterval')
        assert b.class_index(float('nan')) is None

    def test_class_indices_match_class_index(self, values76):
        b = BoundsInfo.new(5, values76, 'JenksNaturalBreaks')
        probes = [-3.0, 0.5, 1.0, 1.5, 2.0, 2.5, 4.0, 7.0, 8.5, 9.0, 11.0, 12.0, 12.5]
        assert b.class_indices(probes) == [b.class_index(p) for p in probes]

    def test_class_counts(self, values76):
        b = BoundsInfo.new(5, values76, 'JenksNaturalBreaks')
        counts = b.class_counts(values76)
        # {1,2} {3,4} {5,6,7} {8,9} {10,11,12}
        assert counts == [34, 18, 13, 8, 3]
        assert sum(counts) == len(values76)


class TestFloat32:

    def test_keeps_width(self, values76):
        values = np.array(values76, dtype=np.float32)
        b = BoundsInfo.new(4, values, 'EqualInterval')
        assert b.bounds.dtype == np.float32
        np.testing.assert_array_equal(b.bounds, [1., 3.75, 6.5, 9.25, 12.])

    def test_explicit_dtype(self, values76):
        b = BoundsInfo.new(4, values76, 'HeadTail', dtype='float32')
        assert b.bounds.dtype == np.float32
        np.testing.assert_allclose(b.bounds, [1., 7., 100.0 / 11.0, 11., 12.], rtol=1e-6)

    def test_unsupported_dtype(self, values76):
        with pytest.raises(TypeError, match="Unsupported dtype"):
            BoundsInfo.new(4, values76, 'Quantiles', dtype='int32')


class TestMethods:

    def test_canonical_names(self):
        for method in Method:
            assert parse_method(method.value) is method

    def test_historical_spelling(self):
        assert parse_method('EqualInverval') is Method.EQUAL_INTERVAL
        assert parse_method('EqualInterval') is Method.EQUAL_INTERVAL

    def test_case_sensitive(self):
        with pytest.raises(MethodParseError, match="Invalid classification name"):
            parse_method('equalinterval')

    def test_unknown(self):
        with pytest.raises(MethodParseError) as exc:
            parse_method('KMeans')
        assert 'JenksNaturalBreaks' in exc.value.valid

    def test_not_a_string(self):
        with pytest.raises(MethodParseError):
            parse_method(3)

    def test_fixed_count(self):
        assert Method.QUANTILES.fixed_count is True
        assert Method.HEAD_TAIL.fixed_count is False
        assert Method.TAIL_HEAD.fixed_count is False


class TestPackage:

    def test_classify_breaks_shortcut(self, values76):
        b = classify_breaks(4, values76, 'Quantiles')
        assert b.to_dict() == {
            'method': 'Quantiles',
            'class_count': 4,
            'requested_class_count': 4,
            'bounds': [1.0, 2.0, 3.0, 6.0, 12.0],
            'min': 1.0,
            'max': 12.0,
            'mean': pytest.approx(288.0 / 76.0),
        }

    def test_exports(self):
        for name in classbreaks.__all__:
            assert hasattr(classbreaks, name)

    def test_config_get(self):
        assert get('quantiles.rounding_bias') == 0.49
        assert get('sample.min_size') == CONFIG['sample']['min_size']
        assert get('missing.key', 'fallback') == 'fallback'

    def test_logs_resolved_count(self, values76, caplog):
        with caplog.at_level(logging.INFO, logger='classbreaks.bounds'):
            BoundsInfo.new(7, values76, 'HeadTail')
        assert 'resolved to 4 classes' in caplog.text

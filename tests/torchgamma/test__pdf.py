import math

import numpy
import pytest
import torch

import torchgamma
from torchgamma import (
    DTypeMismatchError,
    PathError,
    UnsupportedDTypeError,
    number_pdf,
    pdf,
)

EXPONENTIAL = [
    0.0,
    0.0,
    1.0,
    0.367879441,
    0.135335283,
    0.049787068,
    0.018315639,
    0.006737947,
]


class TestPdfValidation:
    """Usage errors are raised before the input is touched."""

    def test_exports_function(self):
        assert callable(torchgamma.pdf)

    @pytest.mark.parametrize(
        "value", ["5", 5, True, None, math.nan, [], {}]
    )
    def test_invalid_accessor(self, value):
        with pytest.raises(TypeError):
            pdf([1, 2, 3], accessor=value)

    @pytest.mark.parametrize("dtype", ["beep", "boop"])
    @pytest.mark.parametrize(
        "make_input",
        [
            lambda: [1, 2, 3],
            lambda: torch.tensor([1, 2, 3], dtype=torch.int8),
            lambda: numpy.array([1, 2, 3], dtype=numpy.int8),
            lambda: torch.zeros(2, 2),
        ],
        ids=["array", "typed-array", "ndarray", "matrix"],
    )
    def test_unrecognized_dtype(self, dtype, make_input):
        with pytest.raises(UnsupportedDTypeError):
            pdf(make_input(), dtype=dtype)

    def test_generic_dtype_for_matrix(self):
        with pytest.raises(UnsupportedDTypeError, match="generic"):
            pdf(torch.zeros(2, 2), dtype="generic")

    def test_accessor_validated_before_unsupported_input(self):
        with pytest.raises(TypeError):
            pdf(None, accessor=5)

    @pytest.mark.parametrize(
        "value", [True, None, lambda: None, {}, object(), "5"]
    )
    def test_unsupported_input_is_nan(self, value):
        assert math.isnan(pdf(value))


class TestPdfNumber:
    def test_number(self):
        assert pdf(-1) == 0.0
        assert pdf(1) == pytest.approx(0.367879441, abs=1e-7)

    def test_nan(self):
        assert math.isnan(pdf(math.nan))

    def test_parameters(self):
        assert pdf(2.0, alpha=3.0, beta=0.5) == number_pdf(2.0, 3.0, 0.5)

    def test_zero_dimensional_tensor(self):
        assert pdf(torch.tensor(1.0)) == pytest.approx(math.exp(-1))

    def test_ignored_options_warn(self):
        with pytest.warns(UserWarning, match="ignored for scalar"):
            assert pdf(1.0, dtype="float32") == pytest.approx(math.exp(-1))


class TestPdfSequence:
    def test_plain_list(self):
        data = [-2, -1, 0, 1, 2, 3, 4, 5]
        actual = pdf(data)
        assert actual is not data
        assert isinstance(actual, list)
        assert actual == pytest.approx(EXPONENTIAL, abs=1e-7)
        assert data == [-2, -1, 0, 1, 2, 3, 4, 5]

    def test_mutate(self):
        data = [-2, -1, 0, 1, 2, 3, 4, 5]
        actual = pdf(data, copy=False)
        assert actual is data
        assert data == pytest.approx(EXPONENTIAL, abs=1e-7)

    def test_tuple(self):
        actual = pdf((0.0, 1.0))
        assert actual == pytest.approx([1.0, math.exp(-1)])

    def test_tuple_cannot_mutate(self):
        with pytest.raises(TypeError, match="mutable"):
            pdf((0.0, 1.0), copy=False)

    def test_specific_dtype(self):
        data = list(range(10))
        actual = pdf(data, alpha=0.9, beta=0.1, dtype="float32")
        expected = torch.tensor(
            [
                math.inf,
                0.10659669,
                0.08999353,
                0.07819387,
                0.06874631,
                0.06083156,
                0.05404821,
                0.04815676,
                0.04299605,
                0.03844890,
            ],
            dtype=torch.float32,
        )
        assert actual.dtype == torch.float32
        assert actual.element_size() == 4
        torch.testing.assert_close(actual, expected, rtol=0, atol=1e-7)

    def test_generic_dtype(self):
        assert pdf([1.0], dtype="generic") == pytest.approx([math.exp(-1)])

    def test_mutate_with_dtype(self):
        with pytest.raises(DTypeMismatchError):
            pdf([1.0, 2.0], copy=False, dtype="float32")

    def test_non_numeric_elements(self):
        actual = pdf([1.0, None, "a", True])
        assert actual[0] == pytest.approx(math.exp(-1))
        assert all(math.isnan(value) for value in actual[1:])

    def test_empty(self):
        assert pdf([]) == []


class TestPdfTypedArray:
    EXPECTED = [
        0.0000000000,
        0.3678794412,
        0.2706705665,
        0.1493612051,
        0.0732625556,
        0.0336897350,
        0.0148725131,
        0.0063831738,
        0.0026837010,
        0.0011106882,
    ]

    def test_tensor(self):
        data = torch.arange(10, dtype=torch.int8)
        actual = pdf(data, alpha=2, beta=1)
        assert actual is not data
        assert actual.dtype == torch.float64
        torch.testing.assert_close(
            actual,
            torch.tensor(self.EXPECTED, dtype=torch.float64),
            rtol=0,
            atol=1e-7,
        )

    def test_tensor_mutate(self):
        data = torch.arange(10, dtype=torch.int8)
        actual = pdf(data, alpha=2, beta=1, copy=False)
        assert actual is data
        torch.testing.assert_close(data, torch.zeros(10, dtype=torch.int8))

    def test_numpy(self):
        data = numpy.arange(10, dtype=numpy.int8)
        actual = pdf(data, alpha=2, beta=1)
        assert isinstance(actual, numpy.ndarray)
        assert actual.dtype == numpy.float64
        numpy.testing.assert_allclose(actual, self.EXPECTED, atol=1e-7)
        numpy.testing.assert_array_equal(data, numpy.arange(10))

    def test_numpy_mutate(self):
        data = numpy.arange(10, dtype=numpy.float64)
        actual = pdf(data, alpha=2, beta=1, copy=False)
        assert actual is data
        numpy.testing.assert_allclose(data, self.EXPECTED, atol=1e-7)

    def test_numpy_read_only(self):
        data = numpy.arange(3, dtype=numpy.float64)
        data.flags.writeable = False
        with pytest.raises(torchgamma.GammaPDFError, match="read-only"):
            pdf(data, copy=False)

    def test_numpy_reversed(self):
        data = numpy.arange(5.0)[::-1]
        actual = pdf(data)
        numpy.testing.assert_allclose(actual, numpy.exp(-data), rtol=1e-12)
        numpy.testing.assert_array_equal(data, [4.0, 3.0, 2.0, 1.0, 0.0])

    def test_numpy_strided(self):
        data = numpy.arange(10.0)[::2]
        actual = pdf(data, alpha=2, beta=1)
        numpy.testing.assert_allclose(actual, self.EXPECTED[::2], atol=1e-7)

    def test_numpy_reversed_mutate(self):
        base = numpy.arange(10.0)
        data = base[::-1]
        actual = pdf(data, alpha=2, beta=1, copy=False)
        assert actual is data
        numpy.testing.assert_allclose(base, self.EXPECTED, atol=1e-7)

    def test_numpy_longdouble(self):
        data = numpy.arange(3, dtype=numpy.longdouble)
        actual = pdf(data)
        assert actual.dtype == numpy.float64
        numpy.testing.assert_allclose(actual, numpy.exp(-numpy.arange(3.0)))

    def test_numpy_longdouble_mutate(self):
        data = numpy.arange(3, dtype=numpy.longdouble)
        actual = pdf(data, copy=False)
        assert actual is data
        assert data.dtype == numpy.longdouble
        numpy.testing.assert_allclose(
            data.astype(numpy.float64), numpy.exp(-numpy.arange(3.0))
        )

    def test_numpy_longdouble_mutate_with_dtype(self):
        data = numpy.arange(3, dtype=numpy.longdouble)
        with pytest.raises(DTypeMismatchError):
            pdf(data, copy=False, dtype="float64")

    def test_specific_dtype(self):
        actual = pdf(torch.tensor([1.0, 2.0]), dtype=torch.float32)
        assert actual.dtype == torch.float32

    def test_mutate_with_dtype(self):
        data = torch.tensor([1.0, 2.0], dtype=torch.float64)
        with pytest.raises(DTypeMismatchError):
            pdf(data, copy=False, dtype="float32")
        torch.testing.assert_close(data, torch.tensor([1.0, 2.0], dtype=torch.float64))

    def test_mutate_with_matching_dtype(self):
        data = torch.tensor([1.0, 2.0], dtype=torch.float32)
        actual = pdf(data, copy=False, dtype="float32")
        assert actual is data

    def test_empty(self):
        actual = pdf(torch.empty(0, dtype=torch.int8))
        assert actual.dtype == torch.float64
        assert actual.numel() == 0


class TestPdfAccessor:
    EXPECTED = [
        0.000000e00,
        6.721254e-01,
        1.338526e-01,
        1.499429e-02,
        1.327150e-03,
        1.032420e-04,
        7.401770e-06,
    ]

    @staticmethod
    def get_value(record):
        return record[1]

    def test_accessor(self):
        data = [[i, i] for i in range(7)]
        actual = pdf(data, alpha=3, beta=3, accessor=self.get_value)
        assert actual is not data
        assert actual == pytest.approx(self.EXPECTED, abs=1e-7)
        assert data[1] == [1, 1]

    def test_accessor_mutate(self):
        data = [[i, i] for i in range(7)]
        actual = pdf(data, alpha=3, beta=3, accessor=self.get_value, copy=False)
        assert actual is data
        assert data == pytest.approx(self.EXPECTED, abs=1e-7)

    def test_dtype_ignored(self):
        with pytest.warns(UserWarning, match="dtype is ignored"):
            actual = pdf([[0, 1]], accessor=self.get_value, dtype="float32")
        assert actual == pytest.approx([math.exp(-1)])

    def test_empty(self):
        assert pdf([], accessor=self.get_value) == []


class TestPdfPath:
    EXPECTED = [
        2.0,
        2.706706e-01,
        3.663128e-02,
        4.957504e-03,
        6.709253e-04,
        9.079986e-05,
        1.228842e-05,
    ]

    def test_deep_set(self):
        data = [{"x": [9, i]} for i in range(7)]
        actual = pdf(data, alpha=1, beta=2, path="x.1")
        assert actual is data
        assert [d["x"][1] for d in data] == pytest.approx(self.EXPECTED, abs=1e-7)

    def test_custom_separator(self):
        data = [{"x": [9, i]} for i in range(7)]
        actual = pdf(data, alpha=1, beta=2, path="x/1", sep="/")
        assert actual is data
        assert [d["x"][1] for d in data] == pytest.approx(self.EXPECTED, abs=1e-7)

    def test_single_record(self):
        data = [{"x": [9, 0]}]
        pdf(data, alpha=1, beta=2, path="x.1")
        assert data == [{"x": [9, pytest.approx(2.0)]}]

    def test_malformed_path(self):
        with pytest.raises(PathError):
            pdf([{"x": 1}], path="x..y")

    def test_empty(self):
        data = []
        assert pdf(data, path="x") is data


class TestPdfMatrix:
    def matrix(self):
        return (torch.arange(25, dtype=torch.float64) / 5).reshape(5, 5)

    def expected(self, dtype=torch.float64):
        values = [number_pdf(i / 5, 1, 1) for i in range(25)]
        return torch.tensor(values, dtype=dtype).reshape(5, 5)

    def test_matrix(self):
        mat = self.matrix()
        out = pdf(mat)
        assert out is not mat
        assert out.shape == (5, 5)
        torch.testing.assert_close(out, self.expected())
        torch.testing.assert_close(mat, self.matrix())

    def test_matrix_mutate(self):
        mat = self.matrix()
        out = pdf(mat, copy=False)
        assert out is mat
        torch.testing.assert_close(mat, self.expected())

    def test_specific_dtype(self):
        out = pdf(self.matrix(), dtype="float32")
        assert out.dtype == torch.float32
        torch.testing.assert_close(out, self.expected(torch.float32))

    def test_numpy_matrix(self):
        mat = self.matrix().numpy()
        out = pdf(mat, dtype="float32")
        assert isinstance(out, numpy.ndarray)
        assert out.dtype == numpy.float32
        assert out.shape == (5, 5)

    def test_numpy_flipped_matrix(self):
        mat = self.matrix().numpy()[::-1, ::-1]
        out = pdf(mat)
        numpy.testing.assert_allclose(
            out, self.expected().numpy()[::-1, ::-1], rtol=1e-12
        )

    def test_numpy_flipped_matrix_mutate(self):
        base = self.matrix().numpy()
        out = pdf(base[::-1, ::-1], copy=False)
        assert numpy.shares_memory(out, base)
        numpy.testing.assert_allclose(base, self.expected().numpy(), rtol=1e-12)

    def test_numpy_bfloat16(self):
        with pytest.raises(UnsupportedDTypeError, match="NumPy"):
            pdf(self.matrix().numpy(), dtype="bfloat16")

    def test_empty(self):
        out = pdf(torch.empty(0, 0))
        assert out.shape == (0, 0)
        assert out.dtype == torch.float64

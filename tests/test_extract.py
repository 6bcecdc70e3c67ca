"""
Tests for MatrixColumnExtractor
"""

import pytest

from sparse_linear_algebra import (
    ALL_INDICES,
    DimensionMismatchError,
    IndexOutOfBoundsError,
)
from sparse_linear_algebra.operators import (
    binary_operator,
    OperatorOptions,
    Mask,
    MatrixColumnExtractor,
)

# 3x2: column 0 = [1, 2, 3], column 1 = [4, 5, 6]
SOURCE = {(0, 0): 1, (1, 0): 2, (2, 0): 3, (0, 1): 4, (1, 1): 5, (2, 1): 6}


@pytest.fixture
def source(make_matrix):
    return make_matrix((3, 2), SOURCE, "UINT8")


class TestColumnExtraction:
    def test_selected_rows(self, source, make_vector):
        output = make_vector(2, value_type="UINT8")
        MatrixColumnExtractor().apply(source, 0, [0, 2], output)

        assert output.to_dict() == {0: 1, 1: 3}
        assert [tuple(element) for element in output.element_list()] == [(0, 1), (1, 3)]

    def test_all_rows(self, source, make_vector):
        output = make_vector(3, value_type="UINT8")
        MatrixColumnExtractor().apply(source, 1, ALL_INDICES, output)
        assert output.to_dict() == {0: 4, 1: 5, 2: 6}

    def test_selector_order_and_repeats(self, source, make_vector):
        output = make_vector(4, value_type="UINT8")
        MatrixColumnExtractor().apply(source, 1, [2, 0, 2, 1], output)
        assert output.to_dict() == {0: 6, 1: 4, 2: 6, 3: 5}

    def test_absent_entries_stay_absent(self, make_matrix, make_vector):
        sparse_source = make_matrix((4, 2), {(1, 0): 7, (3, 1): 9}, "UINT8")
        output = make_vector(4, value_type="UINT8")

        MatrixColumnExtractor().apply(sparse_source, 0, ALL_INDICES, output)

        assert output.to_dict() == {1: 7}
        assert output.element_value(0) is None

    def test_empty_selector(self, source, make_vector):
        output = make_vector(0, value_type="UINT8")
        MatrixColumnExtractor().apply(source, 0, [], output)
        assert output.length == 0
        assert output.number_of_stored_elements() == 0

    def test_iterator_selector(self, source, make_vector):
        output = make_vector(2, value_type="UINT8")
        MatrixColumnExtractor().apply(source, 1, (row for row in (2, 0)), output)
        assert output.to_dict() == {0: 6, 1: 4}

    def test_wider_source_type(self, make_matrix, make_vector):
        wide = make_matrix((3, 2), SOURCE, "UINT16")
        output = make_vector(2, value_type="UINT8")
        MatrixColumnExtractor().apply(wide, 0, [0, 2], output)
        assert output.to_dict() == {0: 1, 1: 3}

    def test_transposed_source(self, source, make_vector):
        output = make_vector(2, value_type="UINT8")
        MatrixColumnExtractor(OperatorOptions(transpose_first=True)).apply(
            source, 2, ALL_INDICES, output
        )
        # column 2 of the transpose is row 2 of the source
        assert output.to_dict() == {0: 3, 1: 6}

    def test_accumulator(self, source, make_vector):
        output = make_vector(2, {0: 10}, "UINT8")
        MatrixColumnExtractor(accumulator=binary_operator.Plus("UINT8")).apply(
            source, 0, [0, 2], output
        )
        assert output.to_dict() == {0: 11, 1: 3}

    def test_mask(self, source, make_vector):
        output = make_vector(3, {1: 99}, "UINT8")
        mask = make_vector(3, {0: True, 1: True}, "BOOL")

        MatrixColumnExtractor(OperatorOptions(replace_output=True)).apply_with_mask(
            Mask(mask, complement=True), source, 0, ALL_INDICES, output
        )
        # only index 2 is selected; replace clears the rest
        assert output.to_dict() == {2: 3}


class TestExtractionErrors:
    def test_row_out_of_bounds(self, source, make_vector):
        with pytest.raises(IndexOutOfBoundsError):
            MatrixColumnExtractor().apply(source, 0, [0, 3], make_vector(2, value_type="UINT8"))

    def test_negative_row(self, source, make_vector):
        with pytest.raises(IndexOutOfBoundsError):
            MatrixColumnExtractor().apply(source, 0, [-1], make_vector(1, value_type="UINT8"))

    def test_column_out_of_bounds(self, source, make_vector):
        with pytest.raises(IndexOutOfBoundsError):
            MatrixColumnExtractor().apply(source, 2, [0], make_vector(1, value_type="UINT8"))

    def test_transposed_bounds(self, source, make_vector):
        # transposed source is 2x3: column 2 is valid, row 2 is not
        extractor = MatrixColumnExtractor(OperatorOptions(transpose_first=True))
        with pytest.raises(IndexOutOfBoundsError):
            extractor.apply(source, 0, [2], make_vector(1, value_type="UINT8"))

    def test_output_length_mismatch(self, source, make_vector):
        with pytest.raises(DimensionMismatchError):
            MatrixColumnExtractor().apply(source, 0, [0, 2], make_vector(3, value_type="UINT8"))

    def test_bool_indices_rejected(self, source, make_vector):
        with pytest.raises(TypeError):
            MatrixColumnExtractor().apply(source, True, [0], make_vector(1, value_type="UINT8"))
        with pytest.raises(TypeError):
            MatrixColumnExtractor().apply(source, 0, [False], make_vector(1, value_type="UINT8"))

    def test_output_untouched_on_error(self, source, make_vector):
        output = make_vector(2, {0: 42}, "UINT8")
        with pytest.raises(IndexOutOfBoundsError):
            MatrixColumnExtractor().apply(source, 0, [0, 5], output)
        assert output.to_dict() == {0: 42}

    def test_source_must_be_matrix(self, make_vector):
        with pytest.raises(TypeError):
            MatrixColumnExtractor().apply(make_vector(3), 0, [0], make_vector(1))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

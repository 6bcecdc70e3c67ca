"""
Tests for element-wise multiplication (intersection of stored coordinates)
"""

import operator

import pytest

from sparse_linear_algebra.operators import (
    binary_operator,
    monoid,
    semiring,
    OperatorOptions,
    Mask,
    ElementWiseVectorMultiplication,
    ElementWiseMatrixMultiplication,
)

import oracle


class TestElementWiseVectorMultiplication:
    def test_empty_operands_give_empty_output(self, make_vector):
        product = make_vector(10)
        ElementWiseVectorMultiplication(binary_operator.Times("INT32")).apply(
            make_vector(10), make_vector(10), product
        )
        assert product.number_of_stored_elements() == 0

    def test_intersection_drops_one_sided(self, make_vector):
        first = {0: 2, 1: 3, 4: 5}
        second = {1: 7, 3: 1, 4: 2}
        product = make_vector(5)

        ElementWiseVectorMultiplication(binary_operator.Times("INT32")).apply(
            make_vector(5, first), make_vector(5, second), product
        )

        assert product.to_dict() == oracle.ewise_mult(first, second, operator.mul)
        assert product.to_dict() == {1: 21, 4: 10}
        assert product.element_value(0) is None

    def test_disjoint_operands(self, make_vector):
        product = make_vector(4, {2: 9})
        ElementWiseVectorMultiplication(binary_operator.Plus("INT32")).apply(
            make_vector(4, {0: 1}), make_vector(4, {1: 1}), product
        )
        assert product.number_of_stored_elements() == 0

    def test_monoid(self, make_vector):
        product = make_vector(3)
        ElementWiseVectorMultiplication(monoid.Min("INT32")).apply(
            make_vector(3, {0: 4, 1: 1}), make_vector(3, {0: 2, 1: 6, 2: 5}), product
        )
        assert product.to_dict() == {0: 2, 1: 1}

    def test_semiring_uses_multiply_operator(self, make_vector):
        product = make_vector(3)
        ElementWiseVectorMultiplication(semiring.PlusTimes("INT32")).apply(
            make_vector(3, {0: 4, 1: 3}), make_vector(3, {1: 6, 2: 5}), product
        )
        assert product.to_dict() == {1: 18}

    def test_accumulator_doubles(self, make_vector):
        first = make_vector(4, {0: 1, 1: 2, 2: 3})
        second = make_vector(4, {0: 4, 2: 5, 3: 6})
        product = make_vector(4)

        times = binary_operator.Times("INT32")
        ElementWiseVectorMultiplication(times).apply(first, second, product)
        once = product.to_dict()
        ElementWiseVectorMultiplication(times, accumulator=binary_operator.Plus("INT32")).apply(
            first, second, product
        )
        assert product.to_dict() == {key: 2 * value for key, value in once.items()}

    def test_structural_mask(self, make_vector):
        prior = {0: -1, 1: -1}
        mask_values = {0: False, 2: False}
        product = make_vector(3, prior)

        ElementWiseVectorMultiplication(
            binary_operator.Plus("INT32"), OperatorOptions(structural_mask=True)
        ).apply_with_mask(
            make_vector(3, mask_values, "BOOL"),
            make_vector(3, {0: 1, 1: 1, 2: 1}), make_vector(3, {0: 2, 1: 2, 2: 2}),
            product,
        )

        expected = oracle.write(
            prior, {0: 3, 1: 3, 2: 3}, oracle.mask_predicate(mask_values, structural=True)
        )
        assert product.to_dict() == expected == {0: 3, 1: -1, 2: 3}


class TestElementWiseMatrixMultiplication:
    def test_intersection(self, make_matrix):
        first = {(0, 0): 1, (0, 1): 2, (1, 1): 3}
        second = {(0, 1): 10, (1, 0): 20, (1, 1): 30}
        product = make_matrix((2, 2))

        ElementWiseMatrixMultiplication(binary_operator.Times("INT32")).apply(
            make_matrix((2, 2), first), make_matrix((2, 2), second), product
        )
        assert product.to_dict() == {(0, 1): 20, (1, 1): 90}

    def test_transpose_first(self, make_matrix):
        product = make_matrix((2, 2))
        ElementWiseMatrixMultiplication(
            binary_operator.First("INT32"), OperatorOptions(transpose_first=True)
        ).apply(
            make_matrix((2, 2), {(0, 1): 4}),
            make_matrix((2, 2), {(1, 0): 9, (0, 1): 1}),
            product,
        )
        assert product.to_dict() == {(1, 0): 4}

    def test_complement_mask_with_replace(self, make_matrix):
        prior = {(0, 0): 5, (1, 1): 5}
        mask_values = {(0, 0): 1}
        product = make_matrix((2, 2), prior)

        ElementWiseMatrixMultiplication(
            binary_operator.Times("INT32"), OperatorOptions(replace_output=True)
        ).apply_with_mask(
            Mask(make_matrix((2, 2), mask_values, "UINT8"), complement=True),
            make_matrix((2, 2), {(0, 0): 2, (0, 1): 3}),
            make_matrix((2, 2), {(0, 0): 2, (0, 1): 3}),
            product,
        )

        expected = oracle.write(
            prior, {(0, 0): 4, (0, 1): 9},
            oracle.mask_predicate(mask_values, complement=True), replace=True,
        )
        assert product.to_dict() == expected == {(0, 1): 9}

    def test_repeated_accumulation(self, make_matrix):
        matrix = make_matrix((10, 5), {(1, 2): 3})
        product = make_matrix((10, 5))
        applier = ElementWiseMatrixMultiplication(
            binary_operator.Plus("INT32"), accumulator=binary_operator.Plus("INT32")
        )
        applier.apply(matrix, matrix, product)
        applier.apply(matrix, matrix, product)
        assert product.element_value((1, 2)) == 12


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

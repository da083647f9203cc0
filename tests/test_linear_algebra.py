import pytest

from algokit.linear_algebra import Matrix


@pytest.fixture
def a():
    m = Matrix.from_rows([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])
    m[0, 0] = 42.0
    return m


def test_indexing():
    m = Matrix.from_rows([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])
    assert m[0, 0] == 1.0
    m[0, 0] = 42.0
    assert m[0, 0] == 42.0
    assert m[1, 2] == 6.0


def test_index_out_of_range():
    m = Matrix.zeros(2, 3)
    with pytest.raises(IndexError):
        value = m[2, 0]
        assert value == 0.0
    with pytest.raises(IndexError):
        m[0, 3] = 1.0
    assert m.data == [0.0] * 6
    assert (m.rows, m.cols) == (2, 3)


def test_addition(a):
    b = Matrix.ones(a.rows, a.cols)
    assert a + b == Matrix.from_rows([[43.0, 3.0, 4.0], [5.0, 6.0, 7.0]])


def test_subtraction_undoes_addition(a):
    b = Matrix.ones(a.rows, a.cols)
    assert (a + b) - b == a


def test_addition_shape_mismatch(a):
    with pytest.raises(ValueError):
        a + Matrix.ones(3, 2)


def test_hadamard(a):
    c = Matrix.from_rows([[1.0, 4.0, 7.0], [8.0, 20.0, 5.0]])
    assert a.hadamard(c) == Matrix.from_rows([[42.0, 8.0, 21.0], [32.0, 100.0, 30.0]])


def test_negation_and_scalar(a):
    c = Matrix.from_rows([[1.0, 4.0, 7.0], [8.0, 20.0, 5.0]])
    e = -a.hadamard(c)
    assert e == Matrix.from_rows([[-42.0, -8.0, -21.0], [-32.0, -100.0, -30.0]])
    expected = Matrix.from_rows([[-63.0, -12.0, -31.5], [-48.0, -150.0, -45.0]])
    assert 1.5 * e == expected
    assert e * 1.5 == expected


def test_matrix_product():
    f = Matrix.from_rows([[1.0, 2.0], [3.0, 4.0]]) * Matrix.from_rows([[4.0, 5.0], [6.0, 7.0]])
    assert f == Matrix.from_rows([[16.0, 19.0], [36.0, 43.0]])


def test_rectangular_product(a):
    g = Matrix.from_rows(
        [[4.0, 5.0, 6.0, 7.0], [8.0, 9.0, 10.0, 11.0], [12.0, 13.0, 14.0, 15.0]]
    )
    expected = Matrix.from_rows(
        [[220.0, 267.0, 314.0, 361.0], [128.0, 143.0, 158.0, 173.0]]
    )
    assert a * g == expected
    assert a @ g == expected


def test_product_shape_mismatch(a):
    with pytest.raises(ValueError):
        product = a * a
        assert product == a
    assert (a.rows, a.cols) == (2, 3)
    assert a[0, 0] == 42.0


def test_transpose(a):
    t = a.transpose()
    assert (t.rows, t.cols) == (3, 2)
    assert t[2, 1] == a[1, 2]
    assert t.transpose() == a


def test_eye():
    assert Matrix.eye(3) == Matrix.from_rows(
        [[1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0]]
    )


def test_identity_is_neutral(a):
    assert Matrix.eye(2) * a == a
    assert a * Matrix.eye(3) == a


def test_trace():
    f = Matrix.from_rows([[16.0, 19.0], [36.0, 43.0]])
    assert f.trace() == 59.0


def test_trace_requires_square(a):
    with pytest.raises(ValueError):
        a.trace()


def test_determinant():
    f = Matrix.from_rows([[16.0, 19.0], [36.0, 43.0]])
    assert f.determinant() == 4.0
    h = Matrix.from_rows(
        [
            [2.0, 4.0, 3.0, 3.0],
            [2.0, 4.0, 4.0, 0.0],
            [0.0, 9.0, 7.0, 8.0],
            [0.0, 5.0, 3.0, 7.0],
        ]
    )
    assert h.determinant() == 2.0


def test_determinant_single_entry():
    assert Matrix.from_rows([[7.5]]).determinant() == 7.5


def test_determinant_requires_square(a):
    with pytest.raises(ValueError):
        a.determinant()


def test_gaussian_elimination():
    m = Matrix.from_rows([[2.0, -1.0, 1.0], [1.0, 1.0, 5.0]])
    m.gaussian_elimination()
    assert m[1, 0] == 0.0
    assert m == Matrix.from_rows([[2.0, -1.0, 1.0], [0.0, 3.0, 9.0]])


def test_gaussian_elimination_is_upper_triangular():
    m = Matrix.from_rows([[2.0, 1.0, 1.0], [4.0, 3.0, 3.0], [8.0, 7.0, 9.0]])
    m.gaussian_elimination()
    assert [m[1, 0], m[2, 0], m[2, 1]] == [0.0, 0.0, 0.0]
    assert [m[0, 0], m[0, 1], m[0, 2]] == [2.0, 1.0, 1.0]


@pytest.mark.parametrize(
    "rows",
    [[], [[]], [[1.0, 2.0], [3.0]]],
)
def test_from_rows_rejects_bad_input(rows):
    with pytest.raises(ValueError):
        Matrix.from_rows(rows)


@pytest.mark.parametrize("shape", [(0, 3), (3, 0)])
def test_zeros_rejects_empty_shape(shape):
    with pytest.raises(ValueError):
        Matrix.zeros(*shape)


def test_ones_entries():
    m = Matrix.ones(2, 2)
    assert m.data == [1.0, 1.0, 1.0, 1.0]
from matbench.catalog import Matrix


def shape(matrix: Matrix) -> tuple[int, int] | None:
    """Return ``(rows, cols)``, or None when the rows are ragged."""
    if len(matrix) == 0:
        return (0, 0)

    cols = len(matrix[0])
    if any(len(row) != cols for row in matrix):
        return None

    return (len(matrix), cols)


def multiply(a: Matrix, b: Matrix) -> Matrix:
    rows = len(a)
    inner = len(b)
    cols = len(b[0]) if b else 0

    product: Matrix = []
    for i in range(rows):
        row = []
        for j in range(cols):
            total = 0
            for k in range(inner):
                total += a[i][k] * b[k][j]
            row.append(total)
        product.append(row)

    return product


def verify(a: Matrix, b: Matrix, claimed: Matrix) -> bool:
    """Check ``claimed == a @ b`` exactly.

    Returns False instead of raising when ``a`` is empty, an operand is
    ragged or the inner dimensions disagree. The shape of ``claimed`` is
    checked before any element is compared.
    """
    shape_a = shape(a)
    shape_b = shape(b)
    if shape_a is None or shape_b is None:
        return False

    rows, inner = shape_a
    if rows == 0 or inner == 0 or inner != shape_b[0]:
        return False
    cols = shape_b[1]

    if len(claimed) != rows or any(len(row) != cols for row in claimed):
        return False

    return claimed == multiply(a, b)

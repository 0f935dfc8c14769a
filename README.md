# aprilcommon

Pure-Python building blocks: a small dense matrix type with determinants,
inverses, PLU and Cholesky factorisations, a tiny matrix expression
language, and a set of string helpers.

## Install

    pip install aprilcommon

## Matrices

`aprilcommon.matrix.Matrix` holds floats in row-major order. A 0x0 matrix
is a scalar. In multiplication, scaling, addition and transposition a 1x1
matrix also acts as a scalar. In products a scalar combines with a matrix
of any shape. Shape mismatches raise `MatrixError`.

```python
from aprilcommon.matrix import Matrix
from aprilcommon import decomp, vector
from aprilcommon.expr import evaluate

a = Matrix.from_data(2, 2, [4, 7, 2, 6])
b = Matrix.identity(2)

c = a @ b + b              # product and sum
t = a.transpose()
print(c.format("%8.3f"))   # one line of text per row
print(a[0, 1], a.get(1, 0), a.max())

print(decomp.det(a))                              # 10.0
inv = decomp.inverse(a)                           # MatrixError if singular
x = decomp.solve(a, Matrix.from_data(2, 1, [1, 2]))

lu = decomp.plu(a)
print(lu.l(), lu.u(), lu.p(), lu.det(), lu.singular)

r = evaluate("(M+M)'*M^-1", a, b, a)
```

Other `Matrix` members: `zeros`, `scalar`, `identity`, `copy`, `select`
(an inclusive sub-block), `put`, `scale`, `scale_inplace`, `format_transpose`,
unary minus and in-place `+=` / `-=`.

### Expressions

`aprilcommon.expr.evaluate(expr, *matrices)` evaluates a string in which
each `M` or `F` takes the next matrix argument. It supports `+`, `-`, `*`,
juxtaposition as a product, unary minus, `'` (transpose), `^-1` (inverse),
parentheses, inline numeric constants (which become scalars) and spaces.
A malformed expression, or a wrong number of matrices, raises
`ExpressionError`. The result is always a new matrix.

### Factorisations and solvers

`aprilcommon.decomp` provides:

- `plu(a)`: a `PLU` object with `det()`, `p()`, `l()`, `u()` and `solve(b)`.
- `det(a)`, `inverse(a)` and `solve(a, b)`.
- `chol(a)`: a `Cholesky` object (`u`, `is_spd`, `solve(b)`), and
  `chol_inverse(a)`.
- Triangular solvers on plain lists: `ltriangle_solve`, `utriangle_solve`
  and `ltranspose_triangle_solve`.

### Vectors

`aprilcommon.vector` works on row or column matrices:

```python
v = Matrix.from_data(3, 1, [1, 0, 0])
w = Matrix.from_data(3, 1, [0, 1, 0])
print(vector.cross(v, w))      # the 3x1 vector (0, 0, 1)
print(vector.dot(v, w), vector.magnitude(v), vector.distance(v, w))
print(vector.normalize(Matrix.from_data(1, 2, [3, 4])))
```

`is_vector`, `is_vector_len` and `err_inf` (the largest element-wise
difference between two matrices of the same shape) are also there.

## Strings

`aprilcommon.strutil` has splitting, ASCII trimming and case conversion,
searching, replacing and `$VAR` expansion from the environment.
`aprilcommon.textbuf.StringBuffer` is a growable text buffer.
`aprilcommon.feeder.StringFeeder` walks a string while it tracks the line
and column.

```python
from aprilcommon import strutil
from aprilcommon.textbuf import StringBuffer
from aprilcommon.feeder import StringFeeder

strutil.split("this is a haystack", " ")   # ['this', 'is', 'a', 'haystack']
strutil.replace("singing", "ing", "")      # 's'
strutil.substring("string", 1, 3)          # 'tr'
strutil.expand_envs("$HOME/abc")

sb = StringBuffer()
sb.append_string("abc")
sb.appendf("%d", 42)
print(str(sb), len(sb), sb.pop_back())     # abc42 5 2

f = StringFeeder("ab\ncd")
f.require("ab\n")
print(f.line, f.column)                    # 2 0
```

## What this package does not do

It has no singular value decomposition, and it does not read or write
image files of any kind. It is a library only and has no command-line
tool.

## Tests

    pip install -e ".[test]"
    pytest
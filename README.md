# meshmath

Small, dependency-free geometry helpers for polygon mesh processing.

## Modules

- `meshmath.matrix` – a general `Matrix` type stored column by column
  (vectors are `n x 1` matrices). It supports `+`, `-`, negation, scalar
  `*` and `/`, and `@` for matrix products; `m[i, j]` addresses row and
  column, `m[k]` the k-th stored entry. Constructors: `Matrix(rows, cols,
  values)` (values row by row), `Matrix.filled`, `Matrix.from_rows`,
  `Matrix.from_columns` and `Matrix.identity`. Free functions: `vector`,
  `cmult`, `transpose`, `sqrnorm`, `norm`, `normalize`, `minimum`, `maximum`,
  `dot`, `distance`, `perp`, `cross` and `parse_vector`.
- `meshmath.transforms` – OpenGL-style 4x4 matrices: `viewport_matrix`,
  `frustum_matrix`, `perspective_matrix`, `ortho_matrix` (each with an
  inverse where one is given: `inverse_viewport_matrix`,
  `inverse_frustum_matrix`, `inverse_perspective_matrix`), `look_at_matrix`,
  `translation_matrix`, `scaling_matrix`, `rotation_matrix_x/_y/_z`,
  `rotation_matrix` (axis and angle in degrees) and
  `quaternion_rotation_matrix`; plus `linear_part`, `projective_transform`,
  `affine_transform` and `linear_transform`.
- `meshmath.bounding_box` – an axis-aligned `BoundingBox` that grows with
  `+=` by points or other boxes, with `min`, `max`, `center`, `is_empty` and
  `size` (the diagonal length).
- `meshmath.barycentric` – `barycentric_coordinates(p, u, v, w)`; a
  degenerate triangle yields `(1/3, 1/3, 1/3)`.
- `meshmath.tessellation` – `tessellate(points)` splits a polygon into index
  triples so that the sum of squared triangle areas is minimal;
  `triangle_area` gives that weight for one triangle.
- `meshmath.textures` – the 256-entry cold-to-warm colour map
  (`cold_warm_colors`) and `checkerboard_texture(resolution)`, an RGB image
  with 32-pixel cells.

Invalid input (mismatched shapes, out-of-range indices, too few polygon
points) raises `ValueError` or `IndexError`.

## Installing

```
pip install .
```

## Example

```python
from meshmath.matrix import Matrix, vector, cross
from meshmath.transforms import rotation_matrix_z, affine_transform
from meshmath.bounding_box import BoundingBox
from meshmath.tessellation import tessellate

x = vector(1.0, 0.0, 0.0)
y = vector(0.0, 1.0, 0.0)
print(cross(x, y))                         # 0 0 1

m = rotation_matrix_z(90.0)
print(affine_transform(m, x))              # approximately 0 1 0
print(Matrix.identity(4) @ m == m)         # True

box = BoundingBox()
box += vector(0.0, 0.0, 0.0)
box += vector(2.0, 2.0, 2.0)
print(box.center(), box.size())

square = [vector(0.0, 0.0, 0.0), vector(1.0, 0.0, 0.0),
          vector(1.0, 1.0, 0.0), vector(0.0, 1.0, 0.0)]
print(tessellate(square))                  # two index triples
```

## What it does not do

The package has no matrix inversion, determinants or eigendecomposition,
and no mesh data structure, file reading or writing, or rendering. The
textures are returned as plain data for use by whatever draws them.

## Running the tests

```
pip install .[test]
pytest
```
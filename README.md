# raytools

This package holds the geometry a ray tracer is built on. It uses only the standard library.

## What it contains

- `raytools.vec2.Vec2`, `raytools.vectors.Vec3` and `raytools.vec4.Vec4` are vectors. They add, subtract, multiply and divide element-wise, either with a vector of the same kind or with a number. Division adds `1e-30` to the divisor, so dividing by zero does not raise. Each has `length()`, `normalize()` (which works in place), `unit()` and `dot()`. `Vec3` and `Vec4` also have `zero()`, and `Vec3` has `cross()`. Components can be read by name (`v.x`) or by index (`v[0]`). An index out of range raises `IndexError`.
- `raytools.vectors.Point3` is a position and has `set_all()`. `Point3 - Point3` gives a `Vec3`. `Point3 + Vec3` and `Point3 - Vec3` give a `Point3`.
- `raytools.vectors.Normal3` is a surface normal. It compares equal to a `Vec3` that has the same components.
- `raytools.vectors` also has the free functions `dot`, `cross`, `reflect` and `unit_vector`, and the constants `PI`, `INV_PI`, `PI_OVER_2`, `PI_OVER_4`, `EPS` and `EPS1`.
- `raytools.vec4.to_homogeneous` turns a `Point3` into a `Vec4` with `w=1`, and a `Vec3` or `Normal3` into a `Vec4` with `w=0`. `Vec4.to_point3()`, `to_vec3()` and `to_normal3()` convert back.
- `raytools.matrix2.Mat2`, `raytools.matrix3.Mat3` and `raytools.matrix4.Mat4` are matrices stored as rows of vectors.
  - `+`, `-` and `*` work with a matrix of the same size or with a number. `Mat4 * Vec4` gives a `Vec4`.
  - All three have `full()` and `determinant()`.
  - `Mat3` and `Mat4` also have `identity()`, `zeros()`, `trace()`, `minor()`, `cofactor()`, `transpose()` and `inverse()`. `inverse()` raises `ValueError` for a singular matrix.
  - Building `Mat3()` or `Mat4()` with no rows gives the identity. `Mat2()` gives all zeros.
- `raytools.matrix4` builds `Mat4` transforms:
  - `translation` and `scale` take either three numbers or one `Vec3`.
  - `rotation_x`, `rotation_y` and `rotation_z` take an angle in radians.
  - `view_transform(origin, target, up)` builds a view transform.
  - `Mat4.orient` and `Mat4.look_at` build matrices from a position and a set of axes.
- `raytools.ray.Ray` has `origin`, `direction` and `max_range` (infinite by default). `position(t)` gives the point at distance `t` along the ray.
- `raytools.light.PointLight` has `position` and `intensity`.
- `raytools.orthonormal.OrthoNormalBasis`: `from_w(w)` builds a basis around a direction. `local(a, b, c)`, or `local(vec3)`, expresses local coordinates in that basis.
- `raytools.transformation.Transformation` keeps a `Mat4` together with its inverse and its inverse transpose. They are available as the properties `matrix`, `inverse_matrix` and `inverse_transpose_matrix`. `world_to_object()` and `object_to_world()` map a `Ray`, `Point3`, `Vec3` or `Normal3` from one space to the other. In `object_to_world()`, normals are mapped with the inverse transpose.

## Installation

```
pip install .
```

To install with the test dependencies:

```
pip install ".[test]"
```

## Example

```python
from math import pi

from raytools.matrix4 import rotation_x, scale, translation
from raytools.ray import Ray
from raytools.transformation import Transformation
from raytools.vec4 import to_homogeneous
from raytools.vectors import Point3, Vec3

# Chain transformations; the rightmost one is applied first.
m = translation(10.0, 5.0, 7.0) * scale(5.0, 5.0, 5.0) * rotation_x(pi / 2)
p = (m * to_homogeneous(Point3(1.0, 0.0, 1.0))).to_point3()
# p is approximately Point3(15, 0, 7)

# Move a ray into the object space of a scaled object.
ray = Ray(Point3(0.0, 0.0, -5.0), Vec3(0.0, 0.0, 1.0))
local_ray = Transformation(scale(2.0, 2.0, 2.0)).world_to_object(ray)
print(local_ray.position(3.0))
```

## What it does not do

This package contains only the mathematics. It has no shapes to intersect, no materials or shading, no camera, no scene building, no bounding boxes and no image output. It also has no command to run. A renderer has to supply these parts itself and use these types underneath them.

## Running the tests

```
pytest
```
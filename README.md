# voxelmesh

Small, dependency-free building blocks for geometry work: 3D and 4D
vectors, a column-major 4x4 matrix, string helpers, and a line-oriented
text parser for simple keyword-based file formats.

## Modules

- `voxelmesh.vectors`
  - `Vector3DF` (float components) and `Vector3DI` (integer components,
    division truncates toward zero), both built on `Vector3D`. They support
    `+ - * /` and the in-place forms with scalars and other vectors,
    `dot`, `cross` (in place), `dist`, `dist_sq`, `length`, `length_sq`,
    `normalize` (integer vectors are scaled to length 255), `clamp`,
    `random`, `random_between`, `rgb_to_hsv`, `hsv_to_rgb`, `copy`, and
    `transform(matrix)`, which treats the vector as the point (x, y, z, 1).
  - `Vector4DF` with the same arithmetic plus `dot`, `cross`, `dist`,
    `dist_sq`, `length`, `normalize`, `clamp` (upper bounds only) and
    `transform(matrix)`.
  - `min3` and `max3`.
- `voxelmesh.matrix`
  - `Matrix4F`: a 4x4 float matrix whose `data` list is column-major;
    element `(row, col)` is `m[row, col]`. A new matrix is the identity.
    It offers `multiply_in_place` (M = M*op, also `*=` and `a @ b`),
    `left_multiply_in_place` (M = mtx*M), `translate_in_place`,
    `pre_translate`, `scale_in_place`, the inverse forms
    `inv_translate_in_place`, `inv_left_multiply_in_place` and
    `inv_scale_in_place`, `transpose`, `identity`, `fill`, `invert_trs`
    (a general inverse; a singular matrix is left unchanged),
    `transform_point`, `get_t`, `print` and `write_to_str`.
- `voxelmesh.strings`: `str_filebase`, `str_filepath`, `str_to_i`,
  `str_to_f`, `str_to_num`, `str_parse`, `str_get`, `str_split`, `str_sub`,
  `str_replace`, `str_trim`, `str_left`, `str_right`, `str_extract`,
  `str_to_id`, `str_is_num`, `str_to_vec`, `str_to_vec3`, `str_to_vec4`,
  and the file helpers `get_file_size` and `get_file_location`. Functions
  that cut text out of a string return the new string rather than
  changing an argument, for example `str_parse` returns `(inner, rest)`.
- `voxelmesh.tokens`: `get_extension`, `strip_leading_whitespace`,
  `strip_leading_special_whitespace`, `strip_leading_token` and
  `strip_leading_numerical_token`.
- `voxelmesh.parser`
  - `Parser`: opens a file found by `get_file_location`, reads it line by
    line with `read_next_line` (blank and `#` comment lines are skipped by
    default) and hands out tokens and numbers from the current line:
    `get_token`, `get_lower_case_token`, `get_upper_case_token`,
    `get_integer`, `get_unsigned`, `get_float`, `get_double`, `get_vec3`,
    `get_vec4`, `get_4x4_matrix`. It is a context manager.
  - `CallbackParser`: calls a function for each line whose first keyword
    matches one registered with `set_callback` (case-insensitive, at most
    32 callbacks). Each callback receives the parser.
  - `ParseError`: raised when a file cannot be found or opened, and by
    `error_message`. `warning_message` logs through the `logging` module.

## Installation

```
pip install .
```

## Examples

```python
from voxelmesh.matrix import Matrix4F
from voxelmesh.vectors import Vector3DF

m = Matrix4F()
m.scale_in_place(Vector3DF(2.0, 2.0, 2.0))
m.translate_in_place(Vector3DF(1.0, 2.0, 3.0))
print(m * Vector3DF(1.0, 1.0, 1.0))   # Vector3DF(3.0, 4.0, 5.0)

inverse = m.copy().invert_trs()
print((inverse @ m).write_to_str())   # the identity
```

```python
from voxelmesh.parser import Parser

with Parser() as parser:
    parser.parse_file("scene.txt", ["data/"])
    while parser.read_next_line() is not None:
        if parser.get_lower_case_token() == "pos":
            print(parser.get_vec3())
```

`get_file_location`, and so `parse_file`, looks for the file as given
first, then in each search path in turn. The search path is put in front
of the file name as it is, so give directories with a trailing separator.

## What it does not do

The package reads no mesh file formats: there is no reader for Wavefront
OBJ or binary mesh files, and no vertex or index buffers are built. It has
no ready-made constructors for rotation, projection, basis or
scale-rotate-translate matrices; build those from `Matrix4F` and its
in-place operations. There is no command-line program.

## Tests

```
pip install .[test]
pytest
```
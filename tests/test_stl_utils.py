import numpy as np
import pytest

from step_to_mesh.stl_utils import STL_RECORD_DTYPE, is_ascii_stl, read_stl_triangles, stl_triangle_count

ASCII_STL = """solid part
  facet normal 0 0 1
    outer loop
      vertex 0 0 0
      vertex 1 0 0
      vertex 0 1 0
    endloop
  endfacet
  facet normal 0 0 1
    outer loop
      vertex 1 0 0
      vertex 1 1 0
      vertex 0 1 0
    endloop
  endfacet
endsolid part
"""


def write_binary(path, triangles, header=b"binary"):
    records = np.zeros(len(triangles), dtype=STL_RECORD_DTYPE)
    records["vertices"] = triangles
    path.write_bytes(header.ljust(80, b" ") + np.uint32(len(triangles)).tobytes() + records.tobytes())


def test_ascii(tmp_path):
    path = tmp_path / "part.stl"
    path.write_text(ASCII_STL)

    assert is_ascii_stl(path)
    triangles = read_stl_triangles(path)
    assert triangles.shape == (2, 3, 3)
    assert triangles[1, 1].tolist() == [1.0, 1.0, 0.0]


def test_binary(tmp_path):
    path = tmp_path / "part.stl"
    triangles = np.arange(18, dtype=np.float32).reshape(2, 3, 3)
    write_binary(path, triangles)

    assert not is_ascii_stl(path)
    np.testing.assert_array_equal(read_stl_triangles(path), triangles)


def test_binary_header_starting_with_solid(tmp_path):
    path = tmp_path / "part.stl"
    write_binary(path, np.ones((3, 3, 3), dtype=np.float32), header=b"solid exported")

    assert not is_ascii_stl(path)
    assert stl_triangle_count(path) == 3


def test_empty_binary(tmp_path):
    path = tmp_path / "empty.stl"
    write_binary(path, np.zeros((0, 3, 3), dtype=np.float32))

    assert stl_triangle_count(path) == 0


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        stl_triangle_count(tmp_path / "missing.stl")

"""Inspection of written STL files."""

from pathlib import Path
from typing import Union

import numpy as np
from numpy.typing import NDArray

# Binary STL: 80 byte header, uint32 count, then one record per triangle
STL_HEADER_SIZE = 80
STL_RECORD_DTYPE = np.dtype([
    ("normal", "<f4", (3,)),
    ("vertices", "<f4", (3, 3)),
    ("attributes", "<u2"),
])


def is_ascii_stl(stl_path: Union[str, Path]) -> bool:
    """Tell ASCII from binary STL.

    Binary headers may start with ``solid`` too, so the size implied by the
    triangle count decides.
    """
    data = Path(stl_path).read_bytes()
    if not data.lstrip().startswith(b"solid"):
        return False
    if len(data) < STL_HEADER_SIZE + 4:
        return True
    count = int(np.frombuffer(data, dtype="<u4", count=1, offset=STL_HEADER_SIZE)[0])
    return len(data) != STL_HEADER_SIZE + 4 + count * STL_RECORD_DTYPE.itemsize


def read_stl_triangles(stl_path: Union[str, Path]) -> NDArray[np.float32]:
    """Return the triangle vertices of an STL file as an (n, 3, 3) array."""
    data = Path(stl_path).read_bytes()
    if is_ascii_stl(stl_path):
        vertices = [
            [float(value) for value in line.split()[1:4]]
            for line in data.decode("ascii", errors="ignore").splitlines()
            if line.strip().startswith("vertex")
        ]
        return np.asarray(vertices, dtype=np.float32).reshape(-1, 3, 3)

    count = int(np.frombuffer(data, dtype="<u4", count=1, offset=STL_HEADER_SIZE)[0])
    if count == 0:
        return np.zeros((0, 3, 3), dtype=np.float32)
    records = np.frombuffer(data, dtype=STL_RECORD_DTYPE, count=count, offset=STL_HEADER_SIZE + 4)
    return records["vertices"].copy()


def stl_triangle_count(stl_path: Union[str, Path]) -> int:
    return len(read_stl_triangles(stl_path))

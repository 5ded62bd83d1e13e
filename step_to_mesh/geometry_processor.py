"""Compound assembly, mesh generation and STL export."""

from __future__ import annotations
import logging
import math
from pathlib import Path
from typing import Iterable, Optional, Union

from OCP.TopExp import TopExp_Explorer
from OCP.TopAbs import TopAbs_FACE
from OCP.BRepMesh import BRepMesh_IncrementalMesh
from OCP.BRep import BRep_Tool, BRep_Builder
from OCP.TopLoc import TopLoc_Location
from OCP.BRepBuilderAPI import BRepBuilderAPI_Transform
from OCP.TopoDS import TopoDS, TopoDS_Shape, TopoDS_Compound
from OCP.Poly import Poly_Triangulation
from OCP.StlAPI import StlAPI_Writer
from OCP.gp import gp_Trsf

from . import config
from .errors import WriteError

logger = logging.getLogger(__name__)


def make_compound(solids: Iterable[TopoDS_Shape]) -> TopoDS_Compound:
    """Put all solids into one compound, in order and without deduplication."""
    compound: TopoDS_Compound = TopoDS_Compound()
    builder: BRep_Builder = BRep_Builder()
    builder.MakeCompound(compound)
    for solid in solids:
        builder.Add(compound, solid)
    return compound


def angular_deflection_radians(degrees: float) -> float:
    return math.radians(degrees)


def triangulate_shape(shape: TopoDS_Shape, linear_deflection: float, angular_deflection: float) -> None:
    """Attach a triangulation to ``shape``. ``angular_deflection`` is in degrees."""
    angle: float = angular_deflection_radians(angular_deflection)
    logger.info("Meshing with linear deflection %g and angular deflection %g rad", linear_deflection, angle)
    mesh: BRepMesh_IncrementalMesh = BRepMesh_IncrementalMesh(
        shape, linear_deflection, config.RELATIVE_DEFLECTION, angle, config.PARALLEL_MESHING
    )
    mesh.Perform()


def count_triangles(shape: TopoDS_Shape) -> int:
    """Count the triangles attached to the faces of a triangulated shape."""
    total = 0
    explorer: TopExp_Explorer = TopExp_Explorer(shape, TopAbs_FACE)
    while explorer.More():
        loc: TopLoc_Location = TopLoc_Location()
        tri: Optional[Poly_Triangulation] = BRep_Tool.Triangulation_s(TopoDS.Face(explorer.Current()), loc)
        if tri is not None:
            total += tri.NbTriangles()
        explorer.Next()
    return total


def write_stl(shape: TopoDS_Shape, stl_path: Union[str, Path], ascii_mode: bool = False) -> None:
    writer: StlAPI_Writer = StlAPI_Writer()
    writer.ASCIIMode = ascii_mode
    logger.info("Writing %s STL: %s", "ASCII" if ascii_mode else "binary", stl_path)
    if not writer.Write(shape, str(stl_path)):
        raise WriteError(f"Could not write '{stl_path}'")


def write(
    stl_path: Union[str, Path],
    solids: Iterable[TopoDS_Shape],
    linear_deflection: float,
    angular_deflection: float,
    ascii_mode: bool = False,
) -> TopoDS_Compound:
    """Mesh the solids as one compound and write it to ``stl_path``.

    Returns the triangulated compound.
    """
    compound = make_compound(solids)
    triangulate_shape(compound, linear_deflection, angular_deflection)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Mesh has %d triangles", count_triangles(compound))
    write_stl(compound, stl_path, ascii_mode)
    return compound


def apply_location_to_shape(shape: TopoDS_Shape, location: TopLoc_Location, copy: bool = True) -> TopoDS_Shape:
    """Apply a TopLoc_Location to a shape.

    With ``copy`` the result never shares geometry with ``shape``, even for an
    identity location, so meshing it leaves the source untouched.
    """
    if location.IsIdentity() and not copy:
        return shape

    trsf: gp_Trsf = location.Transformation()
    transform_op: BRepBuilderAPI_Transform = BRepBuilderAPI_Transform(shape, trsf, copy)
    return transform_op.Shape()

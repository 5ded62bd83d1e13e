"""STEP file reading and shape tree lookup."""
from __future__ import annotations
import logging
from pathlib import Path
from typing import Any, List, Union

from OCP.STEPCAFControl import STEPCAFControl_Reader
from OCP.XCAFDoc import XCAFDoc_DocumentTool, XCAFDoc_ShapeTool
from OCP.TDocStd import TDocStd_Document
from OCP.TDataStd import TDataStd_Name
from OCP.TDF import TDF_Label
from OCP.collections import Sequence_TDF_Label as TDF_LabelSequence
from OCP.TCollection import TCollection_ExtendedString
from OCP.TopLoc import TopLoc_Location
from OCP.TopoDS import TopoDS_Shape
from OCP.TopAbs import TopAbs_SOLID
from OCP.IFSelect import IFSelect_RetDone

from .errors import ReadError
from .geometry_processor import apply_location_to_shape
from .shape_tree import NamedSolid, flatten

logger = logging.getLogger(__name__)


def _labels(sequence: TDF_LabelSequence) -> List[TDF_Label]:
    return [sequence.Value(i) for i in range(1, sequence.Length() + 1)]


class STEPFile:
    """An XCAF document read from a STEP file.

    Exposes the label lookups the shape tree walker needs. Instances are
    resolved with ``referred``; every other lookup takes the label it is given
    at face value.
    """
    step_file_path: Path
    doc: TDocStd_Document
    shape_tool: Any  # XCAFDoc_ShapeTool

    def __init__(self, step_file_path: Union[str, Path]):
        self.step_file_path = Path(step_file_path)
        self.doc, self.shape_tool = STEPFile.read_step_document(self.step_file_path)

    @staticmethod
    def read_step_document(step_file_path: Union[str, Path]):
        """Read a STEP file into a new XCAF document."""
        logger.info("Initializing XCAF document...")
        doc: TDocStd_Document = TDocStd_Document(TCollection_ExtendedString("XmlXCAF"))

        logger.info("Reading STEP file: %s", step_file_path)
        reader: STEPCAFControl_Reader = STEPCAFControl_Reader()
        reader.SetNameMode(True)

        status = reader.ReadFile(str(step_file_path))
        if status != IFSelect_RetDone:
            raise ReadError(f"Could not read '{step_file_path}'")

        logger.info("Transferring data to XCAF document...")
        if not reader.Transfer(doc):
            raise ReadError(f"Could not read '{step_file_path}'")

        shape_tool: Any = XCAFDoc_DocumentTool.ShapeTool_s(doc.Main())
        return doc, shape_tool

    def free_labels(self) -> List[TDF_Label]:
        labels: TDF_LabelSequence = TDF_LabelSequence()
        self.shape_tool.GetFreeShapes(labels)
        logger.info("Found %d free shapes", labels.Length())
        return _labels(labels)

    def referred(self, label: TDF_Label) -> TDF_Label:
        if not XCAFDoc_ShapeTool.IsReference_s(label):
            return label
        referred_label: TDF_Label = TDF_Label()
        XCAFDoc_ShapeTool.GetReferredShape_s(label, referred_label)
        return referred_label

    def name(self, label: TDF_Label) -> str:
        name_attr: TDataStd_Name = TDataStd_Name()
        if label.FindAttribute(TDataStd_Name.GetID_s(), name_attr):
            return name_attr.Get().ToExtString()
        return ""

    def location(self, label: TDF_Label) -> TopLoc_Location:
        return XCAFDoc_ShapeTool.GetLocation_s(label)

    def components(self, label: TDF_Label) -> List[TDF_Label]:
        components: TDF_LabelSequence = TDF_LabelSequence()
        if not XCAFDoc_ShapeTool.GetComponents_s(label, components):
            return []
        return _labels(components)

    def shape(self, label: TDF_Label) -> TopoDS_Shape:
        return XCAFDoc_ShapeTool.GetShape_s(label)

    def identity(self) -> TopLoc_Location:
        return TopLoc_Location()

    def compose(self, parent: TopLoc_Location, local: TopLoc_Location) -> TopLoc_Location:
        return parent.Multiplied(local)

    def is_solid(self, shape: TopoDS_Shape) -> bool:
        return not shape.IsNull() and shape.ShapeType() == TopAbs_SOLID

    def apply(self, shape: TopoDS_Shape, location: TopLoc_Location) -> TopoDS_Shape:
        return apply_location_to_shape(shape, location)

    def named_solids(self) -> List[NamedSolid]:
        return flatten(self)


def read_step_file(step_file_path: Union[str, Path]) -> List[NamedSolid]:
    """Read a STEP file and return its solids with their hierarchical names."""
    return STEPFile(step_file_path).named_solids()

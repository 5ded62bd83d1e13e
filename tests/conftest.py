import pytest


class FakeTree:
    """Shape tree over plain dictionaries.

    Locations are tuples of transform names, composed by concatenation, so
    the accumulated placement of a solid reads as its path of transforms.
    """

    def __init__(self, nodes, free):
        self.nodes = nodes
        self.free = free
        self.resolved = []

    def free_labels(self):
        return list(self.free)

    def referred(self, label):
        referred = self.nodes[label].get("ref", label)
        self.resolved.append((label, referred))
        return referred

    def name(self, label):
        return self.nodes[label].get("name", "")

    def location(self, label):
        return self.nodes[label].get("location", ())

    def components(self, label):
        return self.nodes[label].get("components", [])

    def shape(self, label):
        return self.nodes[label].get("shape")

    def identity(self):
        return ()

    def compose(self, parent, local):
        return parent + local

    def is_solid(self, shape):
        return shape is not None and shape.startswith("solid")

    def apply(self, shape, location):
        return (shape, location)


@pytest.fixture
def fake_tree():
    return FakeTree


@pytest.fixture
def assembly_tree():
    """Named assembly holding two instances of one part and an unnamed sub-assembly."""
    nodes = {
        "asm": {"name": "Car", "components": ["wheel-1", "wheel-2", "sub-ref"]},
        "wheel-1": {"ref": "wheel", "location": ("front",), "name": "ignored instance name"},
        "wheel-2": {"ref": "wheel", "location": ("rear",)},
        "wheel": {"name": "Wheel", "shape": "solid-wheel", "location": ("definition",)},
        "sub-ref": {"ref": "sub", "location": ("engine-bay",)},
        "sub": {"components": ["block-ref", "sheet-ref"]},
        "block-ref": {"ref": "block"},
        "block": {"shape": "solid-block"},
        "sheet-ref": {"ref": "sheet"},
        "sheet": {"name": "Sheet", "shape": "shell-sheet"},
    }
    return FakeTree(nodes, ["asm"])


BOX_SIZE = 10.0
INSTANCE_OFFSET = 100.0


def make_box(size=BOX_SIZE):
    from OCP.BRepPrimAPI import BRepPrimAPI_MakeBox

    return BRepPrimAPI_MakeBox(size, size, size).Shape()


@pytest.fixture
def box_step(tmp_path):
    """STEP file holding a single box solid."""
    from OCP.STEPControl import STEPControl_Writer, STEPControl_AsIs

    path = tmp_path / "box.step"
    writer = STEPControl_Writer()
    writer.Transfer(make_box(), STEPControl_AsIs)
    writer.Write(str(path))
    return path


@pytest.fixture
def assembly_step(tmp_path):
    """STEP assembly with two instances of one box, the second moved along x."""
    from OCP.gp import gp_Trsf, gp_Vec
    from OCP.STEPCAFControl import STEPCAFControl_Writer
    from OCP.STEPControl import STEPControl_AsIs
    from OCP.TCollection import TCollection_ExtendedString
    from OCP.TDocStd import TDocStd_Document
    from OCP.TopLoc import TopLoc_Location
    from OCP.XCAFDoc import XCAFDoc_DocumentTool

    doc = TDocStd_Document(TCollection_ExtendedString("XmlXCAF"))
    shape_tool = XCAFDoc_DocumentTool.ShapeTool_s(doc.Main())

    box_label = shape_tool.AddShape(make_box(), False)
    assembly_label = shape_tool.NewShape()
    shape_tool.AddComponent(assembly_label, box_label, TopLoc_Location())
    trsf = gp_Trsf()
    trsf.SetTranslation(gp_Vec(INSTANCE_OFFSET, 0.0, 0.0))
    shape_tool.AddComponent(assembly_label, box_label, TopLoc_Location(trsf))
    shape_tool.UpdateAssemblies()

    path = tmp_path / "assembly.step"
    writer = STEPCAFControl_Writer()
    writer.Transfer(doc, STEPControl_AsIs)
    writer.Write(str(path))
    return path

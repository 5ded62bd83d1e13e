"""Configuration settings for STEP to mesh conversion."""

# Hierarchical names and selection lists
PATH_SEPARATOR = "/"
SELECT_SEPARATOR = ","

# First id handed out to components without a name attribute
FIRST_FALLBACK_ID = 1

# Output formats
FORMAT_STL_BIN = "stl_bin"
FORMAT_STL_ASCII = "stl_ascii"
SUPPORTED_FORMATS = (FORMAT_STL_BIN, FORMAT_STL_ASCII)
DEFAULT_FORMAT = FORMAT_STL_BIN

# Output length unit, stored in the kernel's static parameter table
UNIT_PARAMETER = "xstep.cascade.unit"
DEFAULT_UNIT = "MM"
FIRST_UNIT_INDEX = 1  # start of the kernel's unit enumeration; its end is found by probing
UNDEFINED_UNIT = "??"  # placeholder entry in the enumeration, not a usable unit

# BRepMesh_IncrementalMesh flags
RELATIVE_DEFLECTION = False  # deflection is absolute, in output units
PARALLEL_MESHING = True

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

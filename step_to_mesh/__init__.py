"""
STEP to Mesh Converter Package

Converts the solids of STEP files into triangle meshes written as STL,
keeping the assembly hierarchy in the solid names.

Modules:
- config: Configuration settings and constants
- errors: Error types reported by the command line
- units: Process-wide output unit setting
- step_reader: STEP file reading and shape tree lookup
- shape_tree: Flattening of the assembly tree into named solids
- selection: Selection of solids by index or name
- geometry_processor: Compound assembly, meshing and STL export
- stl_utils: Inspection of written STL files
- step_to_stl: Main entry points for listing and conversion
- cli: Command line interface
"""

from .config import *

__version__ = "1.0.0"
__author__ = "STEP to Mesh Converter"

__all__ = [
    'PATH_SEPARATOR',
    'DEFAULT_FORMAT',
    'DEFAULT_UNIT',
    'SUPPORTED_FORMATS',
]

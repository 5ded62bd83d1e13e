"""
STEP to STL conversion

Entry points behind the command line: listing the solids of a STEP file and
converting a selection of them into one STL file.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Union

from . import config
from .errors import UsageError
from .geometry_processor import write
from .stl_utils import stl_triangle_count
from .selection import select
from .step_reader import read_step_file

logger = logging.getLogger(__name__)


@dataclass
class ConversionResult:
    output_path: Path
    solid_count: int
    triangle_count: int


def list_contents(step_path: Union[str, Path]) -> List[str]:
    """Full names of all solids in the file, in traversal order."""
    return [named_solid.name for named_solid in read_step_file(step_path)]


def check_format(file_format: str) -> bool:
    """Validate the output format. Returns True for ASCII STL."""
    if file_format not in config.SUPPORTED_FORMATS:
        raise UsageError(f"Format '{file_format}' not supported")
    return file_format == config.FORMAT_STL_ASCII


def convert_step_to_stl(
    step_path: Union[str, Path],
    stl_path: Union[str, Path],
    linear_deflection: float,
    angular_deflection: float,
    selection: Optional[Sequence[str]] = None,
    file_format: str = config.DEFAULT_FORMAT,
) -> ConversionResult:
    """Mesh the selected solids of a STEP file into one STL file.

    ``angular_deflection`` is in degrees. An empty selection exports every
    solid.
    """
    ascii_mode = check_format(file_format)

    named_solids = read_step_file(step_path)
    solids = select(named_solids, selection or [])
    logger.info("Exporting %d of %d solids", len(solids), len(named_solids))

    write(stl_path, solids, linear_deflection, angular_deflection, ascii_mode)

    result = ConversionResult(
        output_path=Path(stl_path),
        solid_count=len(solids),
        triangle_count=stl_triangle_count(stl_path),
    )
    logger.info("STL file saved: %s (%d triangles)", result.output_path, result.triangle_count)
    return result

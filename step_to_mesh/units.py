"""Output unit handling.

The kernel keeps the output length unit in a process-wide static parameter
that every later STEP transfer reads. ``set_unit`` must therefore be called
once, before the first file is read.
"""

import logging
from typing import List

from OCP.Interface import Interface_Static
from OCP.STEPCAFControl import STEPCAFControl_Reader

from . import config
from .errors import UnitError

logger = logging.getLogger(__name__)

_initialized = False


def initialize_kernel() -> None:
    """Register the data exchange parameters, the unit parameter among them."""
    global _initialized
    if _initialized:
        return
    # Creating a reader runs the STEP controller initialization once per process
    STEPCAFControl_Reader()
    _initialized = True


def available_units() -> List[str]:
    """Unit names the kernel accepts, in its enumeration order.

    The bindings do not expose the enumeration itself, so each index is set
    in turn and read back as text. The current unit is restored afterwards.
    """
    initialize_kernel()
    current = Interface_Static.CVal_s(config.UNIT_PARAMETER)
    units: List[str] = []
    index = config.FIRST_UNIT_INDEX
    try:
        while Interface_Static.SetIVal_s(config.UNIT_PARAMETER, index):
            value = Interface_Static.CVal_s(config.UNIT_PARAMETER)
            if not value:
                break
            if value != config.UNDEFINED_UNIT:
                units.append(value)
            index += 1
    finally:
        Interface_Static.SetCVal_s(config.UNIT_PARAMETER, current)
    return units


def set_unit(unit: str) -> str:
    """Set the output unit, case-insensitively. Returns the applied value."""
    initialize_kernel()
    unit = unit.upper()
    if not Interface_Static.SetCVal_s(config.UNIT_PARAMETER, unit):
        raise UnitError(f"Could not set unit '{unit}'")
    logger.info("Output unit: %s", unit)
    return unit

"""
Coefficient Resolver - Merges a wall -> material assignment against the material library
"""

import logging
from typing import Dict, Optional

import numpy as np

from ..data.materials import DEFAULT_LIBRARY, MaterialLibrary
from ..models.room import (
    WallType, WALLS_ALIAS, SIDE_WALLS, CoefficientSet, WallMaterialAssignment
)
from .acoustic_constants import AcousticsConfig, DEFAULT_CONFIG
from .diagnostics import (
    DiagnosticKind, DiagnosticsSink, MaterialDiagnostic, default_sink
)
from .sanitizers import check_library_bands, default_coefficients_for

logger = logging.getLogger(__name__)

# Marks an assignment without the "walls" key
_NO_ALIAS = object()


class CoefficientResolver:
    """Resolves per-wall material names into a complete per-wall coefficient set"""

    def __init__(self, library: Optional[MaterialLibrary] = None,
                 config: Optional[AcousticsConfig] = None,
                 sink: Optional[DiagnosticsSink] = None):
        self.library = library or DEFAULT_LIBRARY
        self.config = config or DEFAULT_CONFIG
        self.sink = sink or default_sink

        check_library_bands(self.library, self.config)
        for wall, material in self.config.default_materials.items():
            if material not in self.library:
                raise ValueError(
                    f"Default material '{material}' for wall '{wall.value}' is not in the library"
                )

    def expand_assignment(self, assignment: WallMaterialAssignment) -> Dict[WallType, str]:
        """
        Build a wall-keyed copy of an assignment with the 'walls' alias applied

        The alias overrides left/right/front/back; ceiling and floor keep
        their individual values. The caller's mapping is left untouched.
        """
        expanded = {}
        alias_material = _NO_ALIAS
        for key, material in assignment.items():
            if isinstance(key, str) and key.strip().lower() == WALLS_ALIAS:
                alias_material = material
                continue
            wall = WallType.coerce(key)
            if wall is None:
                logger.debug("Ignoring unknown wall key %r in material assignment", key)
                continue
            expanded[wall] = material

        if alias_material is not _NO_ALIAS:
            for wall in SIDE_WALLS:
                expanded[wall] = alias_material
        return expanded

    def resolve(self, assignment: Optional[WallMaterialAssignment] = None) -> CoefficientSet:
        """
        Resolve a wall -> material assignment into absorption vectors

        Args:
            assignment: Mapping of WallType (or its string value, or 'walls')
                to material name. None means the default assignment.

        Returns:
            dict: WallType -> absorption vector, always with all six walls
        """
        coefficients = {
            wall: default_coefficients_for(wall, self.library, self.config)
            for wall in WallType
        }

        if assignment is None:
            materials = dict(self.config.default_materials)
        else:
            materials = self.expand_assignment(assignment)

        for wall in WallType:
            default_material = self.config.default_materials[wall]
            if wall not in materials:
                self._emit(DiagnosticKind.UNDEFINED_WALL, wall, None, default_material)
                continue

            requested = materials[wall]
            vector = self.library.lookup(requested)
            if vector is None:
                self._emit(DiagnosticKind.UNKNOWN_MATERIAL, wall, requested, default_material)
                continue
            coefficients[wall] = np.array(vector, dtype=np.float64)

        return coefficients

    def _emit(self, kind: DiagnosticKind, wall: WallType,
              requested: Optional[str], resolved: str) -> None:
        self.sink.emit(MaterialDiagnostic(
            kind=kind,
            wall=wall,
            requested_material=requested,
            resolved_material=resolved
        ))


def resolve_coefficients(assignment: Optional[WallMaterialAssignment] = None,
                         library: Optional[MaterialLibrary] = None,
                         config: Optional[AcousticsConfig] = None,
                         sink: Optional[DiagnosticsSink] = None) -> CoefficientSet:
    """Resolve a wall -> material assignment with a one-off CoefficientResolver"""
    return CoefficientResolver(library=library, config=config, sink=sink).resolve(assignment)

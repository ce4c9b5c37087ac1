"""
Standard wall materials library with frequency-dependent absorption coefficients
Nine reverb bands from 31.25 Hz to 8 kHz, one absorption coefficient per band
"""

from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Sequence

import numpy as np

# Pre-defined frequency-dependent absorption coefficients
# (name, category, description, coefficients per band)
STANDARD_MATERIAL_DATA = [
    ('Transparent', 'special', 'Fully absorptive, represents an absent wall',
     (1.000, 1.000, 1.000, 1.000, 1.000, 1.000, 1.000, 1.000, 1.000)),
    ('AcousticCeilingTiles', 'ceiling', 'Suspended acoustic ceiling tiles',
     (0.672, 0.675, 0.700, 0.660, 0.720, 0.920, 0.880, 0.750, 1.000)),
    ('BrickBare', 'masonry', 'Unglazed bare brick',
     (0.030, 0.030, 0.030, 0.030, 0.030, 0.040, 0.050, 0.070, 0.140)),
    ('BrickPainted', 'masonry', 'Unglazed painted brick',
     (0.006, 0.007, 0.010, 0.010, 0.020, 0.020, 0.020, 0.030, 0.060)),
    ('ConcreteBlockCoarse', 'masonry', 'Coarse unpainted concrete block',
     (0.360, 0.360, 0.360, 0.440, 0.310, 0.290, 0.390, 0.250, 0.500)),
    ('ConcreteBlockPainted', 'masonry', 'Painted concrete block',
     (0.092, 0.090, 0.100, 0.050, 0.060, 0.070, 0.090, 0.080, 0.160)),
    ('CurtainHeavy', 'soft', 'Heavy velour curtain, draped',
     (0.073, 0.106, 0.140, 0.350, 0.550, 0.720, 0.700, 0.650, 1.000)),
    ('FiberGlassInsulation', 'soft', 'Fiberglass insulation board',
     (0.193, 0.220, 0.220, 0.820, 0.990, 0.990, 0.990, 0.990, 1.000)),
    ('GlassThin', 'glazing', 'Ordinary window glass',
     (0.180, 0.169, 0.180, 0.060, 0.040, 0.030, 0.020, 0.020, 0.040)),
    ('GlassThick', 'glazing', 'Large panes of heavy plate glass',
     (0.350, 0.350, 0.350, 0.250, 0.180, 0.120, 0.070, 0.040, 0.080)),
    ('Grass', 'outdoor', 'Grass lawn',
     (0.050, 0.050, 0.150, 0.250, 0.400, 0.550, 0.600, 0.600, 0.600)),
    ('LinoleumOnConcrete', 'floor', 'Linoleum, asphalt, rubber or cork tile on concrete',
     (0.020, 0.020, 0.020, 0.030, 0.030, 0.030, 0.030, 0.020, 0.040)),
    ('Marble', 'floor', 'Marble or glazed tile',
     (0.010, 0.010, 0.010, 0.010, 0.010, 0.010, 0.020, 0.020, 0.040)),
    ('Metal', 'metal', 'Sheet metal surface',
     (0.030, 0.035, 0.040, 0.040, 0.050, 0.050, 0.050, 0.070, 0.090)),
    ('ParquetOnConcrete', 'floor', 'Wood parquet in asphalt on concrete',
     (0.028, 0.030, 0.040, 0.040, 0.070, 0.060, 0.060, 0.070, 0.140)),
    ('PlasterRough', 'masonry', 'Rough plaster on brick',
     (0.017, 0.018, 0.020, 0.030, 0.040, 0.050, 0.040, 0.030, 0.060)),
    ('PlasterSmooth', 'masonry', 'Smooth plaster finish',
     (0.011, 0.012, 0.013, 0.015, 0.020, 0.030, 0.040, 0.050, 0.100)),
    ('PlywoodPanel', 'wood', 'Plywood paneling',
     (0.400, 0.340, 0.280, 0.220, 0.170, 0.090, 0.100, 0.110, 0.220)),
    ('PolishedConcreteOrTile', 'floor', 'Polished concrete or terrazzo tile',
     (0.008, 0.008, 0.010, 0.010, 0.015, 0.020, 0.020, 0.020, 0.040)),
    ('Sheetrock', 'masonry', 'Gypsum board on studs',
     (0.290, 0.279, 0.290, 0.100, 0.050, 0.040, 0.070, 0.090, 0.180)),
    ('WaterOrIceSurface', 'outdoor', 'Open water or ice surface',
     (0.006, 0.006, 0.008, 0.008, 0.013, 0.015, 0.020, 0.025, 0.050)),
    ('WoodCeiling', 'wood', 'Wood board ceiling',
     (0.150, 0.147, 0.150, 0.110, 0.100, 0.070, 0.060, 0.070, 0.140)),
    ('WoodPanel', 'wood', 'Wood paneling over air space',
     (0.280, 0.280, 0.280, 0.220, 0.170, 0.090, 0.100, 0.110, 0.220)),
    ('Uniform', 'special', 'Flat 50% absorption in every band',
     (0.500, 0.500, 0.500, 0.500, 0.500, 0.500, 0.500, 0.500, 0.500)),
]

# Band indices of 250, 500, 1000 and 2000 Hz in the nine-band layout
NRC_BAND_INDICES = (3, 4, 5, 6)


def calculate_nrc(absorption_coeffs: Sequence[float]) -> float:
    """Calculate NRC (Noise Reduction Coefficient) from band coefficients"""
    # NRC is the average of 250, 500, 1000, 2000 Hz coefficients, rounded to nearest 0.05
    if len(absorption_coeffs) <= max(NRC_BAND_INDICES):
        return 0.0
    nrc = sum(float(absorption_coeffs[i]) for i in NRC_BAND_INDICES) / len(NRC_BAND_INDICES)
    return round(nrc * 20) / 20


def _frozen_vector(values: Sequence[float]) -> np.ndarray:
    vector = np.array(values, dtype=np.float64)
    vector.setflags(write=False)
    return vector


class MaterialLibrary:
    """
    Immutable table of named absorption vectors

    Built once and only read afterwards; lookups return read-only arrays,
    so a library can be shared between threads without locking.
    """

    def __init__(self, material_data=None):
        if material_data is None:
            material_data = STANDARD_MATERIAL_DATA

        coefficients = {}
        info = {}
        num_bands = None
        for name, category, description, values in material_data:
            vector = _frozen_vector(values)
            if vector.ndim != 1 or vector.size == 0:
                raise ValueError(f"Material '{name}' must have a one-dimensional coefficient vector")
            if num_bands is None:
                num_bands = vector.size
            elif vector.size != num_bands:
                raise ValueError(
                    f"Material '{name}' has {vector.size} bands, expected {num_bands}"
                )
            if name in coefficients:
                raise ValueError(f"Duplicate material '{name}'")
            coefficients[name] = vector
            info[name] = MappingProxyType({
                'name': name,
                'category': category,
                'description': description,
                'nrc': calculate_nrc(vector),
            })

        self._coefficients: Mapping[str, np.ndarray] = MappingProxyType(coefficients)
        self._info: Mapping[str, Mapping] = MappingProxyType(info)
        self.num_bands: int = num_bands or 0

    def lookup(self, name: str) -> Optional[np.ndarray]:
        """Return the absorption vector for a material, or None if unknown"""
        if not isinstance(name, str):
            return None
        return self._coefficients.get(name)

    def __contains__(self, name) -> bool:
        return isinstance(name, str) and name in self._coefficients

    def __len__(self) -> int:
        return len(self._coefficients)

    def __iter__(self) -> Iterator[str]:
        return iter(self._coefficients)

    def names(self) -> List[str]:
        """Material names in table order"""
        return list(self._coefficients)

    def get_material_info(self, name: str) -> Optional[Dict]:
        """Get complete material information including NRC"""
        if name not in self:
            return None
        material = dict(self._info[name])
        material['coefficients'] = self._coefficients[name].tolist()
        return material

    def get_materials_by_category(self, category: str) -> List[str]:
        """Get names of all materials in a category"""
        return [name for name, info in self._info.items() if info['category'] == category]


# Process-wide library, built once at import
DEFAULT_LIBRARY = MaterialLibrary()

# Name -> coefficients view of the default library
MATERIAL_COEFFICIENTS: Mapping[str, np.ndarray] = MappingProxyType(
    {name: DEFAULT_LIBRARY.lookup(name) for name in DEFAULT_LIBRARY}
)

__all__ = [
    'STANDARD_MATERIAL_DATA',
    'MATERIAL_COEFFICIENTS',
    'DEFAULT_LIBRARY',
    'MaterialLibrary',
    'calculate_nrc'
]

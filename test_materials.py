#!/usr/bin/env python3
"""
Test script for the wall materials library and the acoustics configuration
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

import numpy as np
import pytest

from room_acoustics import (
    DEFAULT_LIBRARY, MaterialLibrary, AcousticsConfig, DEFAULT_CONFIG, WallType
)
from room_acoustics.data.materials import (
    MATERIAL_COEFFICIENTS, STANDARD_MATERIAL_DATA, calculate_nrc
)

EXPECTED_MATERIALS = [
    'Transparent', 'AcousticCeilingTiles', 'BrickBare', 'BrickPainted',
    'ConcreteBlockCoarse', 'ConcreteBlockPainted', 'CurtainHeavy',
    'FiberGlassInsulation', 'GlassThin', 'GlassThick', 'Grass',
    'LinoleumOnConcrete', 'Marble', 'Metal', 'ParquetOnConcrete',
    'PlasterRough', 'PlasterSmooth', 'PlywoodPanel', 'PolishedConcreteOrTile',
    'Sheetrock', 'WaterOrIceSurface', 'WoodCeiling', 'WoodPanel', 'Uniform'
]


def test_library_contents():
    """Every preset is present, with nine bands of nominal absorption"""
    assert DEFAULT_LIBRARY.names() == EXPECTED_MATERIALS
    assert len(DEFAULT_LIBRARY) == len(EXPECTED_MATERIALS)
    assert DEFAULT_LIBRARY.num_bands == 9

    for name in DEFAULT_LIBRARY:
        vector = DEFAULT_LIBRARY.lookup(name)
        assert vector.shape == (9,)
        assert np.all(vector >= 0.0) and np.all(vector <= 1.0), name


def test_reference_materials():
    """Transparent absorbs everything, Uniform absorbs half"""
    assert np.all(DEFAULT_LIBRARY.lookup('Transparent') == 1.0)
    assert np.all(DEFAULT_LIBRARY.lookup('Uniform') == 0.5)
    assert DEFAULT_LIBRARY.lookup('BrickBare').tolist() == [
        0.03, 0.03, 0.03, 0.03, 0.03, 0.04, 0.05, 0.07, 0.14
    ]


def test_lookup_unknown_material():
    assert DEFAULT_LIBRARY.lookup('Unobtainium') is None
    assert DEFAULT_LIBRARY.lookup('brickbare') is None
    assert DEFAULT_LIBRARY.lookup(None) is None
    assert 'Unobtainium' not in DEFAULT_LIBRARY
    assert 'Marble' in DEFAULT_LIBRARY


def test_library_vectors_are_read_only():
    vector = DEFAULT_LIBRARY.lookup('Marble')
    with pytest.raises(ValueError):
        vector[0] = 0.5
    with pytest.raises(TypeError):
        MATERIAL_COEFFICIENTS['Marble'] = vector


def test_material_info_is_a_copy():
    info = DEFAULT_LIBRARY.get_material_info('FiberGlassInsulation')
    assert info['category'] == 'soft'
    assert info['nrc'] == pytest.approx(0.95)
    assert len(info['coefficients']) == 9

    info['coefficients'][0] = 99.0
    assert DEFAULT_LIBRARY.lookup('FiberGlassInsulation')[0] == pytest.approx(0.193)
    assert DEFAULT_LIBRARY.get_material_info('Unobtainium') is None


def test_materials_by_category():
    assert DEFAULT_LIBRARY.get_materials_by_category('glazing') == ['GlassThin', 'GlassThick']
    assert DEFAULT_LIBRARY.get_materials_by_category('special') == ['Transparent', 'Uniform']
    assert DEFAULT_LIBRARY.get_materials_by_category('metal') == ['Metal']
    assert DEFAULT_LIBRARY.get_materials_by_category('nonexistent') == []


def test_calculate_nrc():
    assert calculate_nrc([0.5] * 9) == pytest.approx(0.5)
    assert calculate_nrc([0.0, 0.0, 0.0, 0.82, 0.99, 0.99, 0.99, 0.0, 0.0]) == pytest.approx(0.95)
    assert calculate_nrc([0.5, 0.5]) == 0.0


def test_library_rejects_inconsistent_bands():
    with pytest.raises(ValueError):
        MaterialLibrary([
            ('A', 'special', 'three bands', (0.1, 0.2, 0.3)),
            ('B', 'special', 'two bands', (0.1, 0.2)),
        ])
    with pytest.raises(ValueError):
        MaterialLibrary([
            ('A', 'special', 'first', (0.1, 0.2)),
            ('A', 'special', 'duplicate', (0.1, 0.2)),
        ])


def test_custom_library():
    library = MaterialLibrary(STANDARD_MATERIAL_DATA[:3])
    assert library.names() == ['Transparent', 'AcousticCeilingTiles', 'BrickBare']
    assert library.lookup('Uniform') is None


def test_default_config():
    """Reference configuration values"""
    config = DEFAULT_CONFIG
    assert config.num_reverb_bands == 9
    assert config.reflections_starting_band == 4
    assert config.reflections_num_averaging_bands == 3
    assert config.speed_of_sound == 343.0
    assert config.min_volume == 1e-4
    assert config.air_absorption_coefficients == (
        0.0006, 0.0006, 0.0007, 0.0008, 0.0010, 0.0015, 0.0026, 0.0060, 0.0207
    )
    assert all(config.default_materials[wall] == 'Transparent' for wall in WallType)
    assert config.reflection_band_slice == slice(4, 7)


def test_config_frequency_labels():
    labels = DEFAULT_CONFIG.get_frequency_labels(as_strings=True)
    assert labels[0] == '31.25 Hz'
    assert labels[4] == '500 Hz'
    assert labels[5] == '1 kHz'
    assert labels[-1] == '8 kHz'
    assert DEFAULT_CONFIG.get_frequency_labels()[2] == 125.0


def test_config_replace_and_string_keys():
    config = DEFAULT_CONFIG.replace(
        speed_of_sound=340.0,
        default_materials={wall.value: 'Uniform' for wall in WallType}
    )
    assert config.speed_of_sound == 340.0
    assert config.default_materials[WallType.FLOOR] == 'Uniform'
    assert DEFAULT_CONFIG.speed_of_sound == 343.0


def test_config_is_hashable():
    same = AcousticsConfig(default_materials={wall.value: 'Transparent' for wall in WallType})
    assert same == DEFAULT_CONFIG
    assert hash(same) == hash(DEFAULT_CONFIG)

    changed = DEFAULT_CONFIG.replace(speed_of_sound=340.0)
    assert len({DEFAULT_CONFIG, same, changed}) == 2


def test_config_validation():
    with pytest.raises(ValueError):
        AcousticsConfig(air_absorption_coefficients=(0.001,) * 8)
    with pytest.raises(ValueError):
        AcousticsConfig(reflections_starting_band=7, reflections_num_averaging_bands=3)
    with pytest.raises(ValueError):
        AcousticsConfig(reflections_num_averaging_bands=0)
    with pytest.raises(ValueError):
        AcousticsConfig(speed_of_sound=0.0)
    with pytest.raises(ValueError):
        AcousticsConfig(min_volume=float('nan'))
    with pytest.raises(ValueError):
        AcousticsConfig(default_materials={WallType.LEFT: 'Transparent'})
    with pytest.raises(ValueError):
        AcousticsConfig(default_materials={'roof': 'Transparent'})


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, '-v']))

#!/usr/bin/env python3
"""
Test script for the one-shot room acoustics calculation and diagnostics routing
"""

import sys
import os
import math
import logging
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

import numpy as np
import pytest

from room_acoustics import (
    WallType, DimensionAxis, DEFAULT_LIBRARY, ResultStatus,
    calculate_room_acoustics, CollectingDiagnosticsSink, DiagnosticKind,
    MaterialDiagnostic, configure_debug_logging
)

ROOM = {'width': 4.0, 'height': 3.0, 'depth': 5.0}
MATERIALS = {'walls': 'BrickBare', 'floor': 'ParquetOnConcrete', 'ceiling': 'AcousticCeilingTiles'}


def test_complete_profile():
    result = calculate_room_acoustics(ROOM, MATERIALS)

    assert result.is_success
    assert not result.is_error
    assert not result.has_warnings
    profile = result.data
    assert profile.dimensions[DimensionAxis.DEPTH] == 5.0
    assert profile.speed_of_sound == 343.0
    assert np.array_equal(profile.coefficients[WallType.FLOOR],
                          DEFAULT_LIBRARY.lookup('ParquetOnConcrete'))
    assert profile.reflection_coefficients[WallType.FRONT] == pytest.approx(math.sqrt(0.96))
    assert profile.rt60.shape == (9,)
    assert profile.rt60[4] == pytest.approx(0.54739, abs=1e-4)
    assert profile.mean_rt60 == pytest.approx(float(np.mean(profile.rt60)))


def test_fallbacks_become_warnings():
    sink = CollectingDiagnosticsSink()
    result = calculate_room_acoustics(ROOM, {'walls': 'Vibranium', 'floor': 'Marble'}, sink=sink)

    assert result.status is ResultStatus.SUCCESS
    # Four unknown side-wall materials and an undefined ceiling
    assert len(result.warnings) == 5
    assert any('Vibranium' in w for w in result.warnings)
    assert any('ceiling' in w for w in result.warnings)
    assert [e.kind for e in sink.events].count(DiagnosticKind.UNKNOWN_MATERIAL) == 4
    assert result.metadata['diagnostics'][0]['requested_material'] == 'Vibranium'


def test_invalid_dimensions_fail_validation():
    result = calculate_room_acoustics({'width': -1.0, 'height': 3.0, 'depth': 5.0}, MATERIALS)

    assert result.status is ResultStatus.VALIDATION_FAILED
    assert result.is_error
    assert result.data is None
    assert result.metadata['parameter'] == 'width'
    assert 'negative' in result.error_message


def test_invalid_speed_of_sound_fails_validation():
    result = calculate_room_acoustics(ROOM, MATERIALS, speed_of_sound=-1.0)
    assert result.status is ResultStatus.VALIDATION_FAILED
    assert result.metadata['parameter'] == 'speed_of_sound'


def test_empty_room_profile():
    result = calculate_room_acoustics()
    assert result.is_success
    assert np.all(result.data.rt60 == 0.0)
    assert result.data.mean_rt60 == 0.0
    assert all(r == 0.0 for r in result.data.reflection_coefficients.values())


def test_diagnostic_messages():
    unknown = MaterialDiagnostic(DiagnosticKind.UNKNOWN_MATERIAL, WallType.BACK, 'Foam', 'Transparent')
    assert unknown.message == 'Material "Foam" on wall "back" not found. Using "Transparent".'

    undefined = MaterialDiagnostic(DiagnosticKind.UNDEFINED_WALL, WallType.FLOOR, None, 'Transparent')
    assert undefined.message == 'Wall "floor" is not defined and will be ignored.'
    assert undefined.to_dict()['requested_material'] is None


def test_debug_logging_switch(monkeypatch):
    logger = logging.getLogger('room_acoustics')

    monkeypatch.delenv('ROOM_ACOUSTICS_DEBUG', raising=False)
    assert configure_debug_logging() is False

    monkeypatch.setenv('ROOM_ACOUSTICS_DEBUG', 'yes')
    monkeypatch.setenv('ROOM_ACOUSTICS_DEBUG_LEVEL', 'DEBUG')
    try:
        assert configure_debug_logging() is True
        assert configure_debug_logging() is True
        debug_handlers = [h for h in logger.handlers if getattr(h, '_room_acoustics_debug', False)]
        assert len(debug_handlers) == 1
        assert logger.level == logging.DEBUG
    finally:
        for handler in list(logger.handlers):
            if getattr(handler, '_room_acoustics_debug', False):
                logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, '-v']))

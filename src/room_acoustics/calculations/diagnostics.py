"""
Diagnostics for material resolution fallbacks
Fallback decisions are emitted as structured events to an injected sink so
embedding applications can route or suppress them
"""

import enum
import json
import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from ..models.room import WallType

LOGGER_NAME = 'room_acoustics.diagnostics'


class DiagnosticKind(enum.Enum):
    """Kinds of fallback decisions taken while resolving wall materials"""
    UNKNOWN_MATERIAL = "unknown_material"
    UNDEFINED_WALL = "undefined_wall"


@dataclass(frozen=True)
class MaterialDiagnostic:
    """A single fallback decision for one wall"""
    kind: DiagnosticKind
    wall: WallType
    requested_material: Optional[str]
    resolved_material: str

    @property
    def message(self) -> str:
        if self.kind is DiagnosticKind.UNKNOWN_MATERIAL:
            return (f'Material "{self.requested_material}" on wall "{self.wall.value}" '
                    f'not found. Using "{self.resolved_material}".')
        return f'Wall "{self.wall.value}" is not defined and will be ignored.'

    def to_dict(self) -> Dict[str, Any]:
        return {
            'kind': self.kind.value,
            'wall': self.wall.value,
            'requested_material': self.requested_material,
            'resolved_material': self.resolved_material,
        }


class DiagnosticsSink:
    """Receives material fallback events; subclasses decide where they go"""

    def emit(self, event: MaterialDiagnostic) -> None:
        raise NotImplementedError


class NullDiagnosticsSink(DiagnosticsSink):
    """Discards every event"""

    def emit(self, event: MaterialDiagnostic) -> None:
        pass


class CollectingDiagnosticsSink(DiagnosticsSink):
    """Keeps events in memory, in emission order"""

    def __init__(self):
        self.events: List[MaterialDiagnostic] = []

    def emit(self, event: MaterialDiagnostic) -> None:
        self.events.append(event)

    @property
    def messages(self) -> List[str]:
        return [event.message for event in self.events]


class LoggingDiagnosticsSink(DiagnosticsSink):
    """
    Forwards events to the standard logging system as warnings

    The event fields are attached to the record as ``diagnostic`` so
    handlers can filter on them, and appended to the message as JSON.
    """

    def __init__(self, logger: Optional[logging.Logger] = None, level: int = logging.WARNING):
        self.logger = logger or logging.getLogger(LOGGER_NAME)
        self.level = level

    def emit(self, event: MaterialDiagnostic) -> None:
        data = event.to_dict()
        self.logger.log(
            self.level,
            f"{event.message} {_format_event_data(data)}",
            extra={'diagnostic': data}
        )


def _format_event_data(data: Dict[str, Any]) -> str:
    """Format event data for logging"""
    try:
        return json.dumps(data, separators=(',', ':'))
    except (TypeError, ValueError):
        return str(data)


def configure_debug_logging() -> bool:
    """
    Attach a console handler to the package logger when requested

    Controlled by ``ROOM_ACOUSTICS_DEBUG`` (1/true/yes/on) and
    ``ROOM_ACOUSTICS_DEBUG_LEVEL`` (standard level name, default INFO).
    Without the switch no handlers are added. Returns whether a handler
    was attached.
    """
    env_val = str(os.environ.get("ROOM_ACOUSTICS_DEBUG", "")).strip().lower()
    if env_val not in {"1", "true", "yes", "on"}:
        return False

    debug_level = os.environ.get("ROOM_ACOUSTICS_DEBUG_LEVEL", "INFO").upper()
    logger = logging.getLogger('room_acoustics')
    logger.setLevel(getattr(logging, debug_level, logging.INFO))

    # Avoid stacking handlers on repeated configuration
    for handler in list(logger.handlers):
        if getattr(handler, '_room_acoustics_debug', False):
            logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.DEBUG)
    console_handler.setFormatter(logging.Formatter(
        '%(asctime)s [ROOM-%(levelname)s] %(name)s: %(message)s',
        datefmt='%H:%M:%S'
    ))
    console_handler._room_acoustics_debug = True
    logger.addHandler(console_handler)
    return True


# Default sink used when callers do not inject one
default_sink = LoggingDiagnosticsSink()

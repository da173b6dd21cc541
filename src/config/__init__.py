"""
Konfigurationsmodul fuer Salão Agenda.
"""

from .agenda import (
    DAY_START_HOUR, DAY_END_HOUR, DAY_START_MINUTES, DAY_END_MINUTES,
    HOUR_HEIGHT_PX,
    MIN_BLOCK_HEIGHT_PX, MIN_APPOINTMENT_HEIGHT_PX,
    SLOT_STEP_MINUTES, SLOT_DURATION_MINUTES,
    MAX_INSTALLMENTS, FEE_PREVIEW_GROSS, WEEK_STARTS_ON,
)
from .backend import (
    BackendConfig, load_backend_config, save_backend_config,
    get_config_dir, get_config_path, DEFAULT_TIMEZONE,
)

__all__ = [
    'DAY_START_HOUR', 'DAY_END_HOUR', 'DAY_START_MINUTES', 'DAY_END_MINUTES',
    'HOUR_HEIGHT_PX',
    'MIN_BLOCK_HEIGHT_PX', 'MIN_APPOINTMENT_HEIGHT_PX',
    'SLOT_STEP_MINUTES', 'SLOT_DURATION_MINUTES',
    'MAX_INSTALLMENTS', 'FEE_PREVIEW_GROSS', 'WEEK_STARTS_ON',
    # Backend
    'BackendConfig', 'load_backend_config', 'save_backend_config',
    'get_config_dir', 'get_config_path', 'DEFAULT_TIMEZONE',
]

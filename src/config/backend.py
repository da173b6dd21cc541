"""
Salão Agenda - Backend-Konfiguration

Verbindungsdaten zum Supabase-Backend (PostgREST).
Gelesen aus config.json im lokalen Datenverzeichnis, Umgebungsvariablen
haben Vorrang.
"""

import os
import json
import logging
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Optional, Dict, Any

logger = logging.getLogger(__name__)

APP_DIR_NAME = 'SalaoAgenda'
DEFAULT_TIMEZONE = 'America/Sao_Paulo'

ENV_SUPABASE_URL = 'SALAO_SUPABASE_URL'
ENV_SUPABASE_KEY = 'SALAO_SUPABASE_KEY'
ENV_SALON_ID = 'SALAO_SALON_ID'
ENV_TIMEZONE = 'SALAO_TIMEZONE'


def get_config_dir() -> Path:
    """Gibt das Konfigurationsverzeichnis zurück."""
    if os.name == 'nt':
        base = Path(os.environ.get('LOCALAPPDATA', os.path.expanduser('~')))
    else:
        base = Path.home() / '.local' / 'share'

    config_dir = base / APP_DIR_NAME
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_config_path() -> Path:
    return get_config_dir() / 'config.json'


@dataclass
class BackendConfig:
    """Verbindungs- und Mandanteneinstellungen."""
    supabase_url: str = ''
    anon_key: str = ''
    salon_id: str = ''
    timezone: str = DEFAULT_TIMEZONE
    timeout: int = 30

    @property
    def rest_url(self) -> str:
        """PostgREST-Basis-URL (``<projekt>/rest/v1``)."""
        return f"{self.supabase_url.rstrip('/')}/rest/v1"

    @property
    def is_complete(self) -> bool:
        return bool(self.supabase_url and self.anon_key and self.salon_id)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Dict) -> 'BackendConfig':
        return cls(
            supabase_url=d.get('supabase_url', '') or '',
            anon_key=d.get('anon_key', '') or '',
            salon_id=d.get('salon_id', '') or '',
            timezone=d.get('timezone') or DEFAULT_TIMEZONE,
            timeout=int(d.get('timeout', 30)),
        )


def _apply_env(config: BackendConfig) -> BackendConfig:
    url = os.environ.get(ENV_SUPABASE_URL)
    if url:
        config.supabase_url = url
    key = os.environ.get(ENV_SUPABASE_KEY)
    if key:
        config.anon_key = key
    salon_id = os.environ.get(ENV_SALON_ID)
    if salon_id:
        config.salon_id = salon_id
    tz = os.environ.get(ENV_TIMEZONE)
    if tz:
        config.timezone = tz
    return config


def load_backend_config(path: Optional[Path] = None) -> BackendConfig:
    """
    Lädt die Backend-Konfiguration.

    Reihenfolge: Defaults -> config.json -> Umgebungsvariablen.
    Eine fehlende oder defekte Datei ist kein Fehler (nur Warnung).
    """
    config = BackendConfig()
    config_path = path or get_config_path()

    if config_path.exists():
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            config = BackendConfig.from_dict(data)
            logger.debug(f"Konfiguration geladen: {config_path}")
        except (OSError, ValueError) as e:
            logger.warning(f"Konfiguration nicht lesbar ({config_path}): {e}")

    return _apply_env(config)


def save_backend_config(config: BackendConfig, path: Optional[Path] = None) -> None:
    config_path = path or get_config_path()
    with open(config_path, 'w', encoding='utf-8') as f:
        json.dump(config.to_dict(), f, indent=2, ensure_ascii=False)
    logger.info(f"Konfiguration gespeichert: {config_path}")

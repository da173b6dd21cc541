"""
Salão Agenda - Basis HTTP Client

Zentrale Klasse für alle Anfragen an die Supabase-REST-Schnittstelle
(PostgREST). Tabellen werden als Endpunkte angesprochen, Filter als
Query-Parameter (``salon_id=eq.<id>``).
"""

import requests
import time
from typing import Optional, Dict, Any, List, Union
from dataclasses import dataclass
import logging

from config.backend import BackendConfig

logger = logging.getLogger(__name__)

# Retry-Konfiguration
MAX_RETRIES = 3
RETRY_STATUS_CODES = {429, 500, 502, 503, 504}
RETRY_BACKOFF_FACTOR = 1.0

JsonResult = Union[List[Dict[str, Any]], Dict[str, Any]]


@dataclass
class APIConfig:
    """API-Konfiguration"""
    base_url: str = ''
    api_key: str = ''
    timeout: int = 30
    verify_ssl: bool = True

    @classmethod
    def from_backend(cls, backend: BackendConfig) -> 'APIConfig':
        return cls(
            base_url=backend.rest_url,
            api_key=backend.anon_key,
            timeout=backend.timeout,
        )


class APIError(Exception):
    """Fehler bei API-Anfragen"""
    def __init__(self, message: str, status_code: int = 0, details: Dict = None):
        super().__init__(message)
        self.status_code = status_code
        self.details = details or {}


class APIClient:
    """
    Basis-Client für PostgREST.

    Verwendung:
        client = APIClient(APIConfig.from_backend(load_backend_config()))
        rows = client.get("/professionals", params={'salon_id': 'eq.<id>'})
    """

    def __init__(self, config: APIConfig = None, session: requests.Session = None):
        self.config = config or APIConfig()
        self._token: Optional[str] = None
        self._session = session or requests.Session()

    @property
    def base_url(self) -> str:
        return self.config.base_url.rstrip('/')

    def set_token(self, token: str) -> None:
        """Setzt das Benutzer-JWT (sonst wird der anon key als Bearer genutzt)."""
        self._token = token
        logger.debug("Token gesetzt")

    def _get_headers(self, prefer: str = None) -> Dict[str, str]:
        """Erstellt die HTTP-Header für Anfragen."""
        headers = {
            'Content-Type': 'application/json',
            'Accept': 'application/json',
            'apikey': self.config.api_key,
            'Authorization': f'Bearer {self._token or self.config.api_key}',
        }
        if prefer:
            headers['Prefer'] = prefer
        return headers

    def _handle_response(self, response: requests.Response) -> JsonResult:
        """Verarbeitet die API-Response.

        PostgREST liefert Fehler als ``{"message", "code", "details", "hint"}``.
        """
        if response.status_code == 204 or not response.content:
            if response.status_code >= 400:
                raise APIError(
                    f"Server-Fehler: {response.status_code}",
                    status_code=response.status_code
                )
            return []

        try:
            data = response.json()
        except ValueError:
            if response.status_code >= 400:
                raise APIError(
                    f"Server-Fehler: {response.status_code}",
                    status_code=response.status_code
                )
            return {'raw': response.text}

        if response.status_code >= 400:
            if isinstance(data, dict):
                error_msg = data.get('message') or data.get('error') or f'HTTP {response.status_code}'
                details = {k: data.get(k) for k in ('code', 'details', 'hint') if data.get(k)}
            else:
                error_msg = f'HTTP {response.status_code}'
                details = {}
            raise APIError(error_msg, status_code=response.status_code, details=details)

        return data

    def _request_with_retry(self, method: str, url: str, **kwargs) -> requests.Response:
        """
        Fuehrt einen HTTP-Request mit Retry-Logik aus.

        Retries bei: RETRY_STATUS_CODES + Timeout + ConnectionError
        Kein Retry bei: anderen 4xx

        Raises:
            requests.RequestException nach allen fehlgeschlagenen Retries
        """
        last_error = None

        for attempt in range(MAX_RETRIES):
            try:
                response = self._session.request(method, url, **kwargs)

                if response.status_code in RETRY_STATUS_CODES and attempt < MAX_RETRIES - 1:
                    wait_time = RETRY_BACKOFF_FACTOR * (2 ** attempt)
                    logger.warning(
                        f"{method} {url} HTTP {response.status_code}, "
                        f"Retry {attempt + 1}/{MAX_RETRIES} in {wait_time:.1f}s"
                    )
                    time.sleep(wait_time)
                    continue

                return response

            except (requests.Timeout, requests.ConnectionError) as e:
                last_error = e
                if attempt >= MAX_RETRIES - 1:
                    raise
                wait_time = RETRY_BACKOFF_FACTOR * (2 ** attempt)
                kind = 'Timeout' if isinstance(e, requests.Timeout) else 'Verbindungsfehler'
                logger.warning(
                    f"{method} {url} {kind}, "
                    f"Retry {attempt + 1}/{MAX_RETRIES} in {wait_time:.1f}s"
                )
                time.sleep(wait_time)

        raise requests.RequestException(f"Request fehlgeschlagen nach {MAX_RETRIES} Versuchen: {last_error}")

    def _send(self, method: str, endpoint: str, params: Union[Dict, List[tuple]] = None,
              json_data: Any = None, prefer: str = None) -> JsonResult:
        url = f"{self.base_url}/{endpoint.lstrip('/')}"
        logger.debug(f"{method} {url}")

        try:
            response = self._request_with_retry(
                method, url,
                headers=self._get_headers(prefer),
                params=params,
                json=json_data,
                timeout=self.config.timeout,
                verify=self.config.verify_ssl
            )
        except requests.RequestException as e:
            logger.error(f"Netzwerkfehler: {e}")
            raise APIError(f"Netzwerkfehler: {e}")
        return self._handle_response(response)

    def get(self, endpoint: str, params: Union[Dict, List[tuple]] = None) -> JsonResult:
        """GET (select) auf eine Tabelle."""
        return self._send('GET', endpoint, params=params)

    def post(self, endpoint: str, json_data: Any = None) -> JsonResult:
        """POST (insert), liefert die angelegten Zeilen zurueck."""
        return self._send('POST', endpoint, json_data=json_data,
                          prefer='return=representation')

    def patch(self, endpoint: str, params: Dict = None, json_data: Dict = None) -> JsonResult:
        """PATCH (update) der per Filter ausgewaehlten Zeilen."""
        return self._send('PATCH', endpoint, params=params, json_data=json_data,
                          prefer='return=representation')


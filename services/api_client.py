# -*- coding: utf-8 -*-
"""
AT-ICT Portal API Client
========================

Thin wrapper over ``requests`` for the portal backend.

Features:
- Bearer token taken from the injected session store
- Uniform error translation (ApiException / NetworkException)
- Request/response logging
- Multipart uploads with byte-level progress reporting

Usage:
    client = PortalApiClient(ApiEndpoints.from_config(), session_store)
    client.post_json(client.endpoints.REGISTRATION.SUBMIT, payload)
"""

import json
import mimetypes
import os
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple, Union

import requests
from urllib3.fields import RequestField
from urllib3.filepost import choose_boundary

from app.api_config import ApiEndpoints
from app.config import Config
from services.exceptions import ApiException, InvalidResponseException, NetworkException
from services.session_store import SessionStore, auth_headers
from utils.logger import get_logger

logger = get_logger(__name__)

ProgressCallback = Callable[[int, int], None]

UPLOAD_CHUNK_SIZE = 64 * 1024

Segment = Union[bytes, str]


class UploadBody:
    """
    File-like request body that reports how many bytes were sent.

    The body is a list of segments: ``bytes`` are sent as-is, ``str`` is a
    path whose contents are read from disk chunk by chunk, so a file is
    never held in memory whole.

    ``requests`` streams objects exposing ``read``; ``__len__`` lets it
    send a Content-Length header instead of chunked encoding.
    """

    def __init__(self, segments: Union[Segment, List[Segment]],
                 callback: Optional[ProgressCallback] = None,
                 chunk_size: int = UPLOAD_CHUNK_SIZE):
        if isinstance(segments, (bytes, str)):
            segments = [segments]
        self._segments = list(segments)
        self._callback = callback
        self._chunk_size = chunk_size
        self._total = sum(
            len(s) if isinstance(s, bytes) else os.path.getsize(s)
            for s in self._segments
        )
        self._sent = 0
        self._index = 0
        self._offset = 0
        self._fh = None

    def __len__(self) -> int:
        return self._total

    @property
    def bytes_sent(self) -> int:
        return self._sent

    def read(self, size: int = -1) -> bytes:
        if size is None or size < 0:
            size = self._chunk_size
        size = min(size, self._chunk_size)

        while self._index < len(self._segments):
            chunk = self._read_segment(size)
            if chunk:
                self._sent += len(chunk)
                if self._callback:
                    self._callback(self._sent, self._total)
                return chunk
            self._next_segment()
        return b""

    def close(self):
        if self._fh is not None:
            self._fh.close()
            self._fh = None

    def _read_segment(self, size: int) -> bytes:
        segment = self._segments[self._index]
        if isinstance(segment, bytes):
            chunk = segment[self._offset:self._offset + size]
            self._offset += len(chunk)
            return chunk
        if self._fh is None:
            self._fh = open(segment, "rb")
        return self._fh.read(size)

    def _next_segment(self):
        self.close()
        self._index += 1
        self._offset = 0


def multipart_segments(fields: Dict[str, str],
                       files: Iterable[Tuple[str, str]]) -> Tuple[List[Segment], str]:
    """
    Lay out a multipart/form-data body as UploadBody segments.

    Part headers come from urllib3's RequestField; file contents stay on
    disk as path segments.

    Returns:
        (segments, content type header value)
    """
    boundary = choose_boundary()
    delimiter = f"--{boundary}\r\n".encode("utf-8")
    segments: List[Segment] = []

    for name, value in fields.items():
        part = RequestField(name=name, data=value)
        part.make_multipart()
        segments.append(delimiter + part.render_headers().encode("utf-8")
                        + str(value).encode("utf-8") + b"\r\n")

    for name, file_path in files:
        part = RequestField(name=name, data=b"", filename=os.path.basename(file_path))
        part.make_multipart(content_type=_guess_mime(file_path))
        segments.append(delimiter + part.render_headers().encode("utf-8"))
        segments.append(str(file_path))
        segments.append(b"\r\n")

    segments.append(f"--{boundary}--\r\n".encode("utf-8"))
    return segments, f"multipart/form-data; boundary={boundary}"


class PortalApiClient:
    """HTTP client for the AT-ICT portal backend."""

    def __init__(self, endpoints: ApiEndpoints, session_store: SessionStore,
                 http: Optional[requests.Session] = None,
                 timeout: int = None, upload_timeout: int = None):
        self.endpoints = endpoints
        self.session_store = session_store
        self.http = http or requests.Session()
        self.timeout = timeout or Config.API_TIMEOUT
        self.upload_timeout = upload_timeout or Config.UPLOAD_TIMEOUT
        self.verify = Config.VERIFY_SSL

    # ==================== Headers ====================

    def _headers(self, auth: bool = False, json_body: bool = True,
                 extra: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if json_body:
            headers["Content-Type"] = "application/json"
        if auth:
            headers.update(auth_headers(self.session_store))
        if extra:
            headers.update(extra)
        return headers

    # ==================== Core request ====================

    def _request(
        self,
        method: str,
        url: str,
        json_data: Optional[Dict] = None,
        params: Optional[Dict] = None,
        auth: bool = False,
        data: Any = None,
        headers: Optional[Dict[str, str]] = None,
        timeout: Optional[int] = None,
        expect_json: bool = True,
        require_json: bool = False
    ) -> Any:
        """
        Perform an HTTP request with error handling.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            url: Absolute endpoint URL
            json_data: JSON payload
            params: Query parameters
            auth: Attach the stored bearer token
            data: Raw body (used for multipart uploads)
            headers: Explicit headers, replacing the defaults
            timeout: Override the default timeout
            expect_json: Decode the response body as JSON
            require_json: A 2xx body that is empty or not JSON is an error

        Returns:
            Decoded JSON (or the raw response when expect_json is False)

        Raises:
            ApiException: non-2xx response
            InvalidResponseException: require_json set and the body is not JSON
            NetworkException: transport failure or timeout
        """
        logger.info(f"[API REQ] {method} {url}")
        if params:
            logger.info(f"[API REQ] Params: {params}")
        if json_data:
            logger.debug(f"[API REQ] Body: {_redact(json_data)}")

        try:
            response = self.http.request(
                method=method,
                url=url,
                json=json_data,
                params=params,
                data=data,
                headers=headers if headers is not None else self._headers(auth=auth),
                timeout=timeout or self.timeout,
                verify=self.verify
            )
            response.raise_for_status()

            logger.info(f"[API RES] {response.status_code} {url}")
            if not expect_json:
                return response

            result = None
            if response.text:
                try:
                    result = response.json()
                except ValueError:
                    logger.warning(f"[API RES] Non-JSON body from {url}")
                    result = None
            if result is None and require_json:
                raise InvalidResponseException(
                    message=f"Expected a JSON body from {url}",
                    status_code=response.status_code
                )
            return result

        except requests.exceptions.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else 0
            response_data = {}
            try:
                response_data = e.response.json() if e.response is not None else {}
            except (ValueError, AttributeError):
                pass
            response_text = ''
            if not response_data and e.response is not None:
                response_text = e.response.text[:500]
            logger.error(f"[API ERR] {status_code} {method} {url} | Response: {response_data or response_text}")
            raise ApiException(
                message=str(e),
                status_code=status_code,
                response_data=response_data
            )
        except requests.exceptions.Timeout as e:
            logger.error(f"Request timed out: {url} - {e}")
            raise NetworkException(message=str(e), original_error=e, timed_out=True)
        except requests.exceptions.ConnectionError as e:
            logger.error(f"Network error: {url} - {e}")
            raise NetworkException(message=str(e), original_error=e)
        except requests.exceptions.RequestException as e:
            logger.error(f"Request failed: {url} - {e}")
            raise NetworkException(message=str(e), original_error=e)

    # ==================== JSON helpers ====================

    def get_json(self, url: str, params: Optional[Dict] = None, auth: bool = True) -> Any:
        return self._request("GET", url, params=params, auth=auth)

    def post_json(self, url: str, payload: Dict[str, Any], auth: bool = False,
                  require_json: bool = False) -> Any:
        return self._request("POST", url, json_data=payload, auth=auth, require_json=require_json)

    def put_json(self, url: str, payload: Dict[str, Any], auth: bool = True) -> Any:
        return self._request("PUT", url, json_data=payload, auth=auth)

    def delete(self, url: str, auth: bool = True) -> Any:
        return self._request("DELETE", url, auth=auth)

    # ==================== Files ====================

    def upload_multipart(
        self,
        method: str,
        url: str,
        fields: Dict[str, str],
        files: Iterable[Tuple[str, str]],
        progress_callback: Optional[ProgressCallback] = None,
        extra_headers: Optional[Dict[str, str]] = None
    ) -> Any:
        """
        Upload form fields and files as multipart/form-data.

        Args:
            method: POST or PUT
            url: Endpoint URL
            fields: Plain text form fields
            files: (form field name, file path) pairs
            progress_callback: called with (bytes_sent, total_bytes)
            extra_headers: merged into the request headers
        """
        segments, content_type = multipart_segments(fields, files)
        body = UploadBody(segments, progress_callback)

        headers = self._headers(auth=True, json_body=False, extra=extra_headers)
        headers["Content-Type"] = content_type

        logger.info(f"[API REQ] {method} {url} multipart ({len(body)} bytes)")
        try:
            return self._request(
                method,
                url,
                data=body,
                headers=headers,
                timeout=self.upload_timeout
            )
        finally:
            body.close()

    def download(self, url: str, save_path: str) -> str:
        """Download a file to disk and return its path."""
        headers = self._headers(auth=True, json_body=False, extra={"Accept": "*/*"})
        response = self._request("GET", url, headers=headers, expect_json=False)
        directory = os.path.dirname(save_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(save_path, "wb") as f:
            f.write(response.content)
        logger.info(f"Downloaded {url} -> {save_path}")
        return save_path


def _guess_mime(file_path: str) -> str:
    return mimetypes.guess_type(file_path)[0] or "application/octet-stream"


def _redact(payload: Dict[str, Any]) -> str:
    """Serialize a request body for logging with secrets masked."""
    masked = {
        key: ("***" if "password" in key.lower() else value)
        for key, value in payload.items()
    }
    try:
        return json.dumps(masked, ensure_ascii=False, default=str)
    except (TypeError, ValueError):
        return str(masked)

from __future__ import annotations

import base64
from dataclasses import dataclass
from typing import Any, Optional

import requests

W3C_ELEMENT_KEY = "element-6066-11e4-a52e-4f735466cecf"


class AppiumHTTPError(RuntimeError):
    def __init__(
        self,
        *,
        message: str,
        method: str,
        url: str,
        status_code: Optional[int] = None,
        response_json: Optional[dict[str, Any]] = None,
        response_text: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.method = method
        self.url = url
        self.status_code = status_code
        self.response_json = response_json
        self.response_text = response_text

    @property
    def webdriver_error(self) -> Optional[str]:
        """W3C error code such as 'no such alert', when the server sent one."""
        if not isinstance(self.response_json, dict):
            return None
        value = _extract_webdriver_value(self.response_json)
        if isinstance(value, dict) and isinstance(value.get("error"), str):
            return value["error"]
        return None


@dataclass(frozen=True)
class WebDriverElementRef:
    element_id: str


def _extract_webdriver_value(payload: dict[str, Any]) -> Any:
    # W3C WebDriver typically wraps in {"value": ...}
    if "value" in payload:
        return payload["value"]
    return payload


def _extract_element_id(element_obj: Any) -> str:
    if not isinstance(element_obj, dict):
        raise ValueError(f"Unexpected element payload type: {type(element_obj)}")

    if element_obj.get(W3C_ELEMENT_KEY):
        return str(element_obj[W3C_ELEMENT_KEY])

    # Legacy JSONWire key
    if element_obj.get("ELEMENT"):
        return str(element_obj["ELEMENT"])

    raise ValueError(f"Could not extract element id from payload keys: {list(element_obj.keys())}")


def _rect(value: Any, *, what: str, method: str, url: str, response: dict[str, Any]) -> dict[str, int]:
    required = {"x", "y", "width", "height"}
    if not isinstance(value, dict) or not required.issubset(value.keys()):
        raise AppiumHTTPError(
            message=f"{what} missing keys (expected {sorted(required)})",
            method=method,
            url=url,
            response_json=response,
        )
    return {k: int(value[k]) for k in required}


class AppiumHTTPClient:
    """
    Synchronous Appium client over the W3C WebDriver HTTP endpoints.

    Only the commands the suite's page objects need are exposed. Everything is
    blocking; `MobileDriver` runs these calls off the event loop.
    """

    def __init__(self, server_url: str, *, timeout_s: float = 30.0) -> None:
        if not server_url:
            raise ValueError("server_url is required")
        self.server_url = server_url.rstrip("/")
        self.timeout_s = timeout_s
        self.session_id: Optional[str] = None
        self._session = requests.Session()

    def _request(self, method: str, path: str, *, json: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        url = f"{self.server_url}{path}"
        try:
            response = self._session.request(method, url, json=json, timeout=self.timeout_s)
        except requests.RequestException as e:
            raise AppiumHTTPError(
                message=f"Failed to call Appium server: {e}",
                method=method,
                url=url,
            ) from e

        response_text = None
        response_json: Optional[dict[str, Any]] = None
        try:
            response_json = response.json()
        except ValueError:
            response_text = response.text

        if response.status_code >= 400:
            details = None
            if isinstance(response_json, dict):
                value = _extract_webdriver_value(response_json)
                if isinstance(value, dict):
                    details = value.get("error") or value.get("message")
            raise AppiumHTTPError(
                message=f"Appium HTTP {response.status_code} for {method} {path}"
                + (f": {details}" if details else ""),
                method=method,
                url=url,
                status_code=response.status_code,
                response_json=response_json,
                response_text=response_text,
            )

        if not isinstance(response_json, dict):
            raise AppiumHTTPError(
                message=f"Appium returned non-JSON response for {method} {path}",
                method=method,
                url=url,
                status_code=response.status_code,
                response_text=response_text,
            )

        return response_json

    def _session_path(self, suffix: str) -> str:
        if not self.session_id:
            raise RuntimeError("No active Appium session. Call create_session() first.")
        return f"/session/{self.session_id}{suffix}"

    def _command(self, method: str, suffix: str, *, json: Optional[dict[str, Any]] = None) -> Any:
        path = self._session_path(suffix)
        return _extract_webdriver_value(self._request(method, path, json=json))

    def _typed(self, method: str, suffix: str, expected: type, *, json: Optional[dict[str, Any]] = None) -> Any:
        path = self._session_path(suffix)
        response = self._request(method, path, json=json)
        value = _extract_webdriver_value(response)
        if not isinstance(value, expected):
            raise AppiumHTTPError(
                message=f"Unexpected {suffix} response shape (expected {expected.__name__})",
                method=method,
                url=f"{self.server_url}{path}",
                response_json=response,
            )
        return value

    # -- session ---------------------------------------------------------------

    def create_session(self, session_payload: dict[str, Any]) -> str:
        """
        Create an Appium session.

        `session_payload` is a WebDriver new-session payload, typically
          {"capabilities": {"alwaysMatch": {...}, "firstMatch": [{}]}}
        """
        if not isinstance(session_payload, dict) or not session_payload:
            raise ValueError("session_payload must be a non-empty dict")

        response = self._request("POST", "/session", json=session_payload)

        # Both {"value": {"sessionId": ...}} and {"sessionId": ..., "value": {...}} are seen in the wild.
        value = _extract_webdriver_value(response)
        session_id = value.get("sessionId") if isinstance(value, dict) else None
        session_id = session_id or response.get("sessionId")

        if not session_id:
            raise AppiumHTTPError(
                message="Appium did not return a sessionId in the create_session response",
                method="POST",
                url=f"{self.server_url}/session",
                response_json=response,
            )

        self.session_id = str(session_id)
        return self.session_id

    def delete_session(self) -> None:
        if not self.session_id:
            return
        session_id = self.session_id
        try:
            self._request("DELETE", f"/session/{session_id}")
        finally:
            self.session_id = None

    # -- screen ----------------------------------------------------------------

    def get_page_source(self) -> str:
        return self._typed("GET", "/source", str)

    def get_screenshot_png_bytes(self) -> bytes:
        encoded = self._typed("GET", "/screenshot", str)
        try:
            return base64.b64decode(encoded)
        except ValueError as e:
            raise AppiumHTTPError(
                message=f"Failed to decode screenshot base64: {e}",
                method="GET",
                url=f"{self.server_url}{self._session_path('/screenshot')}",
            ) from e

    def get_window_rect(self) -> dict[str, int]:
        path = self._session_path("/window/rect")
        response = self._request("GET", path)
        return _rect(
            _extract_webdriver_value(response),
            what="/window/rect",
            method="GET",
            url=f"{self.server_url}{path}",
            response=response,
        )

    def is_keyboard_shown(self) -> bool:
        return bool(self._command("GET", "/appium/device/is_keyboard_shown"))

    def hide_keyboard(self) -> None:
        self._command("POST", "/appium/device/hide_keyboard", json={})

    def execute_script(self, script: str, *args: Any) -> Any:
        """Run a script or an Appium `mobile:` extension command."""
        if not script:
            raise ValueError("script is required")
        return self._command("POST", "/execute/sync", json={"script": script, "args": list(args)})

    # -- alerts ----------------------------------------------------------------

    def get_alert_text(self) -> Optional[str]:
        """Return the alert text, or None when no alert is open."""
        try:
            value = self._command("GET", "/alert/text")
        except AppiumHTTPError as e:
            if e.webdriver_error == "no such alert" or e.status_code == 404:
                return None
            raise
        return value if isinstance(value, str) else None

    def accept_alert(self) -> None:
        self._command("POST", "/alert/accept", json={})

    def dismiss_alert(self) -> None:
        self._command("POST", "/alert/dismiss", json={})

    # -- elements --------------------------------------------------------------

    def find_elements(self, *, using: str, value: str) -> list[WebDriverElementRef]:
        if not using or not value:
            raise ValueError("'using' and 'value' are required to find elements")
        payload = self._typed("POST", "/elements", list, json={"using": using, "value": value})
        return [WebDriverElementRef(element_id=_extract_element_id(item)) for item in payload]

    def get_element_text(self, element: WebDriverElementRef) -> str:
        return self._typed("GET", f"/element/{element.element_id}/text", str)

    def get_element_attribute(self, element: WebDriverElementRef, name: str) -> Optional[str]:
        value = self._command("GET", f"/element/{element.element_id}/attribute/{name}")
        return None if value is None else str(value)

    def is_element_displayed(self, element: WebDriverElementRef) -> bool:
        return bool(self._command("GET", f"/element/{element.element_id}/displayed"))

    def is_element_enabled(self, element: WebDriverElementRef) -> bool:
        return bool(self._command("GET", f"/element/{element.element_id}/enabled"))

    def get_element_rect(self, element: WebDriverElementRef) -> dict[str, int]:
        path = self._session_path(f"/element/{element.element_id}/rect")
        response = self._request("GET", path)
        return _rect(
            _extract_webdriver_value(response),
            what="element /rect",
            method="GET",
            url=f"{self.server_url}{path}",
            response=response,
        )

    def click(self, element: WebDriverElementRef) -> None:
        self._command("POST", f"/element/{element.element_id}/click", json={})

    def clear(self, element: WebDriverElementRef) -> None:
        self._command("POST", f"/element/{element.element_id}/clear", json={})

    def send_keys(self, element: WebDriverElementRef, *, text: str) -> None:
        if text is None:
            raise ValueError("text must not be None")
        # Servers disagree on `text` vs `value` (array of chars); send both.
        self._command(
            "POST",
            f"/element/{element.element_id}/value",
            json={"text": text, "value": list(text)},
        )

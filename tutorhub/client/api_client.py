"""
HTTP client for the TutorHub REST API.

One ``ApiClient`` holds the base URL and the current bearer token and is the
only place outgoing calls are made from: front-end views and scripts call its
methods and re-render from the returned data.
"""
import logging
from typing import Any, BinaryIO

import requests

logger = logging.getLogger(__name__)

API_BASE_URL = "http://localhost:8000/api"


class ApiError(Exception):
    """Raised for any non-2xx response."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP error! status: {status_code}: {message}")


class ApiClient:
    def __init__(
        self,
        base_url: str = API_BASE_URL,
        token: str | None = None,
        session: Any = None,
        timeout: float | None = 30.0,
    ):
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.refresh_token: str | None = None
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout

    def request(
        self,
        method: str,
        endpoint: str,
        *,
        json: Any = None,
        data: dict[str, Any] | None = None,
        files: dict[str, Any] | None = None,
    ) -> Any:
        """
        Send one request and decode the JSON body.

        Plain objects go out as JSON. With ``files`` the body is multipart and
        no Content-Type is set here, so the transport can add the boundary.
        """
        headers = {}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"

        kwargs: dict[str, Any] = {"headers": headers}
        if json is not None:
            kwargs["json"] = json
        if data is not None:
            kwargs["data"] = data
        if files is not None:
            kwargs["files"] = files
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout

        url = f"{self.base_url}{endpoint}"
        response = self.session.request(method, url, **kwargs)

        if not 200 <= response.status_code < 300:
            message = _error_message(response)
            logger.error(f"API request failed: {method} {endpoint} -> {response.status_code}")
            raise ApiError(response.status_code, message)

        content_type = response.headers.get("content-type", "")
        if "application/json" in content_type:
            return response.json()
        return response

    # Authentication
    def login(self, email: str, password: str) -> dict:
        result = self.request("POST", "/login", json={"email": email, "password": password})
        self._remember_tokens(result)
        return result["user"]

    def student_login(self, email: str, password: str) -> dict:
        result = self.request(
            "POST", "/student/login", json={"email": email, "password": password}
        )
        self._remember_tokens(result)
        return result["student"]

    def refresh(self) -> str:
        if not self.refresh_token:
            raise ApiError(401, "No refresh token")
        result = self.request(
            "POST", "/token/refresh", json={"refresh_token": self.refresh_token}
        )
        self.token = result["token"]
        return self.token

    def logout(self) -> None:
        self.token = None
        self.refresh_token = None

    def is_authenticated(self) -> bool:
        return bool(self.token)

    def me(self) -> dict:
        return self.request("GET", "/me")

    def _remember_tokens(self, result: dict) -> None:
        self.token = result["token"]
        self.refresh_token = result.get("refresh_token")

    # Student portal
    def get_student_dashboard(self) -> dict:
        return self.request("GET", "/student/dashboard")

    def get_student_assignments(self) -> list:
        return self.request("GET", "/student/assignments")

    def get_student_classes(self) -> list:
        return self.request("GET", "/student/classes")

    def get_student_lessons(self) -> list:
        return self.request("GET", "/student/lessons")

    def change_student_password(self, current_password: str, new_password: str) -> dict:
        return self.request(
            "PUT",
            "/student/password",
            json={"current_password": current_password, "new_password": new_password},
        )

    # Students
    def get_students(self) -> list:
        return self.request("GET", "/students")

    def create_student(self, student: dict) -> dict:
        return self.request("POST", "/students", json=student)

    def update_student(self, student_id: int, student: dict) -> dict:
        return self.request("PUT", f"/students/{student_id}", json=student)

    def delete_student(self, student_id: int) -> dict:
        return self.request("DELETE", f"/students/{student_id}")

    # Lessons
    def get_lessons(self) -> list:
        return self.request("GET", "/lessons")

    def create_lesson(self, lesson: dict) -> dict:
        return self.request("POST", "/lessons", json=lesson)

    # Assignments
    def get_assignments(self) -> list:
        return self.request("GET", "/assignments")

    def create_assignment(self, assignment: dict) -> dict:
        return self.request("POST", "/assignments", json=assignment)

    def update_assignment(self, assignment_id: int, assignment: dict) -> dict:
        return self.request("PUT", f"/assignments/{assignment_id}", json=assignment)

    # Classes
    def get_classes(self) -> list:
        return self.request("GET", "/classes")

    def create_class(self, class_data: dict) -> dict:
        return self.request("POST", "/classes", json=class_data)

    # Resources
    def get_resources(self) -> list:
        return self.request("GET", "/resources")

    def create_resource(
        self,
        fields: dict[str, Any],
        file: tuple[str, BinaryIO | bytes, str] | None = None,
    ) -> dict:
        """
        ``fields`` are the form fields (title, type, description, level);
        ``file`` is an optional ``(filename, content, content_type)`` tuple.
        """
        files = {"file": file} if file is not None else None
        return self.request("POST", "/resources", data=fields, files=files)

    # Dashboard
    def get_dashboard_stats(self) -> dict:
        return self.request("GET", "/dashboard/stats")


def _error_message(response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text
    if isinstance(body, dict) and isinstance(body.get("detail"), str):
        return body["detail"]
    return str(body)

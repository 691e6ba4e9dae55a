from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

import requests


class FitnessAPIError(RuntimeError):
    def __init__(
        self,
        *,
        message: str,
        method: str,
        url: str,
        status_code: Optional[int] = None,
        response_json: Any = None,
        response_text: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.method = method
        self.url = url
        self.status_code = status_code
        self.response_json = response_json
        self.response_text = response_text


@dataclass(frozen=True)
class ApiResponse:
    status_code: int
    data: Any

    @property
    def id(self) -> int:
        if not isinstance(self.data, dict) or "id" not in self.data:
            raise KeyError("response body has no 'id'")
        return int(self.data["id"])


class _ServiceClient:
    def __init__(
        self,
        base_url: str,
        *,
        timeout_s: float = 30.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        if not base_url:
            raise ValueError("base_url is required")
        self.base_url = base_url.rstrip("/")
        self.timeout_s = timeout_s
        self._session = session or requests.Session()

    def _request(self, method: str, path: str, *, json: Optional[dict[str, Any]] = None) -> ApiResponse:
        url = f"{self.base_url}{path}"
        try:
            response = self._session.request(method, url, json=json, timeout=self.timeout_s)
        except requests.RequestException as e:
            raise FitnessAPIError(message=f"Failed to call fitness API: {e}", method=method, url=url) from e

        data: Any = None
        response_text: Optional[str] = None
        if response.content:
            try:
                data = response.json()
            except ValueError:
                response_text = response.text

        if response.status_code >= 400:
            if isinstance(data, dict):
                details = data.get("message") or data.get("error")
            else:
                details = response_text
            raise FitnessAPIError(
                message=f"Fitness API HTTP {response.status_code} for {method} {path}"
                + (f": {details}" if details else ""),
                method=method,
                url=url,
                status_code=response.status_code,
                response_json=data,
                response_text=response_text,
            )

        return ApiResponse(status_code=response.status_code, data=data)


class FitnessWriteClient(_ServiceClient):
    """
    Write-side backend client used to seed and clean up test data.

    Journeys create routines, days and sets here so the UI steps start from a
    known state without tapping through every form.
    """

    def create_routine(self, *, name: str, description: str = "", is_active: bool = True) -> ApiResponse:
        if not name:
            raise ValueError("name is required")
        return self._request(
            "POST",
            "/routines",
            json={"name": name, "description": description, "isActive": is_active},
        )

    def delete_routine(self, routine_id: int) -> ApiResponse:
        return self._request("DELETE", f"/routines/{routine_id}")

    def create_workout_day(
        self,
        *,
        routine_id: int,
        day_number: int,
        day_name: str,
        notes: Optional[str] = None,
    ) -> ApiResponse:
        if day_number <= 0:
            raise ValueError("day_number must be > 0")
        payload: dict[str, Any] = {"routineId": routine_id, "dayNumber": day_number, "dayName": day_name}
        if notes is not None:
            payload["notes"] = notes
        return self._request("POST", "/workout-days", json=payload)

    def create_workout_day_set(
        self,
        *,
        workout_day_id: int,
        muscle_group_id: int,
        number_of_sets: int,
        notes: Optional[str] = None,
    ) -> ApiResponse:
        if number_of_sets <= 0:
            raise ValueError("number_of_sets must be > 0")
        payload: dict[str, Any] = {
            "workoutDayId": workout_day_id,
            "muscleGroupId": int(muscle_group_id),
            "numberOfSets": number_of_sets,
        }
        if notes is not None:
            payload["notes"] = notes
        return self._request("POST", "/workout-day-sets", json=payload)

    def update_workout_day_set(
        self,
        set_id: int,
        *,
        workout_day_id: int,
        muscle_group_id: int,
        number_of_sets: int,
    ) -> ApiResponse:
        return self._request(
            "PUT",
            f"/workout-day-sets/{set_id}",
            json={
                "workoutDayId": workout_day_id,
                "muscleGroupId": int(muscle_group_id),
                "numberOfSets": number_of_sets,
            },
        )

    def create_snapshot(self, routine_id: int) -> ApiResponse:
        return self._request("POST", f"/routines/{routine_id}/snapshots", json={})


class FitnessReadClient(_ServiceClient):
    def get_routine_by_id(self, routine_id: int) -> ApiResponse:
        return self._request("GET", f"/routines/{routine_id}")


@dataclass
class RoutineTracker:
    """Remembers routines a test created and deletes them afterwards."""

    client: FitnessWriteClient
    routine_ids: list[int] = field(default_factory=list)

    def track(self, routine_id: int) -> int:
        self.routine_ids.append(routine_id)
        return routine_id

    def cleanup(self) -> list[int]:
        """Delete every tracked routine; returns the ids that could not be deleted."""
        failed: list[int] = []
        for routine_id in self.routine_ids:
            try:
                self.client.delete_routine(routine_id)
            except FitnessAPIError as e:
                print(f"Failed to delete routine {routine_id}: {e}")
                failed.append(routine_id)
        self.routine_ids.clear()
        return failed

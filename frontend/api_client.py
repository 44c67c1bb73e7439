"""HTTP client for the guidance backend.

Market trends are read through the backend cache first; on a miss the static
table entry is used and written back so the next reader gets a cache hit.
"""
import logging
import os
from typing import Any, Dict, List

import requests

from app.services.market_data import get_market_trend, is_complete_trend

logger = logging.getLogger(__name__)

DEFAULT_BACKEND_URL = "http://127.0.0.1:8000"


class GuidanceApiClient:
    def __init__(self, base_url: str | None = None, session: Any = None, timeout: float = 10):
        self.base_url = (base_url or os.getenv("BACKEND_URL", DEFAULT_BACKEND_URL)).rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def fetch_market_trends(self, field: str) -> List[Dict[str, Any]]:
        """Trend data for a field, served from the backend cache when fresh."""
        try:
            response = self.session.get(self._url(f"/cache/{field}"), timeout=self.timeout)
            if response.status_code == 200:
                cached = response.json().get("data")
                if is_complete_trend(cached):
                    logger.info(f"Using cached market trends data for '{field}'")
                    return [cached]
                logger.warning(f"Ignoring cached market data for '{field}' with unexpected shape")
        except requests.exceptions.RequestException as e:
            logger.info(f"No cached data available for '{field}', using fresh data: {e}")

        trend = get_market_trend(field)
        try:
            response = self.session.post(self._url(f"/cache/{field}"), json={"data": trend}, timeout=self.timeout)
            if response.status_code != 200:
                logger.warning(f"Failed to cache market data for '{field}': {response.status_code}")
        except requests.exceptions.RequestException as e:
            logger.warning(f"Failed to cache market data for '{field}': {e}")
        return [trend]

    def save_analysis(self, student_id: str, analysis: Dict[str, Any]) -> bool:
        try:
            response = self.session.post(
                self._url("/student-analysis"),
                json={"studentId": student_id, "analysisData": analysis},
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"Error storing analysis for {student_id}: {e}")
            return False
        return response.status_code == 200

    def fetch_analysis(self, student_id: str) -> Dict[str, Any] | None:
        try:
            response = self.session.get(self._url(f"/student-analysis/{student_id}"), timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.error(f"Error fetching analysis for {student_id}: {e}")
            return None
        if response.status_code != 200:
            return None
        return response.json()["data"]

    def save_preferences(self, user_id: str, preferences: Dict[str, Any]) -> bool:
        try:
            response = self.session.post(
                self._url("/user-preferences"),
                json={"userId": user_id, "preferences": preferences},
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"Error saving preferences for {user_id}: {e}")
            return False
        return response.status_code == 200

    def health(self) -> bool:
        try:
            response = self.session.get(self._url("/health"), timeout=self.timeout)
        except requests.exceptions.RequestException:
            return False
        return response.status_code == 200 and response.json().get("status") == "healthy"

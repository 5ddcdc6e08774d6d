"""Lightweight HTTP client for the puzzle generation backend."""

from __future__ import annotations

import os
from typing import Any, Dict, Optional

import requests

from ..core.constants import MAX_GRID_SIZE, MAX_WORD_COUNT, MIN_GRID_SIZE, MIN_WORD_COUNT
from ..core.exceptions import PuzzleAPIError, PuzzleFormatError
from ..core.models import Puzzle
from ..data.loader import puzzle_from_payload
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)


class PuzzleClient:
    """Minimal client around the puzzle backend REST API."""

    DEFAULT_API_BASE = "http://localhost:8080/api"

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout_seconds: float = 10.0,
        base_url_env: str = "WORDPUZZLE_API_BASE",
        session: Optional[requests.Session] = None,
    ) -> None:
        resolved = base_url or os.environ.get(base_url_env) or self.DEFAULT_API_BASE
        self.base_url = resolved.rstrip("/")
        self.base_url_env = base_url_env
        self.timeout_seconds = timeout_seconds
        self._session = session or requests.Session()

    def generate(self, grid_size: int = 15, word_count: int = 10) -> Puzzle:
        """Request a new puzzle and return it as a validated :class:`Puzzle`."""
        payload = self.generate_payload(grid_size, word_count)
        try:
            return puzzle_from_payload(payload)
        except PuzzleFormatError:
            LOGGER.warning("Backend returned an inconsistent puzzle for gridSize=%s", grid_size)
            raise

    def generate_payload(self, grid_size: int = 15, word_count: int = 10) -> Dict[str, Any]:
        """Request a new puzzle and return the raw JSON payload."""
        self._check_arguments(grid_size, word_count)
        url = f"{self.base_url}/puzzle/generate"
        params = {"gridSize": grid_size, "wordCount": word_count}
        LOGGER.info("Requesting %sx%s puzzle with %s words from %s", grid_size, grid_size, word_count, url)
        try:
            response = self._session.get(url, params=params, timeout=self.timeout_seconds)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise PuzzleAPIError(f"Puzzle request failed: {exc}") from exc

        try:
            data = response.json()
        except ValueError as exc:
            LOGGER.warning("Puzzle response is not JSON: %.200s", response.text)
            raise PuzzleFormatError("Puzzle response is not valid JSON") from exc
        if not isinstance(data, dict):
            raise PuzzleFormatError("Puzzle response must be a JSON object")
        return data

    @staticmethod
    def _check_arguments(grid_size: int, word_count: int) -> None:
        if not MIN_GRID_SIZE <= grid_size <= MAX_GRID_SIZE:
            raise ValueError(
                f"grid_size must be between {MIN_GRID_SIZE} and {MAX_GRID_SIZE}, got {grid_size}"
            )
        if not MIN_WORD_COUNT <= word_count <= MAX_WORD_COUNT:
            raise ValueError(
                f"word_count must be between {MIN_WORD_COUNT} and {MAX_WORD_COUNT}, got {word_count}"
            )

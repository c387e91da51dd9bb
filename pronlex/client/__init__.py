from __future__ import annotations

from urllib.parse import quote

import httpx


class PronlexClient:
    def __init__(self, base_url: str = "http://localhost:8200", api_key: str | None = None, timeout: float = 30):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout

    def _headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.api_key}"} if self.api_key else {}

    def _word_url(self, spelling: str) -> str:
        return f"{self.base_url}/v1/words/{quote(spelling, safe='')}"

    def word(self, spelling: str) -> dict | None:
        """Fetch one word; None when the server reports it missing."""
        with httpx.Client(headers=self._headers(), timeout=self.timeout) as c:
            r = c.get(self._word_url(spelling))
            if r.status_code == 404:
                return None
            r.raise_for_status()
            return r.json()

    def fillers(self) -> list[dict]:
        with httpx.Client(headers=self._headers(), timeout=self.timeout) as c:
            r = c.get(f"{self.base_url}/v1/fillers")
            r.raise_for_status()
            return r.json()["words"]

    def status(self) -> dict:
        with httpx.Client(headers=self._headers(), timeout=self.timeout) as c:
            r = c.get(f"{self.base_url}/api/dictionary")
            r.raise_for_status()
            return r.json()

    def load(self) -> dict:
        with httpx.Client(headers=self._headers(), timeout=self.timeout) as c:
            r = c.post(f"{self.base_url}/api/dictionary/load")
            r.raise_for_status()
            return r.json()

    def unload(self) -> dict:
        with httpx.Client(headers=self._headers(), timeout=self.timeout) as c:
            r = c.delete(f"{self.base_url}/api/dictionary")
            r.raise_for_status()
            return r.json()

    async def async_word(self, spelling: str) -> dict | None:
        async with httpx.AsyncClient(headers=self._headers(), timeout=self.timeout) as c:
            r = await c.get(self._word_url(spelling))
            if r.status_code == 404:
                return None
            r.raise_for_status()
            return r.json()

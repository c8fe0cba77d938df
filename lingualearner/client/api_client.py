# Standard library imports
import logging
from typing import Any, Dict, List, Optional

# External package imports
import httpx

# Local application imports
from ..core.config import get_settings
from .session_store import TokenStore

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "An error occurred, please try again."


class ApiClientError(Exception):
    """Raised when the API answers with an error or cannot be reached"""

    def __init__(self, message: str = DEFAULT_ERROR_MESSAGE, status_code: Optional[int] = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)

    @classmethod
    def from_response(cls, response: httpx.Response) -> "ApiClientError":
        message = None
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            message = body.get("error") or body.get("message")
        return cls(str(message) if message else DEFAULT_ERROR_MESSAGE, response.status_code)


class LinguaApiClient:
    """
    Async HTTP client for the LinguaLearner API.

    Keeps the session token in a TokenStore: login stores it, logout and
    account deletion clear it, and every protected call sends it as a
    bearer header.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        token_store: Optional[TokenStore] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout: float = 10.0,
    ) -> None:
        self.base_url = (base_url or get_settings().api_base_url).rstrip("/")
        self.token_store = token_store or TokenStore()
        self._client = http_client or httpx.AsyncClient(base_url=self.base_url, timeout=timeout)

    async def __aenter__(self) -> "LinguaApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    # Auth

    async def register_user(self, name: str, email: str, password: str) -> Dict[str, Any]:
        return await self._request(
            "POST", "/register", json={"name": name, "email": email, "password": password}
        )

    async def login_user(self, email: str, password: str) -> Dict[str, Any]:
        data = await self._request("POST", "/login", json={"email": email, "password": password})
        token = data.get("token")
        if not token:
            raise ApiClientError("Login response did not include a token")
        self.token_store.set_token(token)
        logger.info("Session token stored")
        return data

    def logout_user(self) -> None:
        self.token_store.clear()
        logger.info("Session token cleared")

    def is_logged_in(self) -> bool:
        return self.token_store.is_logged_in()

    # Profile

    async def check_session(self) -> Dict[str, Any]:
        return await self._request("GET", "/user/check", auth=True)

    async def fetch_user_profile(self) -> Dict[str, Any]:
        return await self._request("GET", "/user/profile", auth=True)

    async def update_user_profile(self, **changes: Any) -> Dict[str, Any]:
        return await self._request("PUT", "/user/profile", auth=True, json=changes)

    async def delete_user_profile(self) -> Dict[str, Any]:
        data = await self._request("DELETE", "/user/profile", auth=True)
        self.token_store.clear()
        return data

    async def fetch_all_users(self) -> List[Dict[str, Any]]:
        return await self._request("GET", "/users", auth=True)

    # Posts

    async def create_post(self, title: str, content: str, img: Optional[str] = None) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"title": title, "content": content}
        if img:
            payload["img"] = img
        return await self._request("POST", "/posts", auth=True, json=payload)

    async def fetch_all_posts(self) -> List[Dict[str, Any]]:
        return await self._request("GET", "/posts", auth=True)

    async def fetch_post_details(self, post_id: str) -> Dict[str, Any]:
        return await self._request("GET", f"/posts/{post_id}", auth=True)

    async def like_post(self, post_id: str) -> Dict[str, Any]:
        return await self._request("POST", f"/posts/{post_id}/like", auth=True)

    async def unlike_post(self, post_id: str) -> Dict[str, Any]:
        return await self._request("DELETE", f"/posts/{post_id}/like", auth=True)

    async def toggle_like(self, post_id: str) -> Dict[str, Any]:
        return await self._request("PATCH", f"/posts/{post_id}/like", auth=True)

    # Comments

    async def add_comment(self, post_id: str, text: str) -> Dict[str, Any]:
        return await self._request("POST", f"/posts/{post_id}/comments", auth=True, json={"text": text})

    async def update_comment(self, post_id: str, comment_id: str, text: str) -> Dict[str, Any]:
        return await self._request(
            "PUT", f"/posts/{post_id}/comments/{comment_id}", auth=True, json={"text": text}
        )

    async def delete_comment(self, post_id: str, comment_id: str) -> Dict[str, Any]:
        return await self._request("DELETE", f"/posts/{post_id}/comments/{comment_id}", auth=True)

    async def fetch_comments(self, post_id: str) -> Dict[str, Any]:
        return await self._request("GET", f"/posts/{post_id}/comments", auth=True)

    async def _request(
        self,
        method: str,
        path: str,
        auth: bool = False,
        json: Optional[Dict[str, Any]] = None,
    ) -> Any:
        headers: Dict[str, str] = {}
        if auth:
            token = self.token_store.get_token()
            if token:
                headers["Authorization"] = f"Bearer {token}"

        try:
            response = await self._client.request(method, path, json=json, headers=headers)
        except httpx.TimeoutException:
            logger.error(f"Timeout calling {method} {path}")
            raise ApiClientError()
        except httpx.HTTPError as e:
            logger.error(f"HTTP error calling {method} {path}: {e}")
            raise ApiClientError()

        if response.is_error:
            error = ApiClientError.from_response(response)
            logger.warning(f"{method} {path} failed: {response.status_code} - {error.message}")
            raise error

        try:
            return response.json()
        except ValueError:
            raise ApiClientError(status_code=response.status_code)

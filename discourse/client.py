import logging
from typing import Optional, Union
from urllib.parse import quote

import requests

import config
from .errors import DecodeError, HttpStatusError, TransportError
from .models import Badge, ClientConfig, Post, User

logger = logging.getLogger(__name__)

# Same characters encodeURIComponent leaves alone
_SAFE_CHARS = "-_.!~*'()"


def encode_component(value) -> str:
    return quote(str(value), safe=_SAFE_CHARS)


def build_query(params: list[tuple[str, object]]) -> str:
    return "&".join(f"{key}={encode_component(value)}" for key, value in params)


class DiscourseClient:
    def __init__(
        self,
        client_config: ClientConfig,
        session: Optional[requests.Session] = None,
    ):
        self.config = client_config
        self.base_url = client_config.base_url
        self.timeout = client_config.timeout
        self._owns_session = session is None
        self.session = session or requests.Session()
        self.session.headers.update({
            "User-Agent": config.USER_AGENT,
            "Accept": "application/json",
            "Api-Username": client_config.api_username,
            "Api-Key": client_config.api_key,
        })

    def __enter__(self) -> "DiscourseClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _request(
        self,
        method: str,
        path: str,
        context: str,
        query: Optional[list[tuple[str, object]]] = None,
    ):
        url = f"{self.base_url}{path}"
        if query:
            url = f"{url}?{build_query(query)}"

        headers = {}
        if method == "POST":
            # Parameters travel in the query string, the body stays empty
            headers["Content-Type"] = "application/x-www-form-urlencoded"
            headers["Content-Length"] = "0"

        try:
            response = self.session.request(
                method,
                url,
                headers=headers,
                timeout=self.timeout,
                allow_redirects=False,
            )
        except requests.RequestException as e:
            logger.error("Request failed when %s: %s", context, e)
            raise TransportError(e, context) from e

        if response.status_code != config.SUCCESS_STATUS:
            logger.warning("Unexpected response when %s", context)
            logger.warning(
                "Expected 200 OK, but got %s %s", response.status_code, response.reason
            )
            raise HttpStatusError(
                response.status_code, response.reason or "", response.text, context
            )

        try:
            payload = response.json()
        except ValueError as e:
            logger.warning("Response when %s was not valid JSON", context)
            raise DecodeError(f"Invalid JSON: {e}", response.text, context) from e

        logger.debug("%s %s -> %s", method, path, response.status_code)
        return payload

    def get_user(self, username: str) -> User:
        return self._request(
            "GET",
            f"/users/{encode_component(username)}.json",
            f"getting user {username}",
        )

    def get_badge(self, badge_name: str) -> Optional[Badge]:
        """Find a badge by name, ignoring case. Returns None when no badge matches."""
        context = f"getting badge info for {badge_name}"
        data = self._request("GET", "/badges.json", context)

        badges = data.get("badges") if isinstance(data, dict) else None
        if not isinstance(badges, list):
            logger.warning("No badges list in response when %s", context)
            raise DecodeError("Response has no 'badges' list", None, context)

        wanted = badge_name.lower()
        for badge in badges:
            name = badge.get("name") if isinstance(badge, dict) else None
            if isinstance(name, str) and name.lower() == wanted:
                return badge
        return None

    def grant_badge(self, username: str, badge_id: Union[int, str]) -> Post:
        return self._request(
            "POST",
            "/user_badges.json",
            f"granting badge {badge_id} to {username}",
            query=[("badge_id", badge_id), ("username", username)],
        )

    def send_message(self, username: str, title: str, message: str) -> Post:
        """Send a private message to a single user."""
        return self._request(
            "POST",
            "/posts.json",
            f"notifying user {username}",
            query=[
                ("archetype", "private_message"),
                ("title", title),
                ("raw", message),
                ("target_usernames", username),
            ],
        )

    def verify(self) -> str:
        """Check connectivity and credentials by fetching the API user's record."""
        self.get_user(self.config.api_username)
        return config.VERIFIED

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

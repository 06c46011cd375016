"""OpenIM identity service client.

Talks to the OpenIM REST API with the shared admin secret. Every response
is an envelope ``{errCode, errMsg, errDlt, data}``; HTTP 200 with a
non-zero ``errCode`` is a refusal, which is returned to the caller rather
than raised here.
"""

import uuid

import httpx
import logfire
from pydantic import ValidationError

from desk.adapter.error import ProviderError
from desk.domain.service.identity_service import IdentityClient, IdentityClientError
from desk.domain.value import IdentityResponse, RemoteUser, UserTokenResponse

REGISTER_USER_PATH = "/user/user_register"
USER_TOKEN_PATH = "/auth/user_token"


class OpenIMError(ProviderError, IdentityClientError):
    """OpenIM transport or protocol error."""

    provider = "openim"


class OpenIMClient(IdentityClient):
    """Base class for OpenIM clients.

    Provides type distinction for dependency injection.
    """

    pass


class RealOpenIMClient(OpenIMClient):
    """OpenIM client over HTTP."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize OpenIM client.

        Args:
            base_url: API base URL, e.g. http://127.0.0.1:10002
            timeout: Per-request timeout in seconds
            transport: Optional httpx transport (tests)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    async def register_user(
        self, secret: str, users: list[RemoteUser]
    ) -> IdentityResponse:
        """Register users with OpenIM.

        Raises:
            OpenIMError: On network, HTTP status or decoding failure
        """
        body = {
            "secret": secret,
            "users": [user.model_dump(by_alias=True) for user in users],
        }
        data = await self._post(REGISTER_USER_PATH, body)
        return self._parse(IdentityResponse, data)

    async def get_user_token(
        self, secret: str, user_id: str, platform_id: int
    ) -> UserTokenResponse:
        """Fetch a user token from OpenIM.

        Raises:
            OpenIMError: On network, HTTP status or decoding failure
        """
        body = {
            "secret": secret,
            "platformID": platform_id,
            "userID": user_id,
        }
        data = await self._post(USER_TOKEN_PATH, body)
        return self._parse(UserTokenResponse, data)

    async def _post(self, path: str, body: dict) -> dict:
        """POST a JSON body and return the decoded JSON response.

        Raises:
            OpenIMError: On network, HTTP status or decoding failure
        """
        url = f"{self.base_url}{path}"
        # OpenIM rejects requests without an operation id
        headers = {"operationID": uuid.uuid4().hex}

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self.transport
            ) as client:
                response = await client.post(url, json=body, headers=headers)

                if response.status_code != 200:
                    logfire.error(
                        "OpenIM request failed",
                        path=path,
                        status_code=response.status_code,
                        error=response.text,
                    )
                    raise OpenIMError(
                        f"OpenIM {path} failed: {response.status_code}"
                    )

                return response.json()

        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logfire.error("OpenIM HTTP error", path=path, error=str(e))
            raise OpenIMError(f"HTTP error calling OpenIM {path}: {e}")
        except ValueError as e:
            logfire.error("OpenIM returned invalid JSON", path=path, error=str(e))
            raise OpenIMError(f"Invalid JSON from OpenIM {path}")

    @staticmethod
    def _parse(model, data: dict):
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise OpenIMError(f"Unexpected OpenIM response: {e}")


class MockOpenIMClient(OpenIMClient):
    """Mock OpenIM client for testing.

    Keeps registered users in memory and returns deterministic tokens.
    Set ``register_err_code`` / ``token_err_code`` to simulate refusals and
    ``fail_transport`` to simulate network failures.
    """

    def __init__(self) -> None:
        """Initialize mock client without real OpenIM configuration."""
        self.registered: dict[str, RemoteUser] = {}
        self.register_calls: list[list[RemoteUser]] = []
        self.register_err_code = 0
        self.token_err_code = 0
        self.fail_transport = False

    async def register_user(
        self, secret: str, users: list[RemoteUser]
    ) -> IdentityResponse:
        """Record the users unless a failure is configured."""
        self.register_calls.append(list(users))
        if self.fail_transport:
            raise OpenIMError("mock transport failure")
        if self.register_err_code:
            return IdentityResponse(
                err_code=self.register_err_code, err_msg="mock registration refused"
            )
        for user in users:
            self.registered[user.user_id] = user
        return IdentityResponse()

    async def get_user_token(
        self, secret: str, user_id: str, platform_id: int
    ) -> UserTokenResponse:
        """Return a mock token for registered users."""
        if self.fail_transport:
            raise OpenIMError("mock transport failure")
        if self.token_err_code:
            return UserTokenResponse(
                err_code=self.token_err_code, err_msg="mock token refused"
            )
        if user_id not in self.registered:
            return UserTokenResponse(err_code=1004, err_msg="record not found")
        return UserTokenResponse(
            data={
                "token": f"mock-im-token-{user_id}-{platform_id}",
                "expireTimeSeconds": 7776000,
            }
        )

# qbitclient/api/auth.py
import logging

from ..base import APINames, AuthenticationError, BaseClient

logger = logging.getLogger(__name__)

SESSION_COOKIE = "SID"


class AuthAPI(BaseClient):
    async def login(self, username: str, password: str) -> None:
        """
        Authenticates and stores the session cookie.

        The matching Set-Cookie value is kept verbatim (attributes included) and
        sent back as the Cookie header on every later request.

        Raises:
            AuthenticationError: The server answered but issued no session
                (qBittorrent replies "200 Fails." to bad credentials)
            APIError: Non-2xx status, e.g. 403 once the IP is banned
        """
        envelope = await self.call_method(
            APINames.auth,
            "login",
            method="POST",
            data={"username": username, "password": password},
        )
        cookie = next(
            (c for c in envelope.headers.get_list("set-cookie") if c.startswith(f"{SESSION_COOKIE}=")),
            None,
        )
        if cookie is not None:
            self.auth_cookie = cookie
            logger.info("Logged in to %s as %s", self.origin, username)
            return

        if envelope.text.strip() == "Ok.":
            # Auth bypassed for this client (localhost/whitelisted subnet); no session needed
            logger.debug("Login to %s accepted without a session cookie", self.origin)
            return

        logger.warning("Login to %s did not return a session cookie", self.origin)
        raise AuthenticationError(envelope.status_code, envelope.text)

    async def logout(self) -> None:
        """Ends the session server-side, then forgets the local cookie."""
        await self.call_method(APINames.auth, "logout", method="POST")
        self.auth_cookie = None
        logger.info("Logged out of %s", self.origin)

    @property
    def is_logged_in(self) -> bool:
        return bool(self.auth_cookie and self.auth_cookie.strip())


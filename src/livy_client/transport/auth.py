"""
Auth adapter: resolves AuthSettings into an httpx.Auth for the transport.

SPNEGO negotiation is delegated to httpx-gssapi (the `kerberos` extra).
A basic-auth password is never passed in by callers; it is looked up in the
user's netrc file for the target host.
"""

import logging
import netrc
from typing import Optional

import httpx

from livy_client.transport.request import AuthSettings

logger = logging.getLogger(__name__)


def spnego_auth() -> httpx.Auth:
    try:
        from httpx_gssapi import OPTIONAL, HTTPSPNEGOAuth
    except ImportError as e:
        raise ImportError("negotiate_auth requires extras: pip install livy-client[kerberos]") from e
    return HTTPSPNEGOAuth(mutual_authentication=OPTIONAL)


def netrc_password(host: str, username: str, netrc_file: Optional[str] = None) -> str:
    """Password for `username` at `host` from netrc, or "" if there is none."""
    try:
        entry = netrc.netrc(netrc_file).authenticators(host)
    except FileNotFoundError:
        return ""
    except (OSError, netrc.NetrcParseError) as e:
        logger.warning("Cannot read netrc for %s, sending empty password: %s", host, e)
        return ""
    if entry is None:
        return ""
    login, _account, password = entry
    if login != username:
        logger.debug("netrc login for %s does not match %s, sending empty password", host, username)
        return ""
    return password or ""


def build_auth(settings: AuthSettings, host: str, netrc_file: Optional[str] = None) -> Optional[httpx.Auth]:
    if settings.negotiate:
        return spnego_auth()
    if settings.username is not None:
        return httpx.BasicAuth(settings.username, netrc_password(host, settings.username, netrc_file))
    return None

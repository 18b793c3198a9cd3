"""
Credentials accepted by api.authenticate.

An organization can be addressed either by its organization token or by a
portal user's username/password. The two are separate types so the client
never has to guess which one it was handed.
"""
from dataclasses import dataclass, field
from typing import Dict


@dataclass(frozen=True)
class UserCredentials:
    """Portal username and password"""
    username: str = ""
    password: str = field(default="", repr=False)

    def is_empty(self) -> bool:
        return not self.username and not self.password

    def to_params(self) -> Dict[str, str]:
        return {"username": self.username, "password": self.password}


@dataclass(frozen=True)
class OrganizationToken:
    """Organization token issued by the portal"""
    token: str = field(default="", repr=False)

    def is_empty(self) -> bool:
        return not self.token

    def to_params(self) -> Dict[str, str]:
        return {"organizationToken": self.token}

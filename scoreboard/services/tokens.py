"""Invite tokens for tokenized registration"""
import logging
import secrets
import time
from typing import Dict, Iterable, List

from scoreboard.models import InviteToken


logger = logging.getLogger(__name__)

TOKEN_BYTES = 5  # 10 hex chars, matches ^\w+$


class TokenService:
    """Single-use registration tokens"""

    def __init__(self, tokens: Iterable[str] = ()):
        self._tokens: Dict[str, InviteToken] = {}
        for token in tokens:
            self._tokens[token] = InviteToken(token=token)

    def generate(self, count: int = 1) -> List[InviteToken]:
        """Issue `count` new unused tokens"""
        if count < 1:
            raise ValueError("count must be positive")
        created = []
        while len(created) < count:
            value = secrets.token_hex(TOKEN_BYTES)
            if value in self._tokens:
                continue
            token = InviteToken(token=value)
            self._tokens[value] = token
            created.append(token)
        logger.info(f"🎟️  Generated {count} invite token(s)")
        return created

    def check(self, token: str) -> bool:
        """True if the token exists and has not been used"""
        entry = self._tokens.get(token)
        return entry is not None and not entry.used

    def use(self, token: str, team_id: int) -> InviteToken:
        """Mark a token consumed by `team_id`"""
        entry = self._tokens[token]
        if entry.used:
            raise ValueError(f"Token already used by team {entry.team_id}")
        entry.used = True
        entry.team_id = team_id
        entry.use_ts = time.time()
        return entry

    def delete(self, token: str) -> bool:
        return self._tokens.pop(token, None) is not None

    def all_tokens(self) -> List[InviteToken]:
        return list(self._tokens.values())

"""Team logo catalogue"""
import random
from typing import Dict, Iterable, List

from scoreboard.models import Logo


class LogoService:
    def __init__(self, names: Iterable[str] = ()):
        self._logos: Dict[str, Logo] = {name: Logo(name=name) for name in names}

    def check_exists(self, name: str) -> bool:
        """Only enabled logos can be picked"""
        logo = self._logos.get(name)
        return logo is not None and logo.enabled

    def random_logo(self) -> str:
        enabled = [logo.name for logo in self._logos.values() if logo.enabled]
        if not enabled:
            raise LookupError("No enabled logos configured")
        return random.choice(enabled)

    def set_enabled(self, name: str, enabled: bool) -> Logo:
        """
        Raises:
            KeyError: unknown logo
            ValueError: disabling the last enabled logo
        """
        logo = self._logos[name]
        if not enabled and logo.enabled and sum(l.enabled for l in self._logos.values()) == 1:
            raise ValueError("At least one logo must stay enabled")
        logo.enabled = enabled
        return logo

    def all_logos(self) -> List[Logo]:
        return list(self._logos.values())

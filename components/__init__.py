"""components — Plain state dataclasses.

Submodules
----------
actors     Player, Enemy
dev_log    DevLog

All public names are re-exported here so callers can write
``from components import Enemy``.
"""

from components.actors import Player, Enemy
from components.dev_log import DevLog

__all__ = ["Player", "Enemy", "DevLog"]

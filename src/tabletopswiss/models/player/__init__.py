from tabletopswiss.models.player.player import Player

__all__ = ["Player"]

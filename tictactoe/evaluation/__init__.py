"""Head-to-head play between agents."""

from .match import MatchResult, play_game, play_match

__all__ = ["MatchResult", "play_game", "play_match"]

"""Per-team score ledger."""

from literature_engine.errors import InvariantViolation
from literature_engine.models.card import Variant
from literature_engine.models.pit import Pit, pits_for
from literature_engine.models.seat import Team


class ScoreLedger:
    """Pits credited to each team, by drop or by the other team's burn."""

    def __init__(self, variant: Variant):
        self.variant = variant
        self.total_pits = len(pits_for(variant))
        self._pits: dict[Team, list[Pit]] = {Team.A: [], Team.B: []}

    def credit(self, team: Team, pit: Pit) -> None:
        """Credit a resolved pit to a team.

        Raises:
            InvariantViolation: If the pit was already credited or is not
                part of the variant.
        """
        if pit not in pits_for(self.variant):
            raise InvariantViolation(f"Pit {pit} is not played in {self.variant.value}")
        if any(pit in pits for pits in self._pits.values()):
            raise InvariantViolation(f"Pit {pit} was already credited")
        self._pits[team].append(pit)

    def score_of(self, team: Team) -> int:
        return len(self._pits[team])

    def pits_of(self, team: Team) -> list[Pit]:
        return list(self._pits[team])

    @property
    def resolved(self) -> int:
        """Number of pits resolved so far."""
        return sum(len(pits) for pits in self._pits.values())

    def is_resolved(self, pit: Pit) -> bool:
        return any(pit in pits for pits in self._pits.values())

    def is_game_over(self) -> bool:
        return self.resolved == self.total_pits

    def winner(self) -> Team | None:
        """Get the winning team.

        Returns:
            The team with more pits, or None for a draw or an unfinished game.
        """
        if not self.is_game_over():
            return None
        a, b = self.score_of(Team.A), self.score_of(Team.B)
        if a == b:
            return None
        return Team.A if a > b else Team.B

    def as_dict(self) -> dict[str, int]:
        return {team.value: self.score_of(team) for team in Team}

"""Session tracker for generated and rated tickets."""

from powerball_rater.constants import TOTAL_COMBINATIONS
from powerball_rater.schemas.ticket import Leaderboard, SessionStats, Ticket

SORT_MODES = ("newest", "hot", "cold")


def get_ticket_key(ticket: Ticket) -> str:
    """Canonical combination key, e.g. ``"4,11,33,54,62-7"``."""
    whites = ",".join(str(n) for n in sorted(ticket.white_balls))
    return f"{whites}-{ticket.powerball}"


class TicketSession:
    """Append-only ticket log with unique-combination tracking."""

    def __init__(self):
        self._tickets: list[Ticket] = []
        self._unique: set[str] = set()

    def add_ticket(self, ticket: Ticket) -> None:
        self._tickets.append(ticket)
        self._unique.add(get_ticket_key(ticket))

    def add_tickets(self, tickets: list[Ticket]) -> None:
        for ticket in tickets:
            self.add_ticket(ticket)

    @property
    def total_count(self) -> int:
        return len(self._tickets)

    @property
    def unique_count(self) -> int:
        return len(self._unique)

    @property
    def coverage(self) -> str:
        """Readable coverage, e.g. ``"5 of 292,201,338"``."""
        return f"{self.unique_count:,} of {TOTAL_COMBINATIONS:,}"

    def all_tickets(self) -> list[Ticket]:
        return list(self._tickets)

    def sorted_tickets(self, mode: str = "newest") -> list[Ticket]:
        """Tickets for display: newest first, or by average strength."""
        if mode not in SORT_MODES:
            raise ValueError(f"Unknown sort mode: {mode}. Valid: {SORT_MODES}")
        if mode == "hot":
            return sorted(self._tickets, key=lambda t: t.probabilities.average_strength, reverse=True)
        if mode == "cold":
            return sorted(self._tickets, key=lambda t: t.probabilities.average_strength)
        return list(reversed(self._tickets))

    def leaderboard(self) -> Leaderboard:
        """Hottest and coldest tickets so far; earliest wins ties."""
        hottest = coldest = None
        for ticket in self._tickets:
            strength = ticket.probabilities.average_strength
            if hottest is None or strength > hottest.probabilities.average_strength:
                hottest = ticket
            if coldest is None or strength < coldest.probabilities.average_strength:
                coldest = ticket
        return Leaderboard(hottest=hottest, coldest=coldest)

    def stats(self) -> SessionStats:
        return SessionStats(
            total_tickets=self.total_count,
            unique_combinations=self.unique_count,
            coverage=self.coverage,
            total_possible=TOTAL_COMBINATIONS,
        )

    def reset(self) -> None:
        self._tickets.clear()
        self._unique.clear()

"""
Display region state.

A display region is one output pane of the UI. Its state is a single tagged
value: idle, loading, or showing exactly one Outcome.
"""

import logging
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from ..schemas.outcome import Outcome


logger = logging.getLogger("api_composer.display")


class IdleView(BaseModel):
    kind: Literal["idle"] = "idle"


class LoadingView(BaseModel):
    kind: Literal["loading"] = "loading"
    ticket: int


class ShowingView(BaseModel):
    kind: Literal["showing"] = "showing"
    ticket: int
    outcome: Outcome


RegionView = Annotated[
    Union[IdleView, LoadingView, ShowingView],
    Field(discriminator="kind"),
]


class DisplayRegion:
    """
    Output pane fed by overlapping submissions.

    Each submission takes a ticket from ``begin``. Only the most recent
    ticket may write its outcome; results from older submissions that
    resolve later are dropped.
    """

    def __init__(self) -> None:
        self._latest_ticket = 0
        self.view: RegionView = IdleView()

    @property
    def latest_ticket(self) -> int:
        return self._latest_ticket

    def begin(self) -> int:
        """Clear the region, show the busy state and return a new ticket."""
        self._latest_ticket += 1
        self.view = LoadingView(ticket=self._latest_ticket)
        return self._latest_ticket

    def resolve(self, ticket: int, outcome: Outcome) -> bool:
        """
        Show an outcome if it belongs to the latest submission.

        Returns:
            True if the outcome was shown, False if it was stale
        """
        if ticket != self._latest_ticket:
            logger.debug("Discarding stale outcome ticket=%s latest=%s", ticket, self._latest_ticket)
            return False
        self.view = ShowingView(ticket=ticket, outcome=outcome)
        return True

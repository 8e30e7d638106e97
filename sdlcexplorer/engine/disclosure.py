"""
DisclosureStore - The story modal and the pitfall accordion.

One modal slot (the "What Went Wrong?" narrative) and one expanded drawback
at a time. The modal is a single Optional payload, so an open modal always
has something to show.
"""

from typing import Optional

from sdlcexplorer.schemas import DisclosureState, DrawbackId, ModalPayload, TypeStory


def story_payload(story: TypeStory) -> ModalPayload:
    """Build the modal payload for a type story's failure/fix narrative."""
    return ModalPayload(
        title=story.name,
        failure_text=story.story.failure,
        fix_text=story.story.fix,
        color=story.color,
    )


class DisclosureStore:
    def __init__(self):
        self.modal: Optional[ModalPayload] = None
        self.expanded_drawback_id: Optional[DrawbackId] = None

    @property
    def modal_open(self) -> bool:
        return self.modal is not None

    @property
    def state(self) -> DisclosureState:
        return DisclosureState(modal=self.modal, expanded_drawback_id=self.expanded_drawback_id)

    def open_modal(self, payload: ModalPayload):
        """Show payload, replacing whatever was open."""
        self.modal = payload

    def close_modal(self):
        self.modal = None

    def toggle_drawback(self, drawback_id: DrawbackId) -> Optional[DrawbackId]:
        """
        Collapse drawback_id if it is expanded, otherwise expand it alone.

        Returns the expanded id after the toggle.
        """
        if self.expanded_drawback_id == drawback_id:
            self.expanded_drawback_id = None
        else:
            self.expanded_drawback_id = drawback_id
        return self.expanded_drawback_id

    def is_expanded(self, drawback_id: DrawbackId) -> bool:
        if isinstance(drawback_id, bool) or self.expanded_drawback_id is None:
            return False
        return self.expanded_drawback_id == drawback_id

    def reset(self):
        self.modal = None
        self.expanded_drawback_id = None

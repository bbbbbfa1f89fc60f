"""Submit feedback workflow.

Updates:
    v0.1.0 - 2026-10-12 - Added submission workflow that reports to a renderer.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..core.renderer import Renderer
from ..services.intake_service import FeedbackIntakeService


@dataclass
class SubmitFeedbackWorkflow:
    intake_service: FeedbackIntakeService
    renderer: Renderer | None = None
    name: str = "submit_feedback"

    def run(self, context: dict) -> dict:
        """Analyze and store a submission, then render the result and history.

        Args:
            context (dict): Payload with `text`, `category`, `priority` and an
                optional `render` flag (default true).

        Returns:
            dict: The stored record as `record` (wire representation).

        Raises:
            ValidationError: If the submission is incomplete or invalid.
        """

        record = self.intake_service.submit(
            context.get("text"),
            context.get("category"),
            context.get("priority"),
        )
        if self.renderer is not None and context.get("render", True):
            self.renderer.render_result(record)
            self.renderer.render_history(self.intake_service.history.list())
        return {"record": record.as_dict()}

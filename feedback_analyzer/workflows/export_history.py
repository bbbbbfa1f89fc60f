"""Export history workflow.

Updates:
    v0.1.0 - 2026-10-12 - Added export workflow writing the snapshot file.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..services.history_store import HistoryStore


@dataclass
class ExportHistoryWorkflow:
    history: HistoryStore
    name: str = "export_history"

    def run(self, context: dict) -> dict:
        """Snapshot the history and optionally write it to disk.

        Args:
            context (dict): Payload with an optional `output_dir`. Without it,
                nothing is written and only the serialized snapshot is returned.

        Returns:
            dict: `filename`, `media_type`, `total_feedback`, `content` and,
            when written, `path`.

        Raises:
            EmptyHistory: If the history holds no records.
        """

        snapshot = self.history.export()
        content = snapshot.to_json()
        result = {
            "filename": snapshot.filename,
            "media_type": snapshot.media_type,
            "total_feedback": snapshot.total_feedback,
            "content": content,
        }
        output_dir = context.get("output_dir")
        if output_dir is not None:
            directory = Path(output_dir)
            directory.mkdir(parents=True, exist_ok=True)
            path = directory / snapshot.filename
            path.write_bytes(snapshot.to_bytes())
            result["path"] = str(path)
        return result

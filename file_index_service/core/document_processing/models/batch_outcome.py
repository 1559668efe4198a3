"""
Batch outcome model.

Collects the messages that must be redelivered and renders the Lambda
``ReportBatchItemFailures`` response. Messages absent from the outcome are
acknowledged by the queue.

Dependencies: pydantic
System role: Queue transport contract (outbound side)
"""

import threading

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr


class BatchItemFailure(BaseModel):
    """A message the queue must redeliver."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    item_identifier: str = Field(..., alias="itemIdentifier")


class BatchOutcome(BaseModel):
    """Failed messages of one delivery batch, at most one entry per message ID."""

    model_config = ConfigDict(populate_by_name=True)

    batch_item_failures: list[BatchItemFailure] = Field(
        default_factory=list,
        alias="batchItemFailures",
    )

    _lock: threading.Lock = PrivateAttr(default_factory=threading.Lock)

    def add_failure(self, message_id: str) -> bool:
        """
        Record a failed message. Safe to call from worker threads.

        Args:
            message_id: SQS message ID

        Returns:
            bool: False if the message was already recorded
        """
        with self._lock:
            if any(f.item_identifier == message_id for f in self.batch_item_failures):
                return False
            self.batch_item_failures.append(BatchItemFailure(item_identifier=message_id))
            return True

    @property
    def failed_ids(self) -> set[str]:
        """Identifiers of all failed messages."""
        return {f.item_identifier for f in self.batch_item_failures}

    def to_response(self) -> dict:
        """Render the Lambda batch response."""
        return self.model_dump(by_alias=True)

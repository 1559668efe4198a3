"""
SQS event schema for document indexing.

Validates the Lambda SQS event envelope and exposes each record as an
InboundMessage. The message body is a document identifier (or a URL to the
document) and is validated separately by the event parser.

Dependencies: pydantic
System role: Queue transport contract (inbound side)
"""

from pydantic import BaseModel, ConfigDict, Field


class InboundMessage(BaseModel):
    """One queue delivery: message ID plus an untrusted body."""

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "id": "059f36b4-87a3-44ab-83d2-661975830a7d",
                "body": "1027384",
            }
        },
    )

    id: str = Field(..., description="SQS message ID (batch item identifier)")
    body: str = Field(..., description="Document identifier or document URL")

    @classmethod
    def from_sqs_record(cls, record: "SQSRecord") -> "InboundMessage":
        """Create message from an SQS record."""
        return cls(id=record.messageId, body=record.body)


class SQSRecord(BaseModel):
    """Single SQS record wrapper."""

    model_config = ConfigDict(extra="ignore")

    messageId: str
    receiptHandle: str = ""
    body: str = ""
    attributes: dict = {}
    messageAttributes: dict = {}
    md5OfBody: str = ""
    eventSource: str = "aws:sqs"
    eventSourceARN: str = ""
    awsRegion: str = ""


class SQSEvent(BaseModel):
    """Complete SQS Lambda event."""

    Records: list[SQSRecord] = Field(default_factory=list)

    def messages(self) -> list[InboundMessage]:
        """Return the records as inbound messages, in delivery order."""
        return [InboundMessage.from_sqs_record(record) for record in self.Records]

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass(slots=True)
class ToolResult:
    """Outcome returned to the host for every invocation.

    ``content`` holds text blocks shown to the model; ``details`` carries
    structured metadata. Errors set ``details["error"]`` to True.
    """

    content: List[Dict[str, str]] = field(default_factory=list)
    details: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def ok(cls, text: str, **details: Any) -> "ToolResult":
        return cls(content=[{"type": "text", "text": text}], details=dict(details))

    @classmethod
    def fail(cls, text: str, message: str, *, code: str) -> "ToolResult":
        return cls(
            content=[{"type": "text", "text": text}],
            details={"error": True, "message": message, "code": code},
        )

    @property
    def is_error(self) -> bool:
        return bool(self.details.get("error"))

    @property
    def text(self) -> str:
        return "\n".join(block.get("text", "") for block in self.content)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "content": [dict(block) for block in self.content],
            "details": dict(self.details),
        }

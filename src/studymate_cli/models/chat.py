"""Chat message model and the built-in assistant catalog."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Literal

Sender = Literal["user", "assistant"]

DEFAULT_GREETING = (
    "مرحباً! أنا مساعدك الذكي في التعلم. يمكنني مساعدتك في فهم ومراجعة دروسك. "
    "كيف يمكنني مساعدتك اليوم؟"
)

DEFAULT_QUICK_PROMPTS = (
    "اشرح لي درس الرياضيات الأخير",
    "ما هي قواعد اللغة الإنجليزية المهمة؟",
    "أريد مراجعة درس العلوم",
    "كيف أحل هذه المسألة؟",
)

DEFAULT_REPLIES = (
    "هذا سؤال ممتاز! دعني أساعدك في فهم هذا الموضوع بطريقة مبسطة...",
    "بناءً على تقدمك في الدراسة، أنصحك بالتركيز على هذه النقاط الأساسية...",
    "لفهم هذا الدرس بشكل أفضل، يمكننا تقسيمه إلى خطوات بسيطة...",
    "ممتاز! هذا يظهر أنك تفهم المفاهيم الأساسية. دعنا نتعمق أكثر...",
    "أرى أنك تحتاج لمراجعة هذا الموضوع. سأقدم لك شرحاً مفصلاً...",
)


@dataclass(frozen=True)
class ChatMessage:
    """A single entry in the chat timeline."""

    id: int
    text: str
    sender: Sender
    timestamp: datetime

    @property
    def from_user(self) -> bool:
        return self.sender == "user"

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        data = asdict(self)
        data["timestamp"] = self.timestamp.isoformat()
        return data

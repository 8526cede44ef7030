from dataclasses import dataclass
from typing import Dict, Optional


@dataclass(frozen=True)
class NewsUpdate:
    """Scalar columns to overwrite on a news row; None means leave untouched."""
    title: Optional[str] = None
    content: Optional[str] = None

    def values(self) -> Dict[str, str]:
        values = {}
        if self.title is not None:
            values["title"] = self.title
        if self.content is not None:
            values["content"] = self.content
        return values

    def is_empty(self) -> bool:
        return not self.values()

from dataclasses import dataclass, field
from typing import List


@dataclass
class ValidationResponse:
    message: str = "Validation Failed"
    errors: List[str] = field(default_factory=list)

import json, sys
from typing import Any, Dict, Optional, TextIO
from ..ports.presenter import Presenter

class JsonPresenter(Presenter):
    """Writes a boundary summary as one JSON document."""
    def __init__(self, out: Optional[TextIO] = None, indent=None):
        self.out = out
        self.indent = indent

    def render(self, result: Dict[str, Any]) -> None:
        out = self.out or sys.stdout
        out.write(json.dumps(result, default=str, ensure_ascii=False, indent=self.indent))
        out.write("\n")

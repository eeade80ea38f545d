"""Response Classes — JSON rendering shared by routes and error handlers."""

import json
from typing import Any

from fastapi.responses import JSONResponse

from app.config import get_settings


class PrettyJSONResponse(JSONResponse):
    """JSONResponse that indents output when settings.pretty_json is on."""

    def render(self, content: Any) -> bytes:
        if not get_settings().pretty_json:
            return super().render(content)
        return json.dumps(
            content, ensure_ascii=False, allow_nan=False, indent=2,
        ).encode("utf-8")

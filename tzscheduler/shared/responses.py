"""Response envelope shared by every operation: ``{success, data?}``"""

from typing import Any, Optional


def success(data: Optional[dict[str, Any]] = None) -> dict[str, Any]:
    if data is None:
        return {"success": True}
    return {"success": True, "data": data}


def failure(error: dict[str, Any]) -> dict[str, Any]:
    return {"success": False, "error": error}

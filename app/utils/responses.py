# app/utils/responses.py
from typing import Any, Dict, Optional

def create_error_response(
    message: str,
    details: Optional[str] = None,
    example: Optional[str] = None
) -> Dict[str, Any]:
    """Create a detailed error response"""
    response = {
        "message": message,
        "details": details if details else message
    }
    if example:
        response["example"] = example
    return response

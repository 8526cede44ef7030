from typing import Dict, Any


def build_error_response(error_message: str) -> Dict[str, Any]:
    return {
        "Success": False,
        "Error": error_message,
    }

# src/token_check/json_output.py

import json
from typing import Dict, List

from .analyzer import AnalysisResult

TOOL_NAME = "token-check"
VERSION = "0.3.0"


def to_json(data, pretty=False):
    """Convert result dict into JSON string."""
    if pretty:
        return json.dumps(data, indent=4, ensure_ascii=False)
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)


def wrap_json_response(action: str, success: bool, errors=None, warnings=None, details=None) -> Dict:
    return {
        "tool": TOOL_NAME,
        "version": VERSION,
        "action": action,
        "success": success,
        "errors": errors or [],
        "warnings": warnings or [],
        "details": details or {},
    }


def analysis_response(action: str, results: List[AnalysisResult], tokens: List[str] = None) -> Dict:
    """
    Envelope for one or more analyses. Empty and unevaluable tokens are
    reported as warnings, never as errors.
    """
    warnings = []
    items = []
    for idx, result in enumerate(results):
        item = result.to_dict()
        if tokens is not None:
            item["token"] = tokens[idx]
        items.append(item)
        if not result.ok:
            warnings.append({
                "index": idx,
                "status": result.status,
                "message": result.notes[0] if result.notes else result.status,
            })

    return wrap_json_response(
        action=action,
        success=all(r.ok for r in results),
        warnings=warnings,
        details={"results": items},
    )

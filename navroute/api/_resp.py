# api/_resp.py
from typing import Any

from fastapi import HTTPException


def ok(data: Any = None, **extras):
    """Success envelope: {"status": "success", "data": ..., **extras}."""
    payload = {"status": "success"}
    if data is not None:
        payload["data"] = data
    if extras:
        payload.update(extras)
    return payload


def fail(status: int, message: str):
    raise HTTPException(status, detail={"status": "error", "message": message})


def not_found(kind: str, key: str):
    fail(404, f"{kind} '{key}' not found")

"""Formatting utilities for test report generation.

This module renders captured responses for display in pytest test reports.
"""

import json

from .response import CapturedResponse


def format_response(response: CapturedResponse) -> str:
    lines = [f"{response.http_version} {response.status_code} {response.reason}".rstrip()]

    for name, value in response.headers.raw_items():
        lines.append(f"{name}: {value}")

    # Empty line between headers and body
    lines.append("")

    if response.content:
        content_type = response.headers.first("Content-Type") or ""
        if "application/json" in content_type:
            try:
                lines.append(json.dumps(json.loads(response.content), indent=2, ensure_ascii=False))
            except (json.JSONDecodeError, UnicodeDecodeError):
                lines.append(response.text)
        else:
            try:
                lines.append(response.content.decode("utf-8"))
            except UnicodeDecodeError:
                lines.append(f"<Binary content: {len(response.content)} bytes>")

    return "\n".join(lines)

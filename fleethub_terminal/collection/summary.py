"""Markdown summary of a parsed collection."""

from __future__ import annotations

from datetime import datetime, timezone

from .parser import ParsedCollection


def render_summary(parsed: ParsedCollection, generated_at: datetime | None = None) -> str:
    if generated_at is None:
        generated_at = datetime.now(timezone.utc)
    elif generated_at.tzinfo is not None:
        generated_at = generated_at.astimezone(timezone.utc)
    # Millisecond precision with a Z suffix, as JavaScript toISOString() prints it
    stamp = generated_at.strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"

    lines = [
        "# Terminal API Summary",
        "",
        f"**Generated**: {stamp}",
        f"**Total Categories**: {len(parsed.categories)}",
        f"**Total Endpoints**: {len(parsed.endpoints)}",
        "",
        "---",
        "",
    ]

    for category in parsed.categories:
        lines += [f"## {category['name']}", ""]
        if category["description"]:
            lines += [category["description"], ""]
        lines += [f"**Endpoints**: {len(category['endpoints'])}", ""]

        for endpoint in category["endpoints"]:
            lines += [
                f"### {endpoint['name']}",
                "",
                f"- **Method**: `{endpoint['method']}`",
                f"- **Path**: `{endpoint['path']}`",
            ]
            if endpoint["description"]:
                lines.append(f"- **Description**: {endpoint['description']}")

            query = endpoint["parameters"]["query"]
            if query:
                lines += ["", "**Query Parameters**:"]
                for param in query:
                    required = " (required)" if param["required"] else ""
                    lines.append(f"- `{param['key']}`{required}: {param['description']}")

            path_params = endpoint["parameters"]["path"]
            if path_params:
                lines += ["", "**Path Parameters**:"]
                for param in path_params:
                    lines.append(f"- `{param['key']}`: {param['description']}")

            lines.append("")

        lines += ["---", ""]

    return "\n".join(lines) + "\n"

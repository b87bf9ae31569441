"""OpenAPI customization.

Adds the API key and user id header schemes, tag descriptions, and exempts
the health endpoint from authentication in the generated schema.
"""

from __future__ import annotations

from typing import Any, Dict

from fastapi import FastAPI

TAGS_METADATA = [
    {"name": "Questions", "description": "Browse and add practice questions."},
    {"name": "Responses", "description": "Store and list practice answers."},
    {"name": "Evaluation", "description": "AI scoring of answers against a rubric."},
    {"name": "Progress", "description": "Daily activity and per-skill summaries."},
    {"name": "Health", "description": "Liveness checks."},
]


def apply_openapi_customizations(app: FastAPI) -> None:
    """Patch FastAPI's OpenAPI generation to add security schemes and tags."""

    original_openapi = app.openapi

    def custom_openapi() -> Dict[str, Any]:
        if app.openapi_schema:
            return app.openapi_schema

        schema = original_openapi()

        security_schemes = schema.setdefault("components", {}).setdefault("securitySchemes", {})
        security_schemes.setdefault(
            "ApiKeyAuth",
            {
                "type": "apiKey",
                "in": "header",
                "name": "X-API-Key",
                "description": "Provide your API key via the X-API-Key header.",
            },
        )
        security_schemes.setdefault(
            "UserId",
            {
                "type": "apiKey",
                "in": "header",
                "name": "X-User-ID",
                "description": "UUID of the authenticated user, set by the auth gateway.",
            },
        )
        schema.setdefault("security", [{"ApiKeyAuth": [], "UserId": []}])

        tags = schema.setdefault("tags", [])
        existing = {t.get("name") for t in tags}
        tags.extend(tag for tag in TAGS_METADATA if tag["name"] not in existing)

        for path, methods in schema.get("paths", {}).items():
            if path.endswith("/health"):
                for method_obj in methods.values():
                    if isinstance(method_obj, dict):
                        method_obj["security"] = []

        app.openapi_schema = schema
        return schema

    app.openapi = custom_openapi  # type: ignore[assignment]

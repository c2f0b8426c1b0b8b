"""Draft-07 JSON Schemas for the MCP tool contracts."""

LIST_DEPENDENCIES_INPUT = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "properties": {
        "github_url": {
            "type": "string",
            "minLength": 1,
            "description": "The GitHub URL of the Python repository (e.g., https://github.com/user/repo)",
        },
    },
    "required": ["github_url"],
    "additionalProperties": False,
}

LIST_DEPENDENCIES_DESCRIPTION = (
    "Lists Python dependencies with license information and commercial use "
    "analysis from a GitHub repository"
)

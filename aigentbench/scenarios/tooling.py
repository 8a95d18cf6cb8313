"""Tools handed to benchmark agents."""

from __future__ import annotations

from typing import Any

from aigentbench.framework.types import Tool

SECRET_COMPANY_NAME = "Nexxia"

# Company number -> company name, looked up by the multi-agent chain coordinator
COMPANY_NAMES = {
    "1": "Nexxia",
    "2": "Aurora Analytics",
    "3": "Helios Robotics",
}


def new_secret_number_tool(require_approval: bool = False) -> Tool:
    """A tool that resolves any company number to the same secret name."""

    def lookup(args: dict[str, Any]) -> str:
        return SECRET_COMPANY_NAME

    return Tool(
        name="lookup_company_name",
        description="A tool that looks up the name of a company based on a company number",
        execute=lookup,
        input_schema={
            "type": "object",
            "properties": {
                "company_number": {
                    "type": "string",
                    "description": "The company number to lookup",
                },
            },
            "required": ["company_number"],
        },
        require_approval=require_approval,
    )


def new_company_name_tool() -> Tool:
    """A tool returning the company name registered under an expert's company number."""

    def company_name(args: dict[str, Any]) -> str:
        number = str(args.get("company_number", "")).strip()
        name = COMPANY_NAMES.get(number)
        if name is None:
            return f"no company registered under number {number!r}"
        return name

    return Tool(
        name="company_name",
        description="Returns the company name for a company number",
        execute=company_name,
        input_schema={
            "type": "object",
            "properties": {
                "company_number": {
                    "type": "string",
                    "description": "The company number of the expert",
                },
            },
            "required": ["company_number"],
        },
    )

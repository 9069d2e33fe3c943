"""Vercel MCP - Model Context Protocol tools for the Vercel REST API.

This package exposes Vercel deployments, domains, DNS, projects, teams and
users as MCP tools.

Modules:
- api: stateless HTTP transport (FastAPI)
- server: stdio MCP server implementation
- registry / tools: tool catalog
- handlers: per-resource tool implementations
- formatters: response formatting utilities
"""

__version__ = "1.0.0"

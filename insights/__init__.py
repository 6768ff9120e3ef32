"""
Zilliqa validator insights MCP server.
"""

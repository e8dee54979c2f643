from evernote_mcp.mcp_server.server import run

run()

from rules_kit_mcp.cli import main

main()

"""
Command-line layer.

Components:
- parser.py: argv -> Command
- commands.py: Command variants and the CommandHandler
- main.py: process entrypoint (settings, logging, load, dispatch, exit code)
"""

# API server options
#
# Top-level packages live directly under src/:
#   core          - server config, config API types, scheme/codec registry
#   observability - logging
#   options       - command-line option components
#   server        - startup sequence

__all__ = [
    "core",
    "observability",
    "options",
    "server",
]

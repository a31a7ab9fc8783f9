# Core package - foundational components
#
# Modules:
# - config: SDK settings and credentials
# - logging: Structured logging

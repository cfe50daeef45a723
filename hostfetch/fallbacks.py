"""
Per-fact default values, used until (or unless) a host query succeeds.
"""

UNKNOWN_USER = "unknown-user"
UNKNOWN_HOST = "unknown-host"

UNKNOWN_OS = "Unknown OS"
UNKNOWN_ARCH = ""

UNKNOWN_KERNEL = "-.-.-"

UNKNOWN_ENGINE = "Python Engine"

UNKNOWN_UPTIME = "? day, ? hour, ? min"

UNKNOWN_CPU = "Common CPU"

UNKNOWN_MEMORY = "? GiB"

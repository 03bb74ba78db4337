"""Built-in configuration defaults.

These values are written by the build/install step for the target system
and are used whenever no environment override is present.
"""

from collections.abc import Mapping

BUILTIN_DEFAULTS: Mapping[str, str] = {
    "atf_libexecdir": "/usr/local/libexec",
    "atf_pkgdatadir": "/usr/local/share/atf",
    "atf_shell": "/bin/sh",
}

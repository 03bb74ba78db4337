"""Models for resolved configuration values."""

from pydantic import Field

from atf_core.models.base import Model


class ConfigValues(Model):
    """Resolved value of every recognized configuration key.

    The set of fields is the closed set of keys the configuration exposes.
    """

    atf_libexecdir: str = Field(
        ..., description="Directory holding the framework's helper executables"
    )
    atf_pkgdatadir: str = Field(
        ..., description="Directory holding the framework's shared data files"
    )
    atf_shell: str = Field(..., description="Shell interpreter used by shell tests")

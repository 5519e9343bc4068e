"""Package settings read from ``ENVGET_*`` environment variables.

Priority chain (highest to lowest):
  1. Init kwargs  — passed by the application
  2. Env vars     — ``ENVGET_`` prefix
  3. Code defaults

These settings govern envget itself. An explicitly constructed
:class:`~envget.resolver.Resolver` never consults them; only
:func:`~envget.resolver.from_environ` does.
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, PydanticBaseSettingsSource


class EnvgetSettings(BaseSettings):
    """Frozen settings for envget.

    Attributes:
        empty_is_missing: Treat a present-but-empty variable as unset.
        verbose: Enable DEBUG-level output for the ``envget`` logger.
        log_json: Render log lines as JSON instead of console output.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "ENVGET_",
    }

    empty_is_missing: bool = False
    verbose: bool = False
    log_json: bool = False

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Init kwargs and env vars only; no dotenv or secrets files."""
        return (init_settings, env_settings)

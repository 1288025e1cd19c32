"""User-facing guidance messages.

Rendered with Jinja2 so the wording lives in one place per message. Every
message names the concrete action that fixes the problem: a pip extra to
install or a configuration switch to flip. Disabled format names are listed
comma-joined without spaces so they can be pasted into a pip command.
"""

from collections.abc import Sequence

from jinja2 import Environment, StrictUndefined

from statcodec.capabilities import DISABLED_IN_CONFIG, CapabilitySet
from statcodec.utils.preflight import PACKAGE_NAME, install_command

_env = Environment(
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
    undefined=StrictUndefined,
)

NOT_INSTALLED_TEMPLATE = _env.from_string(
    """This installation of {{ package }} has no '{{ format }}' serialization support. \
To enable it, reinstall {{ package }} with the '{{ feature }}' extra.

    {{ install }}

If you want to enable all supported serialization formats, you can use the 'all' extra.

    {{ install_all }}
{% if disabled %}

Currently disabled formats: {{ disabled | join(",") }}
{% endif %}
"""
)

DISABLED_IN_CONFIG_TEMPLATE = _env.from_string(
    """Serialization format '{{ format }}' is disabled in the configuration\
{% if config_path %} ({{ config_path }}){% endif %}. To enable it, set:

    formats:
      {{ format }}: true
{% if disabled %}

Currently disabled formats: {{ disabled | join(",") }}
{% endif %}
"""
)

PARSE_FAILURE_TEMPLATE = _env.from_string(
    """Failed to parse input: {{ source }}

Enabled formats: {{ supported | join(", ") if supported else "none" }}
{% if not_installed %}

This installation of {{ package }} was installed without serialization support for the following formats:

    {{ not_installed | join(",") }}

You may want to install any comma separated combination of {{ all | join(",") }}:

    pip install --upgrade '{{ package }}[{{ not_installed_features | join(",") }}]'

Or use the 'all' extra:

    {{ install_all }}
{% endif %}
{% if disabled_in_config %}

The following formats are disabled in the configuration:

    {{ disabled_in_config | join(",") }}
{% endif %}
"""
)


def configuration_error_message(
    format_name: str,
    feature: str,
    reason: str,
    config_path: str | None = None,
    disabled: Sequence[str] = (),
) -> str:
    """Explain how to enable a known but disabled format.

    Args:
        format_name: The requested format
        feature: pip extra providing the format
        reason: Disabled reason from the capability set
        config_path: Configuration file that switched the format off, if any
        disabled: Every currently disabled format, in catalog order
    """
    if reason == DISABLED_IN_CONFIG:
        return DISABLED_IN_CONFIG_TEMPLATE.render(
            format=format_name, config_path=config_path, disabled=list(disabled)
        )
    return NOT_INSTALLED_TEMPLATE.render(
        package=PACKAGE_NAME,
        format=format_name,
        feature=feature,
        install=install_command(feature),
        install_all=install_command("all"),
        disabled=list(disabled),
    )


def parse_failure_message(source: str, capabilities: CapabilitySet) -> str:
    """Explain that no enabled codec accepted an input.

    Lists enabled formats and, split by cause, the disabled ones with the
    action that would enable them.
    """
    not_installed: list[str] = []
    features: list[str] = []
    disabled_in_config: list[str] = []
    for name in capabilities.not_supported():
        if capabilities.disabled_reason(name) == DISABLED_IN_CONFIG:
            disabled_in_config.append(name)
            continue
        not_installed.append(name)
        spec = capabilities.spec(name)
        features.append(spec.feature if spec else name)

    return PARSE_FAILURE_TEMPLATE.render(
        package=PACKAGE_NAME,
        source=source,
        supported=capabilities.supported(),
        all=capabilities.all(),
        not_installed=not_installed,
        not_installed_features=features,
        disabled_in_config=disabled_in_config,
        install_all=install_command("all"),
    )

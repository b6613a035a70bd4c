"""Observability configuration using Logfire.

Usage:
    import logfire

    # Structured logging
    logfire.info("Person added", name=str(person.name))

    # Spans around model changes
    with logfire.span("model_manager.set_person", name=str(target.name)):
        ...
"""

import logfire

from rolodex.config import Settings
from rolodex.util.error import ConfigurationError


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for observability.

    Sending to Logfire cloud follows ``send_to_logfire`` when set, otherwise
    it is enabled exactly when a token is configured.

    Args:
        settings: Application settings

    Raises:
        ConfigurationError: If sending is forced on without a token
    """
    observability = settings.observability
    if observability.send_to_logfire is not None:
        send_to_logfire = observability.send_to_logfire
    else:
        send_to_logfire = bool(observability.logfire_token)

    if send_to_logfire and not observability.logfire_token:
        raise ConfigurationError(
            "OBSERVABILITY__SEND_TO_LOGFIRE is set but no OBSERVABILITY__LOGFIRE_TOKEN"
        )

    config_kwargs = {
        "service_name": "rolodex",
        "service_version": "0.1.0",
        "environment": settings.environment,
        "send_to_logfire": send_to_logfire,
        "console": (
            logfire.ConsoleOptions(
                colors="auto",
                span_style="show-parents",
                include_timestamps=True,
                verbose=settings.debug,
            )
            if observability.console
            else False
        ),
    }

    if observability.logfire_token:
        config_kwargs["token"] = observability.logfire_token

    logfire.configure(**config_kwargs)

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        debug=settings.debug,
        send_to_logfire=send_to_logfire,
        has_token=bool(observability.logfire_token),
    )
